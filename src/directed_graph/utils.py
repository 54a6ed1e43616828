from __future__ import annotations

from typing import Any, Dict

import networkx as nx

from .graph import DirectedGraph
from .models import SimpleEdge, SimpleVertex

DEFAULT_WEIGHT_ATTRIBUTE = "weight"
DEFAULT_EDGE_WEIGHT = 1.0


def from_networkx(
    graph: nx.Graph,
    weight: str = DEFAULT_WEIGHT_ATTRIBUTE,
    verbose: bool = False,
) -> DirectedGraph[SimpleVertex, SimpleEdge]:
    """
    Build a DirectedGraph keyed by unique node names.

    A node's ``name`` attribute is used as vertex id when present, otherwise
    the node key. Undirected graphs yield one edge in each direction.
    """

    result: DirectedGraph[SimpleVertex, SimpleEdge] = DirectedGraph(verbose=verbose)
    vertex_by_node: Dict[Any, SimpleVertex] = {}

    for node, attrs in graph.nodes(data=True):
        node_name = str(attrs.get("name", node))
        if node_name in result:
            raise ValueError(
                f"Duplicate node name '{node_name}' detected. "
                "Node names must be unique to be used as vertex ids."
            )
        extra = {key: value for key, value in attrs.items() if key != "name"}
        vertex = SimpleVertex(node_name, attributes=extra)
        result.add_or_get_vertex(vertex)
        vertex_by_node[node] = vertex

    def _add(source: Any, target: Any, attrs: Dict[str, Any]) -> None:
        extra = {key: value for key, value in attrs.items() if key != weight}
        result.add_or_get_edge(
            SimpleEdge(
                vertex_by_node[source],
                vertex_by_node[target],
                weight=float(attrs.get(weight, DEFAULT_EDGE_WEIGHT)),
                attributes=extra,
            )
        )

    for source, target, attrs in graph.edges(data=True):
        _add(source, target, attrs)
        if not graph.is_directed():
            _add(target, source, attrs)

    return result


def to_networkx(
    graph: DirectedGraph[Any, Any], weight: str = DEFAULT_WEIGHT_ATTRIBUTE
) -> nx.DiGraph:
    """Export vertex ids and edges; an edge's ``weight`` attribute is copied if present."""

    digraph = nx.DiGraph()
    for vertex in graph.vertices:
        digraph.add_node(vertex.id, **dict(getattr(vertex, "attributes", {})))
    for vertex in graph.vertices:
        for edge in vertex.edges:
            attrs = dict(getattr(edge, "attributes", {}))
            edge_weight = getattr(edge, "weight", None)
            if edge_weight is not None:
                attrs[weight] = edge_weight
            digraph.add_edge(edge.source.id, edge.target.id, **attrs)
    return digraph
