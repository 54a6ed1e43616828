from __future__ import annotations

import networkx as nx
import pytest

from directed_graph import (
    DirectedGraph,
    Path,
    SimpleEdge,
    SimpleVertex,
    breadth_first_search,
    from_networkx,
    to_networkx,
    validate_path,
)


def build_line_graph() -> nx.Graph:
    graph = nx.Graph()
    names = ["A", "B", "C", "D"]
    for idx, name in enumerate(names):
        graph.add_node(idx, name=name, population=idx * 1000)
    for left, right in zip(range(len(names) - 1), range(1, len(names))):
        graph.add_edge(left, right, weight=2.0 * right, relation="road")
    return graph


def test_from_networkx_uses_names_and_both_directions() -> None:
    graph = from_networkx(build_line_graph())

    assert graph.num_vertices == 4
    assert graph.num_edges == 6
    a = graph.get_vertex_by_id("A")
    b = graph.get_vertex_by_id("B")
    assert a is not None and b is not None
    assert a.attributes == {"population": 0}

    forward = a.edge_to(b)
    backward = b.edge_to(a)
    assert forward is not None and backward is not None
    assert forward.weight == backward.weight == 2.0
    assert forward.attributes == {"relation": "road"}


def test_from_networkx_keeps_direction_of_digraph() -> None:
    digraph = nx.DiGraph()
    digraph.add_edge("x", "y")

    graph = from_networkx(digraph)

    assert graph.num_edges == 1
    y = graph.get_vertex_by_id("y")
    assert y is not None and y.edges == []
    x = graph.get_vertex_by_id("x")
    assert x is not None and x.edges[0].weight == 1.0


def test_from_networkx_reads_custom_weight_attribute() -> None:
    digraph = nx.DiGraph()
    digraph.add_edge("x", "y", length=12.5)

    graph = from_networkx(digraph, weight="length")

    x = graph.get_vertex_by_id("x")
    assert x is not None
    assert x.edges[0].weight == 12.5
    assert x.edges[0].attributes == {}


def test_from_networkx_rejects_duplicate_names() -> None:
    graph = nx.Graph()
    graph.add_node(0, name="A")
    graph.add_node(1, name="A")

    with pytest.raises(ValueError):
        from_networkx(graph)


def test_to_networkx_exports_edges_and_weights() -> None:
    graph = from_networkx(build_line_graph())

    exported = to_networkx(graph)

    assert isinstance(exported, nx.DiGraph)
    assert set(exported.nodes()) == {"A", "B", "C", "D"}
    assert exported.number_of_edges() == 6
    assert exported.edges["C", "D"]["weight"] == 6.0
    assert exported.edges["D", "C"]["relation"] == "road"
    assert exported.nodes["B"]["population"] == 1000


def test_validate_path_accepts_search_result() -> None:
    graph = from_networkx(build_line_graph())
    path = breadth_first_search(graph, "A", "D")

    result = validate_path(path, graph, "A", "D")

    assert result["is_valid"] is True
    assert result["path_length"] == 3
    assert result["errors"] == []
    assert result["weight_match"] is True


def test_validate_path_reports_missing_path() -> None:
    graph: DirectedGraph[SimpleVertex, SimpleEdge] = DirectedGraph()

    result = validate_path(None, graph, "A", "B", expected_weight=3.0)

    assert result["is_valid"] is False
    assert result["weight_match"] is False
    assert result["errors"] == ["No path."]


def test_validate_path_reports_broken_chain_and_wrong_ends() -> None:
    graph: DirectedGraph[SimpleVertex, SimpleEdge] = DirectedGraph()
    a, b, c, d = (SimpleVertex(name) for name in "ABCD")
    first, second = SimpleEdge(a, b), SimpleEdge(c, d)
    graph.add_edges(first, second)
    path = Path(start=a, edges=(first, second), total_weight=2.0)

    result = validate_path(path, graph, "A", "C", expected_weight=5.0)

    assert result["is_valid"] is False
    assert result["chain_connected"] is False
    assert result["source_match"] is True
    assert result["target_match"] is False
    assert result["weight_match"] is False
    assert len(result["errors"]) == 2


def test_validate_path_reports_removed_vertices() -> None:
    graph: DirectedGraph[SimpleVertex, SimpleEdge] = DirectedGraph()
    a, b = SimpleVertex("A"), SimpleVertex("B")
    path = Path(start=a, edges=(SimpleEdge(a, b),))
    graph.add_vertices(a)

    result = validate_path(path, graph, "A", "B")

    assert result["all_nodes_exist"] is False
    assert result["is_valid"] is False


def test_validate_path_reports_edges_missing_from_graph() -> None:
    graph: DirectedGraph[SimpleVertex, SimpleEdge] = DirectedGraph()
    a, b = SimpleVertex("A"), SimpleVertex("B")
    graph.add_vertices(a, b)
    path = Path(start=a, edges=(SimpleEdge(a, b),))

    result = validate_path(path, graph, "A", "B")

    assert result["all_nodes_exist"] is True
    assert result["chain_connected"] is True
    assert result["all_edges_exist"] is False
    assert result["is_valid"] is False
    assert result["errors"] == ["Missing edges in graph: [('A', 'B')]."]


def test_path_vertices_default_to_edge_targets() -> None:
    a, b, c = SimpleVertex("A"), SimpleVertex("B"), SimpleVertex("C")
    path = Path(start=a, edges=(SimpleEdge(a, b), SimpleEdge(b, c)))

    assert path.vertices == (a, b, c)
    assert path.end is c
    assert Path(start=a).end is a


def test_path_rejects_vertex_count_not_matching_edges() -> None:
    a, b = SimpleVertex("A"), SimpleVertex("B")

    with pytest.raises(ValueError):
        Path(start=a, edges=(SimpleEdge(a, b),), vertices=(a, b, a))
