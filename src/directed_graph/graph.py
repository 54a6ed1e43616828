from __future__ import annotations

from typing import Dict, Generic, Iterable, Optional, Set, ValuesView

from .contracts import E, V


def find_edge_to(edges: Iterable[E], target_id: str) -> Optional[E]:
    """Return the first edge in ``edges`` that leads to ``target_id``."""

    for edge in edges:
        if edge.target.id == target_id:
            return edge
    return None


class DirectedGraph(Generic[V, E]):
    """
    Registry of vertices keyed by id. Each vertex owns its outgoing edges.

    Representation invariants, held between public calls:
    - stored vertices are unique by id
    - every edge filed under a stored vertex has that exact instance as source
    - a vertex's edges all originate at it, at most one per target id
    """

    def __init__(self, *, verbose: bool = False) -> None:
        self.verbose = verbose
        self._vertices: Dict[str, V] = {}

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    @property
    def vertices(self) -> ValuesView[V]:
        return self._vertices.values()

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return sum(len(vertex.edges) for vertex in self._vertices.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def get_vertex_by_id(self, vertex_id: str) -> Optional[V]:
        return self._vertices.get(vertex_id)

    def add_or_get_vertex(self, vertex: V) -> V:
        """Store ``vertex`` unless its id is taken; return the stored instance."""

        existing = self._vertices.get(vertex.id)
        if existing is not None:
            return existing
        self._vertices[vertex.id] = vertex
        return vertex

    def add_vertices(self, *vertices: V) -> int:
        count = 0
        for vertex in vertices:
            if self.add_or_get_vertex(vertex) is vertex:
                count += 1
        return count

    def add_or_get_edge(self, edge: E) -> E:
        """
        File ``edge`` under its source vertex, registering missing endpoints.

        Returns the source's edge towards ``edge.target`` (which is ``edge``
        itself when it was just added). When ``edge.source`` is not the
        instance registered under its id, ``edge`` is returned as-is and
        nothing is filed under the registered vertex.

        Raises ValueError when both endpoints are stale duplicates of
        vertices already registered under the same ids.
        """

        source = edge.source
        target = edge.target
        registered_source = self._vertices.get(source.id)
        registered_target = self._vertices.get(target.id)
        if (
            registered_source is not None
            and registered_source is not source
            and registered_target is not None
            and registered_target is not target
        ):
            self._log(
                f"Rejected edge {source.id!r} -> {target.id!r}: "
                "both endpoints collide with registered vertices."
            )
            raise ValueError(
                f"Edge {source.id!r} -> {target.id!r} references vertex instances "
                "that differ from the vertices registered under the same ids."
            )

        registered_source = self.add_or_get_vertex(source)
        self.add_or_get_vertex(target)

        existing = find_edge_to(source.edges, target.id)
        if existing is None:
            source.edges.append(edge)
            existing = edge

        if registered_source is source:
            return existing
        return edge

    def add_edges(self, *edges: E) -> int:
        count = 0
        for edge in edges:
            if self.add_or_get_edge(edge) is edge:
                count += 1
        return count

    def remove_unconnected_vertices(self) -> int:
        """
        Drop vertices without outgoing and without incoming edges.

        A vertex with no outgoing edges that is still the target of some
        edge is kept. Returns the number of vertices removed.
        """

        unconnected: Set[str] = {
            vertex_id for vertex_id, vertex in self._vertices.items() if not vertex.edges
        }
        for vertex in self._vertices.values():
            for edge in vertex.edges:
                unconnected.discard(edge.target.id)

        for vertex_id in unconnected:
            del self._vertices[vertex_id]

        if unconnected:
            self._log(
                f"Removed {len(unconnected)} unconnected vertices "
                f"({self.num_vertices} remaining)."
            )
        return len(unconnected)

    def __str__(self) -> str:
        return "{ " + ",\n  ".join(str(vertex) for vertex in self._vertices.values()) + "\n}"
