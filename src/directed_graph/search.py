"""
Path searches over a DirectedGraph.

All searches take plain vertex ids and return a fresh ``Path`` or ``None``.
``None`` covers both an id that matches no vertex and a target that cannot be
reached from the start. The graph is only read, never modified.
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Generic, Iterator, List, Optional, Tuple

from .contracts import E, Heuristic, V, WeightFunction
from .graph import DirectedGraph
from .path import Path


def zero_heuristic(vertex: object, target: object) -> float:
    return 0.0


def _endpoints(
    graph: DirectedGraph[V, E], start_id: str, target_id: str
) -> Optional[Tuple[V, V]]:
    start = graph.get_vertex_by_id(start_id)
    target = graph.get_vertex_by_id(target_id)
    if start is None or target is None:
        return None
    return start, target


def _head(graph: DirectedGraph[V, E], edge: E) -> Optional[V]:
    # Edge targets are resolved through the registry so that searches always
    # walk stored instances.
    return graph.get_vertex_by_id(edge.target.id)


def _trace_back(
    last_edge: Optional[E], inbound_of: Callable[[str], Optional[E]]
) -> List[E]:
    edges: List[E] = []
    cursor = last_edge
    while cursor is not None:
        edges.append(cursor)
        cursor = inbound_of(cursor.source.id)
    edges.reverse()
    return edges


def _build_path(
    start: V,
    edges: List[E],
    visited: Dict[str, V],
    total_weight: float = 0.0,
) -> Path[V, E]:
    # Stops come from ``visited`` so the path lists the registered instances
    # the search walked, even where an edge holds a stale duplicate target.
    stops = (start,) + tuple(visited[edge.target.id] for edge in edges)
    return Path(
        start=start,
        edges=tuple(edges),
        total_weight=total_weight,
        visited=frozenset(visited.values()),
        vertices=stops,
    )


def depth_first_search(
    graph: DirectedGraph[V, E], start_id: str, target_id: str
) -> Optional[Path[V, E]]:
    """
    Find a path by depth-first search.

    Outgoing edges are tried in stored order and the first descent that
    reaches the target wins. The edge trail is trimmed whenever a branch is
    exhausted, so only edges leading to the target end up in the result.
    """

    endpoints = _endpoints(graph, start_id, target_id)
    if endpoints is None:
        return None
    start, target = endpoints

    visited: Dict[str, V] = {start.id: start}
    if start is target:
        return _build_path(start, [], visited)

    trail: List[E] = []
    stack: List[Iterator[E]] = [iter(start.edges)]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            if trail:
                trail.pop()
            continue

        neighbour = _head(graph, edge)
        if neighbour is None or neighbour.id in visited:
            continue
        visited[neighbour.id] = neighbour
        trail.append(edge)
        if neighbour is target:
            return _build_path(start, trail, visited)
        stack.append(iter(neighbour.edges))

    return None


def breadth_first_search(
    graph: DirectedGraph[V, E], start_id: str, target_id: str
) -> Optional[Path[V, E]]:
    """Find a path with the fewest edges by breadth-first search."""

    endpoints = _endpoints(graph, start_id, target_id)
    if endpoints is None:
        return None
    start, target = endpoints

    visited: Dict[str, V] = {start.id: start}
    if start is target:
        return _build_path(start, [], visited)

    inbound: Dict[str, Optional[E]] = {start.id: None}
    queue: Deque[V] = deque([start])
    while queue:
        current = queue.popleft()
        for edge in current.edges:
            neighbour = _head(graph, edge)
            if neighbour is None:
                continue
            visited[neighbour.id] = neighbour
            if neighbour is target:
                return _build_path(start, _trace_back(edge, inbound.get), visited)
            if neighbour.id not in inbound:
                inbound[neighbour.id] = edge
                queue.append(neighbour)

    return None


@dataclass
class _Progress(Generic[V, E]):
    vertex: V
    remaining: float
    weight_sum: float = math.inf
    inbound: Optional[E] = None
    settled: bool = False

    @property
    def estimate(self) -> float:
        return self.weight_sum + self.remaining


def a_star_shortest_path(
    graph: DirectedGraph[V, E],
    start_id: str,
    target_id: str,
    weight_of: WeightFunction,
    heuristic: Heuristic,
) -> Optional[Path[V, E]]:
    """
    Find the lightest path, guided by ``heuristic(vertex, target)``.

    The unsettled vertex with the smallest weight-so-far plus heuristic
    estimate is expanded next. Edge weights must be non-negative and the
    heuristic must never overestimate the remaining weight for the result to
    be optimal; neither is checked.
    """

    endpoints = _endpoints(graph, start_id, target_id)
    if endpoints is None:
        return None
    start, target = endpoints

    visited: Dict[str, V] = {start.id: start}
    if start is target:
        return _build_path(start, [], visited)

    progress: Dict[str, _Progress[V, E]] = {
        start.id: _Progress(start, remaining=heuristic(start, target), weight_sum=0.0)
    }
    counter = itertools.count()
    frontier: List[Tuple[float, int, str]] = [
        (progress[start.id].estimate, next(counter), start.id)
    ]

    def inbound_of(vertex_id: str) -> Optional[E]:
        state = progress.get(vertex_id)
        return state.inbound if state is not None else None

    while frontier:
        _, _, vertex_id = heapq.heappop(frontier)
        current = progress[vertex_id]
        if current.settled:
            continue
        current.settled = True

        if current.vertex is target:
            return _build_path(
                start,
                _trace_back(current.inbound, inbound_of),
                visited,
                total_weight=current.weight_sum,
            )

        for edge in current.vertex.edges:
            neighbour = _head(graph, edge)
            if neighbour is None:
                continue
            state = progress.get(neighbour.id)
            if state is None:
                state = _Progress(neighbour, remaining=heuristic(neighbour, target))
                progress[neighbour.id] = state
            if state.settled:
                continue

            weight_sum = current.weight_sum + weight_of(edge)
            if weight_sum < state.weight_sum:
                state.weight_sum = weight_sum
                state.inbound = edge
                visited[neighbour.id] = neighbour
                heapq.heappush(frontier, (state.estimate, next(counter), neighbour.id))

    return None


def dijkstra_shortest_path(
    graph: DirectedGraph[V, E],
    start_id: str,
    target_id: str,
    weight_of: WeightFunction,
) -> Optional[Path[V, E]]:
    """Find the lightest path; edge weights must be non-negative."""

    return a_star_shortest_path(graph, start_id, target_id, weight_of, zero_heuristic)
