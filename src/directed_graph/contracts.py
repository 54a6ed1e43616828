from __future__ import annotations

from typing import Any, Callable, List, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class GraphVertex(Protocol):
    """Capabilities a vertex needs to be stored in a DirectedGraph.

    ``edges`` is owned by the vertex and holds its outgoing edges in insertion
    order. Implementations must be hashable; identity hashing is enough.
    """

    @property
    def id(self) -> str:
        ...

    @property
    def edges(self) -> List[Any]:
        ...


@runtime_checkable
class GraphEdge(Protocol):
    """Capabilities a directed edge needs: its two endpoint vertices."""

    @property
    def source(self) -> Any:
        ...

    @property
    def target(self) -> Any:
        ...


V = TypeVar("V", bound=GraphVertex)
E = TypeVar("E", bound=GraphEdge)

WeightFunction = Callable[[Any], float]
Heuristic = Callable[[Any, Any], float]
