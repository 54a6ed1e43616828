from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Generic, List, Tuple

from .contracts import E, V


@dataclass(frozen=True)
class Path(Generic[V, E]):
    """
    Route found by one search call.

    ``edges`` form a chain starting at ``start``: each edge begins where the
    previous one ends. With no edges the route ends at ``start`` itself.
    ``visited`` holds every vertex the search touched, which includes all
    vertices on the route. ``total_weight`` is the summed edge weight for the
    weighted searches and stays 0.0 for depth/breadth-first results.

    ``vertices`` lists the stops from ``start`` to the end. Searches fill it
    with the registered vertices they walked; when omitted it is taken from
    the edge targets.
    """

    start: V
    edges: Tuple[E, ...] = ()
    total_weight: float = 0.0
    visited: FrozenSet[V] = field(default_factory=frozenset)
    vertices: Tuple[V, ...] = ()

    def __post_init__(self) -> None:
        if not self.vertices:
            stops = (self.start,) + tuple(edge.target for edge in self.edges)
            object.__setattr__(self, "vertices", stops)
        elif len(self.vertices) != len(self.edges) + 1:
            raise ValueError(
                f"A path of {len(self.edges)} edges needs {len(self.edges) + 1} "
                f"vertices, got {len(self.vertices)}."
            )

    @property
    def end(self) -> V:
        return self.vertices[-1]

    @property
    def hop_count(self) -> int:
        return len(self.edges)

    @property
    def vertex_ids(self) -> List[str]:
        return [vertex.id for vertex in self.vertices]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.id,
            "vertices": self.vertex_ids,
            "hop_count": self.hop_count,
            "total_weight": self.total_weight,
            "visited": sorted(vertex.id for vertex in self.visited),
        }

    def __str__(self) -> str:
        return (
            f"Weight={self.total_weight:f} Length={len(self.edges) + 1} "
            f"Visited={len(self.visited)} ({', '.join(self.vertex_ids)})"
        )
