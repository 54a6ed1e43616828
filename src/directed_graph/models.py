from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .graph import find_edge_to


@dataclass(eq=False)
class SimpleVertex:
    """Plain vertex keyed by ``id``; compared and hashed by identity."""

    id: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    edges: List["SimpleEdge"] = field(default_factory=list, repr=False)

    def edge_to(self, target: "SimpleVertex") -> "SimpleEdge | None":
        return find_edge_to(self.edges, target.id)

    def __str__(self) -> str:
        targets = " ".join(str(edge) for edge in self.edges)
        return f"{self.id}[{targets}]"


@dataclass(eq=False)
class SimpleEdge:
    """Directed, optionally weighted edge between two SimpleVertex objects."""

    source: SimpleVertex
    target: SimpleVertex
    weight: float = 1.0
    attributes: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.id,
            "target": self.target.id,
            "weight": self.weight,
            "attributes": dict(self.attributes),
        }

    def __str__(self) -> str:
        return f"{self.source.id}->{self.target.id}"
