"""Public package interface."""

from .contracts import GraphEdge, GraphVertex
from .graph import DirectedGraph
from .models import SimpleEdge, SimpleVertex
from .path import Path
from .search import (
    a_star_shortest_path,
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    zero_heuristic,
)
from .utils import from_networkx, to_networkx
from .validation import validate_path

__all__ = [
    "DirectedGraph",
    "GraphEdge",
    "GraphVertex",
    "Path",
    "SimpleEdge",
    "SimpleVertex",
    "a_star_shortest_path",
    "breadth_first_search",
    "depth_first_search",
    "dijkstra_shortest_path",
    "from_networkx",
    "to_networkx",
    "validate_path",
    "zero_heuristic",
]
