from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from .graph import DirectedGraph, find_edge_to
from .path import Path


def validate_path(
    path: Optional[Path[Any, Any]],
    graph: DirectedGraph[Any, Any],
    source: str,
    target: str,
    expected_weight: Optional[float] = None,
) -> Dict[str, Any]:
    errors: List[str] = []

    if path is None:
        return {
            "is_valid": False,
            "path_length": 0,
            "errors": ["No path."],
            "source_match": False,
            "target_match": False,
            "all_nodes_exist": False,
            "all_edges_exist": False,
            "chain_connected": False,
            "weight_match": expected_weight is None,
            "expected_weight": expected_weight,
        }

    vertex_ids = path.vertex_ids
    source_match = vertex_ids[0] == source
    target_match = vertex_ids[-1] == target
    if not source_match:
        errors.append(f"Path starts with '{vertex_ids[0]}', expected '{source}'.")
    if not target_match:
        errors.append(f"Path ends with '{vertex_ids[-1]}', expected '{target}'.")

    missing_nodes = [vertex_id for vertex_id in vertex_ids if vertex_id not in graph]
    all_nodes_exist = len(missing_nodes) == 0
    if missing_nodes:
        errors.append(f"Missing vertices in graph: {missing_nodes}.")

    broken_links: List[tuple[str, str]] = []
    previous = path.start.id
    for edge in path.edges:
        if edge.source.id != previous:
            broken_links.append((previous, edge.source.id))
        previous = edge.target.id

    chain_connected = len(broken_links) == 0
    if broken_links:
        errors.append(f"Edges do not connect at: {broken_links}.")

    missing_edges: List[tuple[str, str]] = []
    for edge in path.edges:
        owner = graph.get_vertex_by_id(edge.source.id)
        if owner is None or find_edge_to(owner.edges, edge.target.id) is None:
            missing_edges.append((edge.source.id, edge.target.id))

    all_edges_exist = len(missing_edges) == 0
    if missing_edges:
        errors.append(f"Missing edges in graph: {missing_edges}.")

    if expected_weight is None:
        weight_match = True
    else:
        weight_match = math.isclose(path.total_weight, expected_weight)

    is_valid = (
        source_match
        and target_match
        and all_nodes_exist
        and all_edges_exist
        and chain_connected
    )

    return {
        "is_valid": is_valid,
        "path_length": path.hop_count,
        "errors": errors,
        "source_match": source_match,
        "target_match": target_match,
        "all_nodes_exist": all_nodes_exist,
        "all_edges_exist": all_edges_exist,
        "chain_connected": chain_connected,
        "weight_match": weight_match,
        "expected_weight": expected_weight,
    }
