# routing/metrics.py
from collections.abc import Sequence

from campus_nav.domain.entities.geography import NodeId
from campus_nav.domain.graph import CampusGraph
from campus_nav.routing.search import eligible_edges


def path_weight(graph: CampusGraph, path: Sequence[NodeId], accessible_only: bool = False) -> float:
    total = 0.0
    for u, v in zip(path, path[1:]):
        # first matching edge wins; a missing edge adds nothing
        e = next((e for e in eligible_edges(graph, u, accessible_only) if e.target == v), None)
        if e is not None:
            total += e.weight
    return total


def path_distance(
    graph: CampusGraph,
    path: Sequence[NodeId],
    meters_per_unit: float = 1.0,
    accessible_only: bool = False,
) -> float:
    """Summed edge weight converted to meters with one fixed scale."""
    return path_weight(graph, path, accessible_only) * meters_per_unit
