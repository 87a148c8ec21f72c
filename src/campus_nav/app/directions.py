# app/directions.py
"""Readable summaries of a route for display or for an external text generator."""

from collections.abc import Sequence
from dataclasses import dataclass

from campus_nav.domain.entities.geography import NodeId
from campus_nav.domain.graph import CampusGraph
from campus_nav.routing.resolver import Route

PLACEHOLDER = "node"  # unnamed junctions are labelled e.g. "node 17"


@dataclass(frozen=True)
class RouteDescription:
    stops: tuple[str, ...]
    steps: tuple[str, ...]
    prompt: str
    distance_m: float


def readable_stops(graph: CampusGraph, path: Sequence[NodeId]) -> tuple[str, ...]:
    names = []
    for nid in path:
        node = graph.node(nid)
        label = node.label if node else ""
        if not label or PLACEHOLDER in label.lower():
            continue
        if names and names[-1] == label:
            continue
        names.append(label)
    return tuple(names)


def walking_steps(stops: Sequence[str]) -> tuple[str, ...]:
    return tuple(f"Walk from {a} to {b}." for a, b in zip(stops, stops[1:]))


def route_prompt(stops: Sequence[str], distance_m: float) -> str:
    return (
        "Generate short, clear, human-like walking directions for the following route:\n"
        f"{' → '.join(stops)}.\n"
        'Avoid "node" or "unnamed" terms.\n'
        f"Total walking distance: {distance_m:.2f} meters."
    )


def describe(route: Route, graph: CampusGraph) -> RouteDescription:
    stops = readable_stops(graph, route.path)
    return RouteDescription(
        stops=stops,
        steps=walking_steps(stops),
        prompt=route_prompt(stops, route.distance),
        distance_m=route.distance,
    )
