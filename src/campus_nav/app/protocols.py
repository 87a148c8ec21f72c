from typing import Protocol, runtime_checkable

from campus_nav.domain.entities.geography import NodeId, Path
from campus_nav.domain.graph import CampusGraph
from campus_nav.io.business_events import QueryEvent


@runtime_checkable
class SearchFn(Protocol):
    """
    Responsibilities:
      • Find a path from start to end over the graph's outgoing edges.
      • Honor the accessibility filter by ignoring non-accessible edges.
    Returns (start,) when start == end and () when end is unreachable.
    """

    def __call__(
        self, graph: CampusGraph, start: NodeId, end: NodeId, accessible_only: bool = False
    ) -> Path: ...


@runtime_checkable
class Sink(Protocol):
    """Receives one QueryEvent per finished route query."""

    def write(self, ev: QueryEvent) -> None: ...
