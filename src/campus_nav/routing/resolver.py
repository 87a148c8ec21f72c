# routing/resolver.py
"""
Name-to-name routing.

One display name can map to several graph nodes (e.g. the entrances of one
building). RouteFinder tries every (start node, end node) pair for the chosen
names with the selected search and keeps the shortest non-empty path.

Outcomes are values, not exceptions:
  • Route          - best path and its distance in meters
  • RouteNotFound  - the names are valid but no pair is connected
  • InvalidQuery   - nothing selected, same name twice, or an unknown name
"""

import time
from dataclasses import dataclass

from campus_nav.domain.entities.geography import NodeId, Path
from campus_nav.domain.graph import CampusGraph
from campus_nav.domain.locations import LocationIndex
from campus_nav.io.business_events import QueryRejectedBiz, RouteFoundBiz, RouteMissingBiz
from campus_nav.io.recorder import Recorder
from campus_nav.routing.hooks import NoopHooks, RouteHooks
from campus_nav.routing.metrics import path_distance
from campus_nav.runtime.registries import make_search
from campus_nav.runtime.types import Algorithm, RejectReason


@dataclass(frozen=True)
class Route:
    path: Path
    distance: float  # meters
    start_id: NodeId
    end_id: NodeId
    algorithm: Algorithm
    accessible_only: bool = False
    ok = True


@dataclass(frozen=True)
class RouteNotFound:
    start: str
    end: str
    pairs: int
    ok = False


@dataclass(frozen=True)
class InvalidQuery:
    reason: RejectReason
    detail: str = ""
    ok = False


RouteOutcome = Route | RouteNotFound | InvalidQuery

_MESSAGES = {
    RejectReason.MISSING_SELECTION: "Please select both start and end locations.",
    RejectReason.SAME_LOCATION: "Start and end locations cannot be the same.",
    RejectReason.UNKNOWN_LOCATION: "Unknown location",
}


def reject_message(q: InvalidQuery) -> str:
    base = _MESSAGES[q.reason]
    return f"{base} ({q.detail})" if q.detail else base


class RouteFinder:
    def __init__(
        self,
        graph: CampusGraph,
        locations: LocationIndex | None = None,
        *,
        meters_per_unit: float = 1.0,
        hooks: RouteHooks | None = None,
        recorder: Recorder | None = None,
        run_id: str = "local",
    ):
        self.graph = graph
        self.locations = (
            locations if locations is not None else LocationIndex.from_nodes(graph.nodes.values())
        )
        self.meters_per_unit = meters_per_unit
        self._hooks = hooks or NoopHooks()
        self.recorder = recorder
        self.run_id = run_id
        self._seq = 0

    def validate(self, start_name: str | None, end_name: str | None) -> InvalidQuery | None:
        s, e = (start_name or "").strip(), (end_name or "").strip()
        if not s or not e:
            return InvalidQuery(RejectReason.MISSING_SELECTION)
        if s == e:
            return InvalidQuery(RejectReason.SAME_LOCATION, s)
        missing = [n for n in (s, e) if n not in self.locations]
        if missing:
            return InvalidQuery(RejectReason.UNKNOWN_LOCATION, ", ".join(missing))
        return None

    def find_route(
        self,
        start_name: str | None,
        end_name: str | None,
        algorithm: Algorithm | str = Algorithm.DIJKSTRA,
        accessible_only: bool = False,
    ) -> RouteOutcome:
        alg = Algorithm.parse(algorithm)
        self._seq += 1
        common = dict(
            run_id=self.run_id,
            seq=self._seq,
            start=start_name,
            end=end_name,
            algorithm=alg.value,
            accessible_only=accessible_only,
        )

        invalid = self.validate(start_name, end_name)
        if invalid is not None:
            self._hooks.rejected(invalid, start=start_name, end=end_name)
            self._emit(QueryRejectedBiz(name="QueryRejected", reason=invalid.reason.value, **common))
            return invalid

        t0 = time.perf_counter()
        self._hooks.query_start(
            start=start_name, end=end_name, algorithm=alg.value, accessible_only=accessible_only
        )
        outcome, pairs = self._best(start_name, end_name, alg, accessible_only)
        self._hooks.query_end(outcome, pairs=pairs, wall_ms=(time.perf_counter() - t0) * 1000)

        if isinstance(outcome, Route):
            self._emit(
                RouteFoundBiz(
                    name="RouteFound",
                    path=outcome.path,
                    distance_m=outcome.distance,
                    pairs=pairs,
                    **common,
                )
            )
        else:
            self._emit(RouteMissingBiz(name="RouteMissing", pairs=pairs, **common))
        return outcome

    def _best(
        self, start_name: str, end_name: str, alg: Algorithm, accessible_only: bool
    ) -> tuple[Route | RouteNotFound, int]:
        search = make_search(alg)
        best: Route | None = None
        pairs = 0
        for s in self.locations.node_ids(start_name):
            for e in self.locations.node_ids(end_name):
                pairs += 1
                path = search(self.graph, s, e, accessible_only)
                if not path:
                    self._hooks.pair_searched(start_id=s, end_id=e, hops=0, distance=None)
                    continue
                d = path_distance(self.graph, path, self.meters_per_unit, accessible_only)
                self._hooks.pair_searched(start_id=s, end_id=e, hops=len(path) - 1, distance=d)
                # strict < keeps the first-found pair on ties
                if best is None or d < best.distance:
                    best = Route(path, d, s, e, alg, accessible_only)
        if best is None:
            return RouteNotFound(start_name.strip(), end_name.strip(), pairs), pairs
        return best, pairs

    def _emit(self, ev) -> None:
        if self.recorder:
            self.recorder.emit(ev)
