# campus_nav/io/business_events.py

from dataclasses import asdict, dataclass


# Base type for query outcome events
@dataclass(frozen=True)
class QueryEvent:
    run_id: str
    seq: int  # per-finder query counter
    name: str  # stable event name
    start: str | None
    end: str | None
    algorithm: str
    accessible_only: bool

    def as_row(self) -> dict:
        """Flat, JSON-ready view of the event."""
        return asdict(self)


@dataclass(frozen=True)
class RouteFoundBiz(QueryEvent):
    path: tuple
    distance_m: float
    pairs: int

    def as_row(self) -> dict:
        row = super().as_row()
        row["path"] = list(self.path)
        row["hops"] = len(self.path) - 1
        row["distance_m"] = round(self.distance_m, 2)
        return row


@dataclass(frozen=True)
class RouteMissingBiz(QueryEvent):
    pairs: int


@dataclass(frozen=True)
class QueryRejectedBiz(QueryEvent):
    reason: str
