# routing/hooks.py
from typing import Protocol


class RouteHooks(Protocol):
    def query_start(self, *, start: str, end: str, algorithm: str, accessible_only: bool): ...
    def pair_searched(self, *, start_id, end_id, hops: int, distance: float | None): ...
    def query_end(self, outcome, *, pairs: int, wall_ms: float): ...
    def rejected(self, outcome, *, start, end): ...


class NoopHooks:
    def query_start(self, **_):
        pass

    def pair_searched(self, **_):
        pass

    def query_end(self, *_, **__):
        pass

    def rejected(self, *_, **__):
        pass
