# io/route_logging.py
import json
import logging
import sys

from campus_nav.routing.hooks import NoopHooks
from campus_nav.routing.resolver import InvalidQuery, Route, RouteNotFound


class _RouteRecordFormatter(logging.Formatter):
    """One JSON object per record; query fields travel in ``record.route``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "event": record.getMessage(),
        }
        fields = getattr(record, "route", None)
        if isinstance(fields, dict):
            payload.update(fields)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def route_logger(stream=None, level="INFO", name="campus_nav.route") -> logging.Logger:
    """
    Logger for query logs with a single JSON handler writing to ``stream``
    (stderr when omitted). Calling it again swaps the handler, so the latest
    stream wins; stdout stays free for command output.
    """
    log = logging.getLogger(name)
    for h in [h for h in log.handlers if isinstance(h.formatter, _RouteRecordFormatter)]:
        log.removeHandler(h)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_RouteRecordFormatter())
    log.addHandler(handler)
    log.setLevel(level)
    log.propagate = False
    return log


class RouteLogging(NoopHooks):
    """
    One place to shape and emit structured logs for route queries.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        stream=None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or route_logger(stream=stream, level=level)

    def _emit(self, level: str, msg: str, **fields):
        self.log.log(getattr(logging, level), msg, extra={"route": {"run_id": self.run_id, **fields}})

    # query lifecycle

    def query_start(self, *, start, end, algorithm, accessible_only):
        self._emit(
            "INFO",
            "query_start",
            start=start,
            end=end,
            algorithm=algorithm,
            accessible_only=accessible_only,
        )

    def pair_searched(self, *, start_id, end_id, hops, distance):
        if self.debug:
            self._emit(
                "DEBUG", "pair_searched", start_id=start_id, end_id=end_id, hops=hops, distance=distance
            )

    def query_end(self, outcome, *, pairs, wall_ms):
        if isinstance(outcome, Route):
            self._emit(
                "INFO",
                "route_found",
                start_id=outcome.start_id,
                end_id=outcome.end_id,
                hops=len(outcome.path) - 1,
                distance_m=round(outcome.distance, 2),
                pairs=pairs,
                wall_ms=round(wall_ms, 3),
            )
        elif isinstance(outcome, RouteNotFound):
            self._emit(
                "INFO",
                "route_not_found",
                start=outcome.start,
                end=outcome.end,
                pairs=pairs,
                wall_ms=round(wall_ms, 3),
            )

    def rejected(self, outcome: InvalidQuery, *, start, end):
        self._emit(
            "WARNING",
            "query_rejected",
            reason=outcome.reason.value,
            detail=outcome.detail,
            start=start,
            end=end,
        )
