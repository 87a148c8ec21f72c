# io/recorder.py
import json
import logging
import sys

from campus_nav.app.protocols import Sink
from campus_nav.io.business_events import QueryEvent

logger = logging.getLogger(__name__)


class JsonlSink:
    """One JSON row per query outcome, as produced by QueryEvent.as_row."""

    def __init__(self, fp=None):
        self.fp = fp if fp is not None else sys.stdout

    def write(self, ev: QueryEvent) -> None:
        self.fp.write(json.dumps(ev.as_row(), default=str) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list[QueryEvent] = []

    def write(self, ev: QueryEvent) -> None:
        self.events.append(ev)


class Recorder:
    """
    Hands each query outcome to every sink.
    A sink that raises is skipped for that event and counted in ``dropped``;
    the query itself still returns its outcome.
    """

    def __init__(self, *sinks: Sink):
        for s in sinks:
            if not isinstance(s, Sink):
                raise TypeError(f"{type(s).__name__} is not a sink (no write(event) method)")
        self.sinks = sinks or (JsonlSink(),)
        self.dropped = 0

    def emit(self, ev: QueryEvent) -> None:
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                self.dropped += 1
                logger.exception(
                    "%s lost %s #%d of run %s", type(s).__name__, ev.name, ev.seq, ev.run_id
                )
