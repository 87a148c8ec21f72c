from enum import Enum

from campus_nav.errors import UnknownAlgorithmError


class Algorithm(Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownAlgorithmError(
                f"Unknown algorithm {value!r}; expected one of {[a.value for a in cls]}"
            ) from None


class RejectReason(Enum):
    MISSING_SELECTION = "missing_selection"
    SAME_LOCATION = "same_location"
    UNKNOWN_LOCATION = "unknown_location"
