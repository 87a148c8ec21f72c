# runtime/registries.py
from collections.abc import Callable

from campus_nav.app.protocols import SearchFn
from campus_nav.errors import UnknownAlgorithmError
from campus_nav.routing.search import bfs, dfs, dijkstra
from campus_nav.runtime.types import Algorithm

_search_registry: dict[Algorithm, SearchFn] = {}


# ------------------- Search registry ---------------------------


def register_search(alg: Algorithm | str) -> Callable[[SearchFn], SearchFn]:
    key = Algorithm.parse(alg)

    def deco(fn: SearchFn):
        if not isinstance(fn, SearchFn):
            raise TypeError(f"search for {key.value!r} must be callable, got {type(fn).__name__}")
        _search_registry[key] = fn
        return fn

    return deco


def make_search(alg: Algorithm | str) -> SearchFn:
    key = Algorithm.parse(alg)
    try:
        return _search_registry[key]
    except KeyError:
        raise UnknownAlgorithmError(f"No search registered for {key.value!r}") from None


register_search(Algorithm.BFS)(bfs)
register_search(Algorithm.DFS)(dfs)
register_search(Algorithm.DIJKSTRA)(dijkstra)
