# routing/search.py
"""
Graph searches over a CampusGraph.

All three share one contract: search(graph, start, end, accessible_only) -> Path.
start == end gives (start,); an unreachable end gives (); with accessible_only
every edge not flagged accessible is ignored.
"""

import math
from collections import deque
from collections.abc import Iterator

from campus_nav.domain.entities.geography import Edge, NodeId, Path
from campus_nav.domain.graph import CampusGraph
from campus_nav.routing.heap import MinHeap


def eligible_edges(graph: CampusGraph, u: NodeId, accessible_only: bool) -> Iterator[Edge]:
    for e in graph.neighbors(u):
        if accessible_only and not e.accessible:
            continue
        yield e


def reconstruct(parent: dict[NodeId, NodeId], start: NodeId, end: NodeId) -> Path:
    if end != start and end not in parent:
        return ()
    out = [end]
    while out[-1] != start:
        out.append(parent[out[-1]])
    out.reverse()
    return tuple(out)


def bfs(graph: CampusGraph, start: NodeId, end: NodeId, accessible_only: bool = False) -> Path:
    """Fewest-hops path; neighbors expand in edge insertion order."""
    if start == end:
        return (start,)
    visited = {start}
    parent: dict[NodeId, NodeId] = {}
    frontier = deque([start])
    while frontier:
        u = frontier.popleft()
        for e in eligible_edges(graph, u, accessible_only):
            v = e.target
            if v in visited:
                continue
            visited.add(v)
            parent[v] = u
            if v == end:
                return reconstruct(parent, start, end)
            frontier.append(v)
    return ()


def dfs(graph: CampusGraph, start: NodeId, end: NodeId, accessible_only: bool = False) -> Path:
    """Some path to end; not minimal in hops or weight."""
    if start == end:
        return (start,)
    visited = {start}
    parent: dict[NodeId, NodeId] = {}
    stack = [start]
    while stack:
        u = stack.pop()
        for e in eligible_edges(graph, u, accessible_only):
            v = e.target
            if v in visited:
                continue
            visited.add(v)
            parent[v] = u
            if v == end:
                return reconstruct(parent, start, end)
            stack.append(v)
    return ()


def dijkstra(
    graph: CampusGraph, start: NodeId, end: NodeId, accessible_only: bool = False
) -> Path:
    """Minimum total weight path; equal-distance ties follow heap insertion order."""
    if start == end:
        return (start,)
    dist: dict[NodeId, float] = {nid: math.inf for nid in graph.nodes}
    dist[start] = 0.0
    parent: dict[NodeId, NodeId] = {}
    pq: MinHeap[NodeId] = MinHeap()
    pq.push(start, 0.0)
    while pq:
        u, d = pq.pop()
        if d > dist.get(u, math.inf):
            continue  # stale
        if u == end:
            break
        for e in eligible_edges(graph, u, accessible_only):
            nd = d + e.weight
            if nd < dist.get(e.target, math.inf):
                dist[e.target] = nd
                parent[e.target] = u
                pq.push(e.target, nd)
    return reconstruct(parent, start, end)
