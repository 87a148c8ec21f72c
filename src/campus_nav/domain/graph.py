# campus_nav/domain/graph.py
import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from campus_nav.domain.entities.geography import Coord, Edge, Node, NodeId
from campus_nav.errors import GraphFrozenError

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _finite(raw) -> float | None:
    if not _is_number(raw):
        return None
    try:
        f = float(raw)
    except OverflowError:
        return None  # ints beyond float range
    return f if math.isfinite(f) else None


def coerce_weight(raw) -> float:
    # absent, non-numeric, negative or non-finite -> default
    f = _finite(raw)
    if f is None or f < 0:
        return DEFAULT_WEIGHT
    return f


def _coerce_coord(raw) -> float:
    f = _finite(raw)
    return 0.0 if f is None else f


def _hashable(v) -> bool:
    try:
        hash(v)
    except TypeError:
        return False
    return True


def _normalize(edge: Edge) -> Edge:
    w = coerce_weight(edge.weight)
    acc = edge.accessible is True
    if type(edge.weight) is float and w == edge.weight and acc is edge.accessible:
        return edge
    return replace(edge, weight=w, accessible=acc)


class CampusGraph:
    """
    Directed, weighted, accessibility-tagged graph of campus paths.

    Built once via add_node/add_edge, then frozen; after freeze() the store is
    read-only and safe to share between queries.
    """

    def __init__(self):
        self._nodes: dict[NodeId, Node] = {}
        self._adj: dict[NodeId, list[Edge]] = {}
        self._frozen = False

    # --------------- Build phase -----------------------------

    def add_node(self, node: Node) -> None:
        self._check_mutable()
        if node.id in self._nodes:
            return
        self._nodes[node.id] = node
        self._adj[node.id] = []

    def add_edge(self, edge: Edge) -> None:
        self._check_mutable()
        if not (_hashable(edge.source) and _hashable(edge.target)):
            logger.debug("dropping edge with unusable endpoints %r -> %r", edge.source, edge.target)
            return
        out = self._adj.get(edge.source)
        if out is None:
            logger.debug("dropping edge from unknown node %r", edge.source)
            return
        out.append(_normalize(edge))

    def freeze(self) -> "CampusGraph":
        if not self._frozen:
            self._adj = {k: tuple(v) for k, v in self._adj.items()}
            self._nodes = MappingProxyType(self._nodes)
            self._adj = MappingProxyType(self._adj)
            self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("graph is frozen; build a new one instead")

    # --------------- Queries ---------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def nodes(self) -> Mapping[NodeId, Node]:
        return self._nodes

    def node(self, node_id: NodeId) -> Node | None:
        return self._nodes.get(node_id)

    def neighbors(self, node_id: NodeId) -> tuple[Edge, ...] | list[Edge]:
        return self._adj.get(node_id, ())

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "building"
        return f"CampusGraph(nodes={len(self)}, edges={self.edge_count}, {state})"


# ------------------- Dataset -> graph ---------------------------


def node_from_record(rec: Mapping[str, Any]) -> Node | None:
    nid = rec.get("id")
    if nid is None or not isinstance(nid, (str, int)) or isinstance(nid, bool):
        return None
    name = rec.get("name")
    return Node(
        id=nid,
        name=name if isinstance(name, str) else "",
        coord=Coord(_coerce_coord(rec.get("lat")), _coerce_coord(rec.get("lng"))),
    )


def edge_from_record(rec: Mapping[str, Any]) -> Edge:
    acc = rec.get("accessible", False)
    return Edge(
        source=rec.get("from"),
        target=rec.get("to"),
        weight=coerce_weight(rec.get("weight")),
        accessible=bool(acc) if isinstance(acc, (bool, int)) else False,
    )


def iter_nodes(records: Iterable) -> Iterable[Node]:
    for rec in records or ():
        node = node_from_record(rec) if isinstance(rec, Mapping) else None
        if node is None:
            logger.debug("skipping malformed node record %r", rec)
            continue
        yield node


def build_graph(dataset: Mapping[str, Any]) -> CampusGraph:
    """Build and freeze a graph from a parsed {nodes, edges} document."""
    g = CampusGraph()
    for node in iter_nodes(dataset.get("nodes")):
        g.add_node(node)
    for rec in dataset.get("edges") or ():
        if not isinstance(rec, Mapping):
            logger.debug("skipping malformed edge record %r", rec)
            continue
        g.add_edge(edge_from_record(rec))
    logger.info("graph built: %d nodes, %d edges", len(g), g.edge_count)
    return g.freeze()
