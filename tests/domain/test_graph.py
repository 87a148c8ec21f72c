# tests/domain/test_graph.py
import math

import pytest

from campus_nav.domain.entities.geography import Coord, Edge, Node
from campus_nav.domain.graph import CampusGraph, build_graph, coerce_weight
from campus_nav.errors import GraphFrozenError
from campus_nav.routing.resolver import Route, RouteFinder
from campus_nav.runtime.types import Algorithm


def test_add_node_ignores_duplicate_ids():
    g = CampusGraph()
    g.add_node(Node("A", "Gate", Coord(1.0, 2.0)))
    g.add_node(Node("A", "Other", Coord(9.0, 9.0)))
    assert len(g) == 1
    assert g.node("A").name == "Gate"
    assert g.neighbors("A") == []


def test_edge_from_unknown_node_is_dropped_but_unknown_target_kept():
    g = CampusGraph()
    g.add_node(Node("A"))
    g.add_edge(Edge("X", "A", 1.0, True))
    g.add_edge(Edge("A", "ghost", 2.0, True))
    assert g.neighbors("X") == ()
    assert [e.target for e in g.neighbors("A")] == ["ghost"]
    assert g.neighbors("ghost") == ()
    assert g.edge_count == 1


def test_neighbors_keep_insertion_order():
    g = CampusGraph()
    for nid in "ABCD":
        g.add_node(Node(nid))
    for t in "DBC":
        g.add_edge(Edge("A", t))
    assert [e.target for e in g.neighbors("A")] == ["D", "B", "C"]


@pytest.mark.parametrize(
    "raw", [None, "5", True, -3, math.nan, math.inf, [1], 10**400, -(10**400)]
)
def test_bad_weights_default_to_one(raw):
    assert coerce_weight(raw) == 1.0


def test_add_edge_normalizes_weight_and_accessibility():
    g = CampusGraph()
    g.add_node(Node("A"))
    g.add_edge(Edge("A", "B", weight=None, accessible=None))
    e = g.neighbors("A")[0]
    assert e.weight == 1.0 and e.accessible is False


def test_frozen_graph_rejects_mutation():
    g = CampusGraph()
    g.add_node(Node("A"))
    g.freeze()
    assert g.frozen
    with pytest.raises(GraphFrozenError):
        g.add_node(Node("B"))
    with pytest.raises(GraphFrozenError):
        g.add_edge(Edge("A", "A"))
    with pytest.raises(TypeError):
        g.nodes["B"] = Node("B")


def test_build_graph_from_messy_records():
    data = {
        "nodes": [
            {"id": "A", "name": " Gate ", "lat": 1, "lng": 2},
            {"id": "A", "name": "dup"},
            {"name": "no id"},
            "garbage",
            {"id": 7, "lat": "x"},
        ],
        "edges": [
            {"from": "A", "to": 7, "weight": 3.5, "accessible": True},
            {"from": "A", "to": 7},
            {"from": "missing", "to": "A", "weight": 1},
            {"from": ["unhashable"], "to": "A"},
            {"from": "A", "to": ["x"]},
            {"from": "A", "to": {"id": 7}},
            42,
        ],
    }
    g = build_graph(data)
    assert g.frozen
    assert set(g.nodes) == {"A", 7}
    assert g.node("A").label == "Gate"
    assert g.node(7).name == "" and g.node(7).coord == Coord(0.0, 0.0)
    edges = list(g.neighbors("A"))
    assert [(e.weight, e.accessible) for e in edges] == [(3.5, True), (1.0, False)]
    assert g.edge_count == 2


def test_build_graph_tolerates_missing_sections():
    g = build_graph({})
    assert len(g) == 0 and g.edge_count == 0


def test_unusable_target_ids_leave_no_trace_in_searches():
    g = build_graph(
        {
            "nodes": [{"id": "A", "name": "Gate"}, {"id": "B", "name": "Hall"}],
            "edges": [
                {"from": "A", "to": ["x"], "weight": 1},
                {"from": "A", "to": "B", "weight": 2},
            ],
        }
    )
    assert [e.target for e in g.neighbors("A")] == ["B"]
    for alg in Algorithm:
        r = RouteFinder(g).find_route("Gate", "Hall", alg)
        assert isinstance(r, Route) and r.path == ("A", "B")


def test_add_edge_drops_unhashable_endpoints():
    g = CampusGraph()
    g.add_node(Node("A"))
    g.add_edge(Edge("A", ["x"]))
    g.add_edge(Edge(["A"], "A"))
    assert g.edge_count == 0


def test_huge_coordinates_default_to_zero():
    g = build_graph({"nodes": [{"id": "A", "lat": 10**400, "lng": -(10**400)}]})
    assert g.node("A").coord == Coord(0.0, 0.0)
