from campus_nav.domain.graph import build_graph
from campus_nav.routing.metrics import path_distance, path_weight


def _graph():
    return build_graph(
        {
            "nodes": [{"id": x} for x in "ABC"],
            "edges": [
                {"from": "A", "to": "B", "weight": 2, "accessible": False},
                {"from": "A", "to": "B", "weight": 7, "accessible": True},
                {"from": "B", "to": "C", "weight": 3.5, "accessible": True},
            ],
        }
    )


def test_sums_first_matching_edge():
    assert path_weight(_graph(), ["A", "B", "C"]) == 5.5


def test_accessible_only_matches_first_eligible_edge():
    assert path_weight(_graph(), ["A", "B", "C"], accessible_only=True) == 10.5


def test_missing_edge_contributes_zero():
    assert path_weight(_graph(), ["A", "C"]) == 0.0
    assert path_weight(_graph(), ["C", "B", "C"]) == 3.5


def test_empty_and_single_node_paths_are_zero():
    g = _graph()
    assert path_weight(g, []) == 0.0
    assert path_distance(g, ("A",), meters_per_unit=10.0) == 0.0


def test_scale_factor_applies_uniformly():
    g = _graph()
    assert path_distance(g, ("A", "B", "C"), meters_per_unit=2.0) == 11.0
    assert path_distance(g, ("B", "C"), meters_per_unit=0.0) == 0.0
