from campus_nav.app.directions import describe, readable_stops, route_prompt, walking_steps
from campus_nav.domain.graph import build_graph
from campus_nav.routing.resolver import Route
from campus_nav.runtime.types import Algorithm


def _graph():
    return build_graph(
        {
            "nodes": [
                {"id": 1, "name": "Main Gate"},
                {"id": 2, "name": "Node 12"},
                {"id": 3, "name": ""},
                {"id": 4, "name": "Quad"},
                {"id": 5, "name": "Quad"},
                {"id": 6, "name": " Library "},
            ],
            "edges": [],
        }
    )


def test_readable_stops_drop_placeholders_and_collapse_repeats():
    assert readable_stops(_graph(), [1, 2, 3, 4, 5, 6, 99]) == ("Main Gate", "Quad", "Library")


def test_walking_steps_pair_consecutive_stops():
    assert walking_steps(("A", "B", "C")) == ("Walk from A to B.", "Walk from B to C.")
    assert walking_steps(("A",)) == ()


def test_prompt_lists_route_and_distance():
    text = route_prompt(("Main Gate", "Library"), 123.456)
    assert "Main Gate → Library." in text
    assert "Total walking distance: 123.46 meters." in text
    assert '"node"' in text


def test_describe_bundles_everything():
    r = Route((1, 2, 4, 6), 42.0, 1, 6, Algorithm.DIJKSTRA)
    d = describe(r, _graph())
    assert d.stops == ("Main Gate", "Quad", "Library")
    assert len(d.steps) == 2
    assert d.distance_m == 42.0
    assert d.prompt.endswith("42.00 meters.")
