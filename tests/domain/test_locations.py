from campus_nav.domain.entities.geography import Coord, Node
from campus_nav.domain.locations import LocationIndex


def _nodes():
    return [
        Node("L1", "Library", Coord(10.0, 20.0)),
        Node("G", " Gate", Coord(0.0, 0.0)),
        Node("X", "   ", Coord(5.0, 5.0)),
        Node("L2", "Library ", Coord(12.0, 24.0)),
        Node("Y", "", Coord(1.0, 1.0)),
    ]


def test_groups_by_trimmed_name_in_first_seen_order():
    idx = LocationIndex.from_nodes(_nodes())
    assert idx.names() == ["Library", "Gate"]
    assert idx.node_ids("Library") == ("L1", "L2")
    assert idx.node_ids("  Gate ") == ("G",)
    assert len(idx) == 2


def test_blank_and_unknown_names_have_no_nodes():
    idx = LocationIndex.from_nodes(_nodes())
    assert idx.node_ids("") == ()
    assert idx.node_ids(None) == ()
    assert idx.node_ids("Cafeteria") == ()
    assert "Cafeteria" not in idx
    assert "Library" in idx


def test_center_is_mean_of_member_coords():
    idx = LocationIndex.from_nodes(_nodes())
    c = idx.get("Library").center
    assert abs(c.lat - 11.0) < 1e-9 and abs(c.lng - 22.0) < 1e-9
