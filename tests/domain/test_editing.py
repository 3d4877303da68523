import pytest

from snapround.domain.editing import iter_lines, map_lines
from snapround.domain.entities.geometry import (
    GeometryCollection,
    LineString,
    Point,
    Polygon,
    multi_line_string,
)
from snapround.errors import UnsupportedComponentError

SQUARE = LineString([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
HOLE = LineString([(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)])
LINE = LineString([(0, 0), (5, 5)])


@pytest.fixture
def mixed() -> GeometryCollection:
    return GeometryCollection(
        (Point(1, 1), LINE, Polygon(SQUARE, (HOLE,)), LineString()),
    )


def test_iter_lines_numbers_every_line_leaf_in_order(mixed):
    assert list(iter_lines(mixed)) == [(0, LINE), (1, SQUARE), (2, HOLE), (3, LineString())]


def test_iter_lines_keeps_equal_lines_apart():
    ids = [i for i, _ in iter_lines(multi_line_string([LINE, LINE]))]
    assert ids == [0, 1]


def test_map_lines_identity_preserves_tree(mixed):
    assert map_lines(mixed, lambda i, line: line, keep_points=True) == GeometryCollection(
        (Point(1, 1), LINE, Polygon(SQUARE, (HOLE,)))
    )


def test_map_lines_sees_same_ids_as_iter_lines(mixed):
    seen = []
    map_lines(mixed, lambda i, line: seen.append((i, line)) or line)
    assert seen == list(iter_lines(mixed))


def test_map_lines_drops_points_unless_asked(mixed):
    out = map_lines(mixed, lambda i, line: line)
    assert all(not isinstance(g, Point) for g in out.geoms)
    assert map_lines(Point(1, 2), lambda i, line: line) == GeometryCollection()
    assert map_lines(Point(1, 2), lambda i, line: line, keep_points=True) == Point(1, 2)


def test_removed_shell_empties_polygon():
    poly = Polygon(SQUARE, (HOLE,))
    assert map_lines(poly, lambda i, line: None if i == 0 else line) == Polygon()


def test_shell_that_is_not_a_ring_empties_polygon():
    poly = Polygon(SQUARE)
    out = map_lines(poly, lambda i, line: LineString([(0, 0), (10, 0), (0, 0)]))
    assert out == Polygon()
    assert out.is_empty


def test_removed_or_degenerate_holes_are_dropped():
    other = LineString([(6, 6), (8, 6), (8, 8), (6, 6)])
    poly = Polygon(SQUARE, (HOLE, other))

    assert map_lines(poly, lambda i, line: None if i == 1 else line) == Polygon(SQUARE, (other,))
    flat = LineString([(6, 6), (8, 6), (6, 6)])
    assert map_lines(poly, lambda i, line: flat if i == 2 else line) == Polygon(SQUARE, (HOLE,))


def test_collections_drop_vanished_members_and_keep_kind():
    mls = multi_line_string([LINE, LineString([(1, 1), (2, 2)])])
    out = map_lines(mls, lambda i, line: None if i == 0 else line)
    assert out == GeometryCollection((LineString([(1, 1), (2, 2)]),), kind="MultiLineString")

    gone = map_lines(mls, lambda i, line: None)
    assert gone.kind == "MultiLineString"
    assert gone.is_empty


def test_vanished_top_level_line_is_empty_line():
    assert map_lines(LINE, lambda i, line: None) == LineString()


def test_unknown_component_is_rejected():
    with pytest.raises(UnsupportedComponentError):
        list(iter_lines(GeometryCollection(("not a geometry",))))
    with pytest.raises(UnsupportedComponentError):
        map_lines(LINE, lambda i, line: Point(0, 0))
