from snapround.domain.entities.geometry import (
    GeometryCollection,
    LineString,
    Point,
    Polygon,
    multi_line_string,
)
from snapround.domain.extract import extract_fragments
from snapround.domain.precision import PrecisionGrid
from snapround.domain.rebuild import replace_lines, to_noded_lines

GRID = PrecisionGrid(1.0)

# ---------- Extraction


def test_extracts_lines_and_rings_but_not_points_or_empty_lines():
    shell = LineString([(0.2, 0.1), (10.1, 0.2), (9.8, 10.3), (0.2, 0.1)])
    hole = LineString([(2.1, 2.2), (4.2, 2.1), (3.9, 3.8), (2.1, 2.2)])
    geom = GeometryCollection(
        (Point(1, 1), LineString([(0.1, 0.1), (4.9, 0.1)]), LineString(), Polygon(shell, (hole,)))
    )
    frags = extract_fragments(geom, GRID)

    assert [f.tag for f in frags] == [0, 2, 3]
    assert frags[0].coords == ((0.0, 0.0), (5.0, 0.0))
    assert frags[1].coords == ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0))
    assert frags[2].coords[0] == frags[2].coords[-1]


def test_coordinate_equal_lines_get_distinct_tags():
    line = LineString([(0, 0), (3, 3)])
    frags = extract_fragments(multi_line_string([line, line]), GRID)
    assert [f.tag for f in frags] == [0, 1]


def test_collapsing_line_is_still_extracted():
    frags = extract_fragments(LineString([(0.1, 0.1), (0.3, 0.2)]), GRID)
    assert len(frags) == 1
    assert frags[0].coords == ((0.0, 0.0),)


# ---------- Rebuild


def test_replace_lines_swaps_coordinates_in_place():
    geom = GeometryCollection(
        (LineString([(0, 0), (5, 0)]), Point(9, 9), LineString([(2, -3), (2, 5)]))
    )
    noded = {0: ((0.0, 0.0), (2.0, 0.0), (5.0, 0.0)), 1: ((2.0, -3.0), (2.0, 0.0), (2.0, 5.0))}

    out = replace_lines(geom, noded)
    assert out == GeometryCollection(
        (
            LineString([(0, 0), (2, 0), (5, 0)]),
            LineString([(2, -3), (2, 0), (2, 5)]),
        )
    )
    kept = replace_lines(geom, noded, keep_points=True)
    assert kept.geoms[1] == Point(9, 9)


def test_missing_tags_vanish():
    geom = multi_line_string([LineString([(0, 0), (5, 0)]), LineString([(0, 1), (0, 1.2)])])
    out = replace_lines(geom, {0: ((0.0, 0.0), (5.0, 0.0))})
    assert out == multi_line_string([LineString([(0, 0), (5, 0)])])


def test_linework_only_is_flat_and_ordered():
    noded = {4: ((1.0, 1.0), (2.0, 2.0)), 1: ((0.0, 0.0), (3.0, 0.0))}
    out = to_noded_lines(noded)
    assert out.kind == "MultiLineString"
    assert [g.coords for g in out.geoms] == [((1.0, 1.0), (2.0, 2.0)), ((0.0, 0.0), (3.0, 0.0))]
    assert to_noded_lines({}) == GeometryCollection(kind="MultiLineString")
