import pytest
from shapely.geometry import LinearRing, MultiLineString, Point as ShapelyPoint, Polygon as ShapelyPolygon

from snapround.domain.entities.geometry import GeometryCollection, LineString, Point, Polygon
from snapround.errors import UnsupportedComponentError
from snapround.io.shapely_adapter import from_shapely, to_shapely


def test_polygon_with_hole_round_trips():
    sp = ShapelyPolygon(
        [(0, 0), (10, 0), (10, 10), (0, 10)], [[(2, 2), (4, 2), (4, 4), (2, 4)]]
    )
    poly = from_shapely(sp)
    assert isinstance(poly, Polygon)
    assert poly.shell.coords[0] == poly.shell.coords[-1] == (0.0, 0.0)
    assert len(poly.holes) == 1
    assert to_shapely(poly).equals_exact(sp, 0)


def test_multi_kinds_are_kept():
    ml = from_shapely(MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]))
    assert isinstance(ml, GeometryCollection) and ml.kind == "MultiLineString"
    assert to_shapely(ml).geom_type == "MultiLineString"


def test_rings_become_lines_and_z_is_dropped():
    line = from_shapely(LinearRing([(0, 0, 5), (1, 0, 5), (1, 1, 5)]))
    assert isinstance(line, LineString)
    assert line.coords == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0))


def test_empties():
    assert from_shapely(ShapelyPoint()) == GeometryCollection()
    assert from_shapely(ShapelyPolygon()) == Polygon()
    assert to_shapely(LineString()).is_empty
    assert to_shapely(Polygon()).is_empty
    assert to_shapely(GeometryCollection()).is_empty


def test_points():
    assert from_shapely(ShapelyPoint(1.5, 2)) == Point(1.5, 2.0)
    assert to_shapely(Point(1.5, 2.0)).equals(ShapelyPoint(1.5, 2))


def test_unsupported_objects():
    with pytest.raises(UnsupportedComponentError):
        to_shapely("POINT (1 1)")
