# io/shapely_adapter.py
import shapely
from shapely.geometry import (
    GeometryCollection as ShapelyCollection,
    LineString as ShapelyLineString,
    MultiLineString as ShapelyMultiLineString,
    MultiPoint as ShapelyMultiPoint,
    MultiPolygon as ShapelyMultiPolygon,
    Point as ShapelyPoint,
    Polygon as ShapelyPolygon,
)

from snapround.domain.entities.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)
from snapround.errors import UnsupportedComponentError

_MULTI = {
    "MultiPoint": ShapelyMultiPoint,
    "MultiLineString": ShapelyMultiLineString,
    "MultiPolygon": ShapelyMultiPolygon,
}


def _xy(coords) -> tuple[tuple[float, float], ...]:
    return tuple((float(c[0]), float(c[1])) for c in coords)


def to_shapely(geom: Geometry) -> shapely.Geometry:
    if isinstance(geom, Point):
        return ShapelyPoint(geom.x, geom.y)
    if isinstance(geom, LineString):
        return ShapelyLineString(geom.coords) if geom.num_points >= 2 else ShapelyLineString()
    if isinstance(geom, Polygon):
        if geom.is_empty:
            return ShapelyPolygon()
        return ShapelyPolygon(geom.shell.coords, [h.coords for h in geom.holes])
    if isinstance(geom, GeometryCollection):
        parts = [to_shapely(g) for g in geom.geoms]
        if geom.kind in _MULTI:
            return _MULTI[geom.kind]([p for p in parts if not p.is_empty])
        return ShapelyCollection(parts)
    raise UnsupportedComponentError(geom)


def from_shapely(geom: shapely.Geometry) -> Geometry:
    """Convert a shapely geometry; Z is dropped and rings become LineStrings."""
    kind = geom.geom_type
    if kind == "Point":
        if geom.is_empty:
            return GeometryCollection()
        return Point(float(geom.x), float(geom.y))
    if kind in ("LineString", "LinearRing"):
        return LineString(_xy(geom.coords))
    if kind == "Polygon":
        if geom.is_empty:
            return Polygon()
        return Polygon(
            LineString(_xy(geom.exterior.coords)),
            tuple(LineString(_xy(r.coords)) for r in geom.interiors),
        )
    if kind in ("MultiPoint", "MultiLineString", "MultiPolygon", "GeometryCollection"):
        return GeometryCollection(tuple(from_shapely(g) for g in geom.geoms), kind=kind)
    raise UnsupportedComponentError(geom)
