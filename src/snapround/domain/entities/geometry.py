from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

Coord = tuple[float, float]

CollectionKind = Literal["GeometryCollection", "MultiPoint", "MultiLineString", "MultiPolygon"]


def _coords(pts: Iterable) -> tuple[Coord, ...]:
    return tuple((float(p[0]), float(p[1])) for p in pts)


# Closed set of geometry kinds handled by the pipeline
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    geom_type = "Point"

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def num_points(self) -> int:
        return 1


@dataclass(frozen=True)
class LineString:
    coords: tuple[Coord, ...] = ()

    geom_type = "LineString"

    def __post_init__(self):
        object.__setattr__(self, "coords", _coords(self.coords))

    @property
    def is_empty(self) -> bool:
        return not self.coords

    @property
    def num_points(self) -> int:
        return len(self.coords)

    @property
    def is_closed(self) -> bool:
        return bool(self.coords) and self.coords[0] == self.coords[-1]

    @property
    def is_ring(self) -> bool:
        """True if the line can stand as a polygon ring (closed, >= 4 points)."""
        return self.is_closed and len(self.coords) >= 4


@dataclass(frozen=True)
class Polygon:
    shell: LineString = LineString()
    holes: tuple[LineString, ...] = ()

    geom_type = "Polygon"

    def __post_init__(self):
        object.__setattr__(self, "holes", tuple(self.holes))

    @property
    def is_empty(self) -> bool:
        return self.shell.is_empty

    @property
    def num_points(self) -> int:
        return self.shell.num_points + sum(h.num_points for h in self.holes)

    @property
    def rings(self) -> tuple[LineString, ...]:
        return (self.shell, *self.holes)


@dataclass(frozen=True)
class GeometryCollection:
    geoms: tuple["Geometry", ...] = ()
    kind: CollectionKind = "GeometryCollection"

    def __post_init__(self):
        object.__setattr__(self, "geoms", tuple(self.geoms))

    @property
    def geom_type(self) -> str:
        return self.kind

    @property
    def is_empty(self) -> bool:
        return all(g.is_empty for g in self.geoms)

    @property
    def num_points(self) -> int:
        return sum(g.num_points for g in self.geoms)

    def __len__(self) -> int:
        return len(self.geoms)

    def __iter__(self):
        return iter(self.geoms)


Geometry = Point | LineString | Polygon | GeometryCollection

GEOMETRY_TYPES = (Point, LineString, Polygon, GeometryCollection)


def multi_line_string(lines: Iterable[LineString]) -> GeometryCollection:
    return GeometryCollection(tuple(lines), kind="MultiLineString")


def multi_polygon(polygons: Iterable[Polygon]) -> GeometryCollection:
    return GeometryCollection(tuple(polygons), kind="MultiPolygon")
