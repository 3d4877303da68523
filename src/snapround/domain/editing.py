# snapround/domain/editing.py
"""
Generic edits over the closed geometry union.

Both helpers visit LineString leaves in the same order (polygon shell before
holes, collection members in order) and number them 0, 1, 2, ... including
empty lines. That number is the leaf id used to tag fragments, so anything
extracted with ``iter_lines`` can be put back with ``map_lines``.
"""

from collections.abc import Callable, Iterator
from itertools import count

from snapround.domain.entities.geometry import (
    GEOMETRY_TYPES,
    Geometry,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)
from snapround.errors import UnsupportedComponentError

LineEdit = Callable[[int, LineString], LineString | None]


def iter_lines(geom: Geometry) -> Iterator[tuple[int, LineString]]:
    """Yield (leaf_id, line) for every LineString leaf, rings included."""
    ids = count()

    def walk(g):
        if isinstance(g, Point):
            return
        if isinstance(g, LineString):
            yield next(ids), g
        elif isinstance(g, Polygon):
            for ring in g.rings:
                yield next(ids), ring
        elif isinstance(g, GeometryCollection):
            for child in g.geoms:
                yield from walk(child)
        else:
            raise UnsupportedComponentError(g)

    yield from walk(geom)


def map_lines(geom: Geometry, fn: LineEdit, *, keep_points: bool = False) -> Geometry:
    """
    Rebuild ``geom`` with every LineString leaf replaced by ``fn(leaf_id, line)``.

    ``fn`` returning None removes the leaf. Removal rules:
      • a polygon whose shell is removed or is no longer a ring becomes Polygon()
      • a hole that is removed or no longer a ring is dropped
      • collections drop removed and empty members, keeping their kind
      • a removed top-level line becomes LineString()
    Points are copied unchanged when ``keep_points`` is set, dropped otherwise.
    """
    ids = count()

    def edit_line(line: LineString) -> LineString | None:
        out = fn(next(ids), line)
        if out is not None and not isinstance(out, LineString):
            raise UnsupportedComponentError(out)
        return out

    def edit(g) -> Geometry | None:
        if isinstance(g, Point):
            return g if keep_points else None
        if isinstance(g, LineString):
            return edit_line(g)
        if isinstance(g, Polygon):
            # every ring must be visited so leaf ids stay aligned
            shell = edit_line(g.shell)
            holes = [edit_line(h) for h in g.holes]
            if shell is None or not shell.is_ring:
                return Polygon()
            return Polygon(shell, tuple(h for h in holes if h is not None and h.is_ring))
        if isinstance(g, GeometryCollection):
            members = [edit(child) for child in g.geoms]
            return GeometryCollection(
                tuple(m for m in members if m is not None and not m.is_empty), kind=g.kind
            )
        raise UnsupportedComponentError(g)

    out = edit(geom)
    if out is None:
        return _empty_like(geom)
    return out


def _empty_like(geom: Geometry) -> Geometry:
    if isinstance(geom, LineString):
        return LineString()
    if isinstance(geom, GEOMETRY_TYPES):
        # only Points can vanish besides lines
        return GeometryCollection()
    raise UnsupportedComponentError(geom)
