# snapround/domain/rebuild.py
from snapround.domain.editing import map_lines
from snapround.domain.entities.fragment import NodedResult
from snapround.domain.entities.geometry import Geometry, GeometryCollection, LineString


def replace_lines(geom: Geometry, noded: NodedResult, *, keep_points: bool = False) -> Geometry:
    """
    Full mode: same tree shape as ``geom`` with each line swapped for its noded
    coordinates. Lines missing from ``noded`` (collapsed or empty) vanish.
    """

    def replace(leaf_id: int, line: LineString) -> LineString | None:
        pts = noded.get(leaf_id)
        if pts is None:
            return None
        return LineString(pts)

    return map_lines(geom, replace, keep_points=keep_points)


def to_noded_lines(noded: NodedResult) -> GeometryCollection:
    """Linework-only mode: a flat MultiLineString, one line per noded fragment."""
    return GeometryCollection(
        tuple(LineString(pts) for pts in noded.values() if len(pts) >= 2),
        kind="MultiLineString",
    )
