# io/repair.py
import time
from typing import Literal

import shapely

from snapround.app.protocols import PipelineHooks, Repairer
from snapround.domain.entities.geometry import Geometry, GeometryCollection, Polygon, multi_polygon
from snapround.io.shapely_adapter import from_shapely, to_shapely


def is_valid(geom: Geometry) -> bool:
    return bool(shapely.is_valid(to_shapely(geom)))


def ensure_valid(
    geom: Geometry, repairer: Repairer, *, hooks: PipelineHooks | None = None
) -> Geometry:
    if is_valid(geom):
        return geom
    t0 = time.perf_counter()
    fixed = repairer.repair(geom)
    if hooks is not None:
        hooks.repaired(geom_type=fixed.geom_type, ms=(time.perf_counter() - t0) * 1000)
    return fixed


class BufferRepairer(Repairer):
    """
    Zero-width buffer on polygonal components; everything else passes through.
    Collapsed polygons come back empty, split ones as a MultiPolygon.
    """

    def repair(self, geom: Geometry) -> Geometry:
        if isinstance(geom, Polygon):
            return self._clean(geom)
        if isinstance(geom, GeometryCollection):
            if geom.kind == "MultiPolygon":
                return self._clean_multi(geom)
            parts = [self.repair(g) for g in geom.geoms]
            return GeometryCollection(tuple(p for p in parts if not p.is_empty), kind=geom.kind)
        return geom

    def _clean(self, poly: Polygon) -> Geometry:
        if poly.is_empty:
            return poly
        return from_shapely(to_shapely(poly).buffer(0))

    def _clean_multi(self, multi: GeometryCollection) -> GeometryCollection:
        if multi.is_empty:
            return multi
        out = from_shapely(to_shapely(multi).buffer(0))
        if isinstance(out, Polygon):
            return multi_polygon(() if out.is_empty else (out,))
        return multi_polygon(g for g in out.geoms if isinstance(g, Polygon))


class MakeValidRepairer(Repairer):
    """shapely.make_valid over the whole geometry."""

    def __init__(self, method: Literal["linework", "structure"] = "linework", keep_collapsed: bool = True):
        self.method = method
        self.keep_collapsed = keep_collapsed

    def repair(self, geom: Geometry) -> Geometry:
        if self.method == "structure":
            fixed = shapely.make_valid(
                to_shapely(geom), method="structure", keep_collapsed=self.keep_collapsed
            )
        else:
            fixed = shapely.make_valid(to_shapely(geom))
        return from_shapely(fixed)
