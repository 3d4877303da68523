# pipeline/snap_rounder.py

import time

from snapround.app.protocols import Noder, PipelineHooks, Repairer
from snapround.domain.entities.geometry import Geometry
from snapround.domain.extract import extract_fragments
from snapround.domain.noding.coordinator import node_fragments
from snapround.domain.noding.snap_rounders import IndexedSnapRounder
from snapround.domain.precision import PrecisionGrid
from snapround.domain.rebuild import replace_lines, to_noded_lines
from snapround.errors import SnapRoundError
from snapround.io.repair import BufferRepairer, ensure_valid

from .hooks import NoopHooks


class GeometrySnapRounder:
    """
    Snap-rounds a geometry to ``grid``:
    extract fragments (rounded) -> node -> rebuild -> repair (full mode only).

    • Points are dropped unless ``keep_points`` is set.
    • Lines collapsing below 2 points are removed.
    • Input coordinates must already be in the grid's spatial reference.
    """

    def __init__(
        self,
        grid: PrecisionGrid,
        *,
        noder: Noder | None = None,
        repairer: Repairer | None = None,
        linework_only: bool = False,
        keep_points: bool = False,
        hooks: PipelineHooks | None = None,
    ):
        self.grid = grid
        self.noder = noder or IndexedSnapRounder(grid)
        self.repairer = repairer or BufferRepairer()
        self.linework_only = linework_only
        self.keep_points = keep_points
        self._hooks = hooks or NoopHooks()

    def execute(self, geom: Geometry) -> Geometry:
        t0 = time.perf_counter()
        self._hooks.run_start(
            geom_type=getattr(geom, "geom_type", type(geom).__name__),
            num_points=getattr(geom, "num_points", None),
            linework_only=self.linework_only,
        )
        try:
            out = self._run(geom)
        except SnapRoundError as exc:
            self._hooks.error(reason=type(exc).__name__, error=str(exc))
            raise
        self._hooks.run_end(geom_type=out.geom_type, wall_ms=(time.perf_counter() - t0) * 1000)
        return out

    def _run(self, geom: Geometry) -> Geometry:
        t1 = time.perf_counter()
        fragments = extract_fragments(geom, self.grid)
        self._hooks.extracted(fragments=len(fragments), ms=(time.perf_counter() - t1) * 1000)

        t1 = time.perf_counter()
        noded = node_fragments(fragments, self.noder, hooks=self._hooks)
        self._hooks.noded(
            fragments=len(fragments),
            surviving=len(noded),
            nodes=sum(len(f.nodes) for f in fragments),
            ms=(time.perf_counter() - t1) * 1000,
        )

        if self.linework_only:
            return to_noded_lines(noded)

        snapped = replace_lines(geom, noded, keep_points=self.keep_points)
        return ensure_valid(snapped, self.repairer, hooks=self._hooks)


def snap_round(
    geom: Geometry,
    grid: PrecisionGrid,
    linework_only: bool = False,
    *,
    noder: Noder | None = None,
    repairer: Repairer | None = None,
    keep_points: bool = False,
    hooks: PipelineHooks | None = None,
) -> Geometry:
    return GeometrySnapRounder(
        grid,
        noder=noder,
        repairer=repairer,
        linework_only=linework_only,
        keep_points=keep_points,
        hooks=hooks,
    ).execute(geom)
