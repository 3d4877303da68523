# snapround/domain/noding/hot_pixel.py
"""
Hot-pixel maths, all in scaled grid space: a grid point with integer key
(kx, ky) owns the half-open unit square [kx-0.5, kx+0.5) x [ky-0.5, ky+0.5).
Segments are rows (x0, y0, x1, y1) of an (N, 4) float array.
"""

import numpy as np

from snapround.domain.entities.fragment import Fragment
from snapround.domain.precision import PrecisionGrid


def segment_table(fragments: list[Fragment], grid: PrecisionGrid) -> tuple[np.ndarray, np.ndarray]:
    """
    Scaled segments of all fragments, plus an (N, 2) int array of
    (fragment position, segment index) owners.
    """
    rows, owners = [], []
    for pos, frag in enumerate(fragments):
        if frag.num_segments == 0:
            continue
        pts = np.asarray(frag.coords, dtype=float) * grid.scale
        rows.append(np.hstack([pts[:-1], pts[1:]]))
        owners.append(
            np.column_stack(
                [np.full(frag.num_segments, pos), np.arange(frag.num_segments)]
            )
        )
    if not rows:
        return np.empty((0, 4)), np.empty((0, 2), dtype=int)
    return np.vstack(rows), np.vstack(owners).astype(int)


def vertex_keys(fragments: list[Fragment], grid: PrecisionGrid) -> np.ndarray:
    pts = [np.asarray(f.coords, dtype=float) for f in fragments if len(f)]
    if not pts:
        return np.empty((0, 2))
    return grid.to_keys(np.vstack(pts))


def intersection_keys(segs: np.ndarray, i: np.ndarray, j: np.ndarray) -> np.ndarray:
    """
    Rounded keys of the single-point intersections of segment pairs (i, j).
    Parallel and collinear pairs are skipped; their overlaps end at vertices,
    which are hot pixels already.
    """
    if len(i) == 0:
        return np.empty((0, 2))
    a0, a1 = segs[i, :2], segs[i, 2:]
    b0, b1 = segs[j, :2], segs[j, 2:]
    da, db, w = a1 - a0, b1 - b0, b0 - a0
    denom = da[:, 0] * db[:, 1] - da[:, 1] * db[:, 0]
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (w[:, 0] * db[:, 1] - w[:, 1] * db[:, 0]) / denom
        u = (w[:, 0] * da[:, 1] - w[:, 1] * da[:, 0]) / denom
    ok = (denom != 0) & (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)
    pts = a0[ok] + t[ok, None] * da[ok]
    return np.floor(pts + 0.5)


def bbox_overlap(segs: np.ndarray, lo: np.ndarray, hi: np.ndarray) -> np.ndarray:
    """Boolean matrix [k, n]: does the bbox of segment n touch box k?"""
    smin = np.minimum(segs[:, :2], segs[:, 2:])
    smax = np.maximum(segs[:, :2], segs[:, 2:])
    return np.all(
        (smin[None, :, :] <= hi[:, None, :]) & (smax[None, :, :] >= lo[:, None, :]), axis=2
    )


def pixel_hits(segs: np.ndarray, keys: np.ndarray) -> np.ndarray:
    """
    Row-wise test: does segment k pass through the hot pixel of keys[k]?
    Liang-Barsky clipping against the closed square, then the half-open rule:
    the clipped piece must not lie only on the top or right edge.
    """
    x0, y0 = segs[:, 0], segs[:, 1]
    dx, dy = segs[:, 2] - x0, segs[:, 3] - y0
    xmin, xmax = keys[:, 0] - 0.5, keys[:, 0] + 0.5
    ymin, ymax = keys[:, 1] - 0.5, keys[:, 1] + 0.5

    t0 = np.zeros(len(segs))
    t1 = np.ones(len(segs))
    miss = np.zeros(len(segs), dtype=bool)
    with np.errstate(divide="ignore", invalid="ignore"):
        for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
            miss |= (p == 0) & (q < 0)
            r = q / p
            t0 = np.where(p < 0, np.maximum(t0, r), t0)
            t1 = np.where(p > 0, np.minimum(t1, r), t1)
    hit = ~miss & (t0 <= t1)

    tm = (t0 + t1) / 2
    mx, my = x0 + tm * dx, y0 + tm * dy
    return hit & (mx < xmax) & (my < ymax)
