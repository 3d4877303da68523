from abc import ABC, abstractmethod

import numpy as np
import shapely

from snapround.app.protocols import Noder
from snapround.domain.entities.fragment import Fragment
from snapround.domain.noding.hot_pixel import (
    bbox_overlap,
    intersection_keys,
    pixel_hits,
    segment_table,
    vertex_keys,
)
from snapround.domain.precision import PrecisionGrid


class HotPixelSnapRounder(Noder, ABC):
    """
    Hot-pixel snap rounding.

    Hot pixels are every fragment vertex plus the rounded intersection point of
    every crossing segment pair. Each segment that passes through a hot pixel
    (other than at its own endpoints) gets a node at the pixel centre.
    Subclasses only decide how candidates are found.
    """

    def __init__(self, grid: PrecisionGrid):
        self.grid = grid

    def compute_nodes(self, fragments: list[Fragment]) -> None:
        segs, owners = segment_table(fragments, self.grid)
        if len(segs) == 0:
            return
        index = self._index(segs)

        i, j = self._segment_pairs(segs, index)
        keys = np.vstack([vertex_keys(fragments, self.grid), intersection_keys(segs, i, j)])
        keys = np.unique(keys, axis=0)

        k, n = self._pixel_candidates(segs, keys, index)
        hit = pixel_hits(segs[n], keys[k])
        k, n = k[hit], n[hit]

        # a segment never snaps to its own endpoints
        start = np.floor(segs[n, :2] + 0.5)
        end = np.floor(segs[n, 2:] + 0.5)
        inner = ~(np.all(keys[k] == start, axis=1) | np.all(keys[k] == end, axis=1))
        k, n = k[inner], n[inner]

        coords = self.grid.from_keys(keys[k])
        for (pos, seg_index), (x, y) in zip(owners[n], coords):
            fragments[pos].add_node(int(seg_index), (float(x), float(y)))

    # ------------- candidate search -----------------

    def _index(self, segs: np.ndarray):
        return None

    @abstractmethod
    def _segment_pairs(self, segs: np.ndarray, index) -> tuple[np.ndarray, np.ndarray]:
        raise NotImplementedError

    @abstractmethod
    def _pixel_candidates(self, segs: np.ndarray, keys: np.ndarray, index) -> tuple[np.ndarray, np.ndarray]:
        raise NotImplementedError


class SimpleSnapRounder(HotPixelSnapRounder):
    """Brute force: every segment against every segment and every pixel."""

    def _segment_pairs(self, segs, index):
        lo = np.minimum(segs[:, :2], segs[:, 2:])
        hi = np.maximum(segs[:, :2], segs[:, 2:])
        touch = np.triu(bbox_overlap(segs, lo, hi), k=1)
        return np.nonzero(touch)

    def _pixel_candidates(self, segs, keys, index):
        return np.nonzero(bbox_overlap(segs, keys - 0.5, keys + 0.5))


class IndexedSnapRounder(HotPixelSnapRounder):
    """Candidates come from a shapely STRtree over the scaled segments."""

    def __init__(self, grid: PrecisionGrid, *, node_capacity: int = 10):
        super().__init__(grid)
        self.node_capacity = node_capacity

    def _index(self, segs):
        lines = shapely.linestrings(segs.reshape(-1, 2, 2))
        return shapely.STRtree(lines, node_capacity=self.node_capacity)

    def _segment_pairs(self, segs, index):
        src, dst = index.query(index.geometries, predicate="intersects")
        keep = src < dst
        return src[keep], dst[keep]

    def _pixel_candidates(self, segs, keys, index):
        boxes = shapely.box(keys[:, 0] - 0.5, keys[:, 1] - 0.5, keys[:, 0] + 0.5, keys[:, 1] + 0.5)
        return tuple(index.query(boxes))
