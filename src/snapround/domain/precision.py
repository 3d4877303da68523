# snapround/domain/precision.py
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from snapround.domain.entities.geometry import Coord


@dataclass(frozen=True)
class PrecisionGrid:
    """
    Uniform rounding grid. A coordinate v maps to floor(v * scale + 0.5) / scale,
    i.e. round-half-up onto cells of size 1/scale.
    Integer "keys" are the cell indices floor(v * scale + 0.5).
    """

    scale: float

    def __post_init__(self):
        if not (math.isfinite(self.scale) and self.scale > 0):
            raise ValueError(f"scale must be a positive finite number, got {self.scale!r}")

    @classmethod
    def from_grid_size(cls, size: float) -> PrecisionGrid:
        if not size > 0:
            raise ValueError(f"grid size must be positive, got {size!r}")
        return cls(1.0 / size)

    @property
    def grid_size(self) -> float:
        return 1.0 / self.scale

    def make_precise(self, c: Coord) -> Coord:
        return (
            math.floor(c[0] * self.scale + 0.5) / self.scale,
            math.floor(c[1] * self.scale + 0.5) / self.scale,
        )

    # --------------- vectorised helpers -----------------

    def to_keys(self, arr: np.ndarray) -> np.ndarray:
        return np.floor(np.asarray(arr, dtype=float) * self.scale + 0.5)

    def from_keys(self, keys: np.ndarray) -> np.ndarray:
        return np.asarray(keys, dtype=float) / self.scale

    def make_precise_array(self, arr: np.ndarray) -> np.ndarray:
        return self.from_keys(self.to_keys(arr))


def round_coords(coords: Sequence[Coord], grid: PrecisionGrid) -> tuple[Coord, ...]:
    """Snap every coordinate to the grid and drop consecutive repeats."""
    if len(coords) == 0:
        return ()
    arr = grid.make_precise_array(np.asarray(coords, dtype=float).reshape(-1, 2))
    keep = np.ones(len(arr), dtype=bool)
    keep[1:] = np.any(arr[1:] != arr[:-1], axis=1)
    return tuple((float(x), float(y)) for x, y in arr[keep])
