"""Min/max normalization into [0, 1]."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from arrayplot.engine.matrix import Grid

# Constant grids have no range to scale against; every cell sits mid-scale.
CONSTANT_LEVEL = 0.5


def value_range(grid: Grid) -> tuple[float, float]:
    """(min, max) of the grid as Python floats."""
    return float(np.min(grid)), float(np.max(grid))


def normalize(grid: Grid, min_val: float, max_val: float) -> NDArray[np.float64]:
    """(v - min) / (max - min) per cell, or 0.5 everywhere when min == max."""
    if min_val == max_val:
        return np.full(grid.shape, CONSTANT_LEVEL, dtype=np.float64)
    return (grid - min_val) / (max_val - min_val)
