"""Matrix adapter — tensor-like or nested-sequence input → read-only 2D grid."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from arrayplot.errors import InvalidRank

logger = logging.getLogger(__name__)

Grid = NDArray[np.float64]
MatrixLike = Union[Any, Sequence[Sequence[float]]]


def tensor_rank(data: Any) -> int | None:
    """Rank of a tensor-like object, or None for plain nested sequences."""
    ndim = getattr(data, "ndim", None)
    if ndim is not None:
        return int(ndim)
    shape = getattr(data, "shape", None)
    if shape is not None:
        return len(shape)
    return None


def to_grid(data: MatrixLike) -> Grid:
    """Convert matrix input into a row-major float grid.

    Tensor-like objects (numpy arrays, torch/jax tensors, anything with
    ``ndim`` or ``shape``) must be rank 2. Nested sequences are taken as-is;
    rows are assumed to be of equal length.
    """
    rank = tensor_rank(data)
    if rank is not None and rank != 2:
        raise InvalidRank(rank)

    grid = np.array(data, dtype=np.float64)
    grid.setflags(write=False)
    logger.debug("Grid %d×%d from %s", grid.shape[0], grid.shape[1], type(data).__name__)
    return grid


def grid_shape(grid: Grid) -> tuple[int, int]:
    rows, cols = grid.shape
    return int(rows), int(cols)
