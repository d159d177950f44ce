"""API request models."""

from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import BaseModel, Field, field_validator

from arrayplot.models.options import RenderOptions, TileOptions


def check_matrix(matrix: list[Any]) -> list[Any]:
    """Reject ragged, non-numeric or empty matrices before they reach the engine.

    Rank is left to the matrix adapter so that a 3D body still reports
    ``InvalidRank``.
    """
    try:
        array = np.asarray(matrix, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"matrix must be rectangular and numeric: {e}") from e
    if array.size == 0:
        raise ValueError("matrix must not be empty")
    return matrix


class PlotRequest(BaseModel):
    matrix: list[Any] = Field(..., min_length=1, description="Rectangular 2D matrix, row-major")
    options: RenderOptions = Field(default_factory=RenderOptions)

    @field_validator("matrix")
    @classmethod
    def _check_matrix(cls, matrix: list[Any]) -> list[Any]:
        return check_matrix(matrix)


class TilePlotRequest(BaseModel):
    matrices: dict[str, list[Any]] = Field(
        ...,
        description="Title → matrix; tiles are laid out in key order",
    )
    options: TileOptions = Field(default_factory=TileOptions)

    @field_validator("matrices")
    @classmethod
    def _check_matrices(cls, matrices: dict[str, list[Any]]) -> dict[str, list[Any]]:
        for title, matrix in matrices.items():
            try:
                check_matrix(matrix)
            except ValueError as e:
                raise ValueError(f"{title!r}: {e}") from e
        return matrices
