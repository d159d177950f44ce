"""POST /api/plot and /api/tile-plot — render matrices to SVG / HTML."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from arrayplot.engine.pipeline import plot, tile_plot
from arrayplot.models.requests import PlotRequest, TilePlotRequest

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"


def _as_array(matrix: list[Any]) -> np.ndarray:
    # JSON arrives as nested lists; as an ndarray it goes through the rank check
    return np.asarray(matrix, dtype=np.float64)


@router.post("/plot", response_class=Response)
def plot_endpoint(req: PlotRequest) -> Response:
    svg = plot(_as_array(req.matrix), req.options).to_svg()
    logger.info("Plot %r rendered (%d bytes)", req.options.title, len(svg))
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)


@router.post("/tile-plot", response_class=HTMLResponse)
def tile_plot_endpoint(req: TilePlotRequest) -> HTMLResponse:
    matrices = {title: _as_array(m) for title, m in req.matrices.items()}
    grid = tile_plot(matrices, req.options)
    return HTMLResponse(content=grid.to_html())
