"""Render entry points — matrix adapter → normalize → color → layout → scene."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from arrayplot.engine.matrix import MatrixLike, to_grid
from arrayplot.engine.scene import compose_scene
from arrayplot.engine.tiles import compose_tiles
from arrayplot.models.options import RenderOptions, TileOptions
from arrayplot.models.svg_document import Scene, TileGrid

logger = logging.getLogger(__name__)


def _merge(options: Any, overrides: dict[str, Any], model: type[BaseModel]) -> Any:
    """Validate options given as a model, a plain mapping, keywords, or a mix."""
    if isinstance(options, BaseModel):
        base = options.model_dump()
    else:
        base = dict(options or {})
    if model is TileOptions:
        # Tiles are titled by their mapping keys
        base.pop("title", None)
    return model.model_validate({**base, **overrides})


def plot(
    matrix: MatrixLike,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Scene:
    """Render a 2D matrix as an array plot.

    Options can be passed as a ``RenderOptions`` instance or a plain dict, as keyword
    arguments, or both (keywords win):

        plot(data, colorscheme="viridis", show_values=True)

    Raises ``InvalidRank`` for tensor-like input that is not 2-dimensional.
    """
    opts: RenderOptions = _merge(options, overrides, RenderOptions)
    start = time.perf_counter()
    scene = compose_scene(to_grid(matrix), opts)
    logger.debug("plot %r rendered in %.1fms", opts.title, (time.perf_counter() - start) * 1000)
    return scene


def tile_plot(
    named_matrices: Mapping[str, MatrixLike],
    options: TileOptions | RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> TileGrid:
    """Render each matrix of a title → matrix mapping and tile the plots 3 per row.

    Shared options may be ``TileOptions``, ``RenderOptions`` (its title is
    ignored) or a plain dict.
    """
    opts: TileOptions = _merge(options, overrides, TileOptions)
    start = time.perf_counter()
    grid = compose_tiles(named_matrices, opts)
    logger.debug("tile_plot rendered %d tiles in %.1fms", len(grid), (time.perf_counter() - start) * 1000)
    return grid
