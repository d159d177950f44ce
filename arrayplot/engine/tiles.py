"""Tile composer — several independently rendered scenes in one grid view."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from arrayplot.engine.matrix import MatrixLike, to_grid
from arrayplot.engine.scene import DEFAULT_GRADIENT_ID, compose_scene
from arrayplot.models.options import TileOptions
from arrayplot.models.svg_document import Tile, TileGrid

logger = logging.getLogger(__name__)

# Fixed regardless of how many tiles there are.
TILE_COLUMNS = 3


def compose_tiles(named_matrices: Mapping[str, MatrixLike], options: TileOptions) -> TileGrid:
    """Render each (title, matrix) entry in mapping order and arrange the results."""
    tiles: list[Tile] = []
    for index, (title, matrix) in enumerate(named_matrices.items()):
        scene = compose_scene(
            to_grid(matrix),
            options.for_tile(str(title)),
            gradient_id=f"{DEFAULT_GRADIENT_ID}-{index}",
        )
        tiles.append(Tile(title=str(title), scene=scene))

    logger.info(
        "Composed %d tiles (%d×%d px each, %d columns)",
        len(tiles),
        options.width,
        options.height,
        TILE_COLUMNS,
    )
    return TileGrid(
        tiles=tuple(tiles),
        tile_width=options.width,
        columns=TILE_COLUMNS,
        gap=options.gap,
    )
