"""arrayplot — render 2D numeric matrices as color-coded SVG grids."""

from arrayplot.engine import (
    CellLayout,
    ColorScheme,
    color,
    colormap,
    compose_scene,
    compose_tiles,
    compute_layout,
    normalize,
    plot,
    tile_plot,
    to_grid,
)
from arrayplot.errors import InvalidRank
from arrayplot.models.options import RenderOptions, TileOptions
from arrayplot.models.svg_document import Scene, TileGrid

__version__ = "0.1.0"

__all__ = [
    "CellLayout",
    "ColorScheme",
    "InvalidRank",
    "RenderOptions",
    "Scene",
    "TileGrid",
    "TileOptions",
    "color",
    "colormap",
    "compose_scene",
    "compose_tiles",
    "compute_layout",
    "normalize",
    "plot",
    "tile_plot",
    "to_grid",
]
