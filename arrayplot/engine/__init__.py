"""Array plot rendering engine."""

from arrayplot.engine.colorscheme import ColorScheme, color, colormap, resolve_scheme
from arrayplot.engine.layout import CellLayout, compute_layout
from arrayplot.engine.matrix import to_grid
from arrayplot.engine.normalize import normalize, value_range
from arrayplot.engine.pipeline import plot, tile_plot
from arrayplot.engine.scene import compose_scene
from arrayplot.engine.tiles import compose_tiles

__all__ = [
    "ColorScheme",
    "color",
    "colormap",
    "resolve_scheme",
    "CellLayout",
    "compute_layout",
    "to_grid",
    "normalize",
    "value_range",
    "plot",
    "tile_plot",
    "compose_scene",
    "compose_tiles",
]
