"""Layout configuration — canvas ratios and fixed decoration geometry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Proportions of the canvas used by each part of an array plot."""

    # Plot area as a fraction of the canvas
    plot_width_ratio: float = 0.8
    plot_height_ratio: float = 0.7
    # Offsets of the plot area from the top-left corner
    x_offset_ratio: float = 0.1
    y_offset_ratio: float = 0.15

    # Value labels scale with the smaller cell side
    font_scale: float = 0.3
    font_family: str = "Arial, sans-serif"

    # Title baseline from the top edge (px)
    title_y: float = 25.0
    # Dimension label baseline from the bottom edge (px)
    dimension_label_margin: float = 10.0

    # Colorbar
    colorbar_x_ratio: float = 0.92
    colorbar_y_ratio: float = 0.25
    colorbar_height_ratio: float = 0.5
    colorbar_width: float = 20.0
    colorbar_label_gap: float = 5.0
    colorbar_stops: int = 11

    # Cell separators
    cell_stroke: str = "#ffffff"
    cell_stroke_width: float = 0.5


DEFAULT_LAYOUT = LayoutConfig()
