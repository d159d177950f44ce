"""Cell layout — pixel geometry of the grid, labels and colorbar."""

from __future__ import annotations

from dataclasses import dataclass

from arrayplot.engine.config import DEFAULT_LAYOUT, LayoutConfig


@dataclass(frozen=True)
class ColorbarLayout:
    x: float
    y: float
    width: float
    height: float
    label_x: float


@dataclass(frozen=True)
class CellLayout:
    """Geometry for a rows×cols grid drawn on a width×height canvas."""

    rows: int
    cols: int
    width: float
    height: float
    plot_width: float
    plot_height: float
    x_offset: float
    y_offset: float
    cell_width: float
    cell_height: float
    font_size: float
    colorbar: ColorbarLayout

    def cell_origin(self, row: int, col: int) -> tuple[float, float]:
        """Top-left corner of a cell."""
        return (
            self.x_offset + col * self.cell_width,
            self.y_offset + row * self.cell_height,
        )

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        x, y = self.cell_origin(row, col)
        return x + self.cell_width / 2, y + self.cell_height / 2


def compute_layout(
    rows: int,
    cols: int,
    width: float,
    height: float,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> CellLayout:
    # Large grids just get smaller cells; legibility is up to the caller.
    plot_width = width * config.plot_width_ratio
    plot_height = height * config.plot_height_ratio
    cell_width = plot_width / cols
    cell_height = plot_height / rows

    colorbar_x = width * config.colorbar_x_ratio
    colorbar = ColorbarLayout(
        x=colorbar_x,
        y=height * config.colorbar_y_ratio,
        width=config.colorbar_width,
        height=height * config.colorbar_height_ratio,
        label_x=colorbar_x + config.colorbar_width + config.colorbar_label_gap,
    )

    return CellLayout(
        rows=rows,
        cols=cols,
        width=width,
        height=height,
        plot_width=plot_width,
        plot_height=plot_height,
        x_offset=width * config.x_offset_ratio,
        y_offset=height * config.y_offset_ratio,
        cell_width=cell_width,
        cell_height=cell_height,
        font_size=min(cell_width, cell_height) * config.font_scale,
        colorbar=colorbar,
    )
