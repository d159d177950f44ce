"""Scene composer — grid + options → SVG scene.

Draw order: border, title, cells, value labels, colorbar, dimension label.
Colors come from the normalized grid; value labels and colorbar limits show
the raw values.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from arrayplot.engine.colorscheme import colormap, rgb_string
from arrayplot.engine.config import DEFAULT_LAYOUT, LayoutConfig
from arrayplot.engine.layout import CellLayout, compute_layout
from arrayplot.engine.matrix import Grid, grid_shape
from arrayplot.engine.normalize import normalize, value_range
from arrayplot.models.options import RenderOptions
from arrayplot.models.svg_document import Scene, SvgElement
from arrayplot.svg.serializer import format_number as _n

logger = logging.getLogger(__name__)

DEFAULT_GRADIENT_ID = "colorbar-gradient"

# Labels on cells brighter than mid-scale flip to white
_LABEL_CONTRAST_LEVEL = 0.5


def scene_styles(config: LayoutConfig = DEFAULT_LAYOUT) -> dict[str, str]:
    return {
        ".title": f"font-family: {config.font_family}; font-size: 16px; font-weight: bold;",
        ".axis-label": f"font-family: {config.font_family}; font-size: 12px;",
    }


def format_value(value: float) -> str:
    """Cell label text: the value rounded to 2 decimals."""
    return str(round(float(value), 2))


def _border(width: int, height: int) -> SvgElement:
    return SvgElement(
        tag="rect",
        attributes={
            "x": "0.5",
            "y": "0.5",
            "width": _n(width - 1),
            "height": _n(height - 1),
            "stroke": "#000000",
            "stroke-width": "1",
            "fill": "none",
        },
    )


def _title(title: str, width: int, config: LayoutConfig) -> SvgElement:
    return SvgElement(
        tag="text",
        attributes={
            "x": _n(width / 2),
            "y": _n(config.title_y),
            "text-anchor": "middle",
            "class": "title",
        },
        text=title,
    )


def _cells(
    normalized: NDArray[np.float64],
    layout: CellLayout,
    scheme: str,
    config: LayoutConfig,
) -> list[SvgElement]:
    colors = colormap(normalized, scheme)
    cells: list[SvgElement] = []
    for (row, col), _ in np.ndenumerate(normalized):
        x, y = layout.cell_origin(row, col)
        cells.append(
            SvgElement(
                tag="rect",
                attributes={
                    "x": _n(x),
                    "y": _n(y),
                    "width": _n(layout.cell_width),
                    "height": _n(layout.cell_height),
                    "fill": rgb_string(colors[row, col]),
                    "stroke": config.cell_stroke,
                    "stroke-width": _n(config.cell_stroke_width),
                    "class": "cell",
                },
            )
        )
    return cells


def _value_labels(
    grid: Grid,
    normalized: NDArray[np.float64],
    layout: CellLayout,
    config: LayoutConfig,
) -> list[SvgElement]:
    labels: list[SvgElement] = []
    for (row, col), level in np.ndenumerate(normalized):
        cx, cy = layout.cell_center(row, col)
        labels.append(
            SvgElement(
                tag="text",
                attributes={
                    "x": _n(cx),
                    "y": _n(cy),
                    "text-anchor": "middle",
                    "dominant-baseline": "central",
                    "font-family": config.font_family,
                    "font-size": _n(layout.font_size),
                    "fill": "white" if level > _LABEL_CONTRAST_LEVEL else "black",
                    "class": "cell-value",
                },
                text=format_value(grid[row, col]),
            )
        )
    return labels


def _colorbar_gradient(scheme: str, gradient_id: str, config: LayoutConfig) -> SvgElement:
    offsets = np.linspace(0.0, 1.0, config.colorbar_stops)
    colors = colormap(offsets, scheme)
    stops = tuple(
        SvgElement(
            tag="stop",
            attributes={
                "offset": f"{_n(offset * 100)}%",
                "stop-color": rgb_string(rgb),
            },
        )
        for offset, rgb in zip(offsets, colors)
    )
    # Runs bottom → top so the minimum sits at the foot of the bar
    return SvgElement(
        tag="linearGradient",
        attributes={"id": gradient_id, "x1": "0%", "y1": "100%", "x2": "0%", "y2": "0%"},
        children=stops,
    )


def _colorbar(
    layout: CellLayout,
    gradient_id: str,
    min_val: float,
    max_val: float,
    config: LayoutConfig,
) -> list[SvgElement]:
    bar = layout.colorbar
    return [
        SvgElement(
            tag="rect",
            attributes={
                "x": _n(bar.x),
                "y": _n(bar.y),
                "width": _n(bar.width),
                "height": _n(bar.height),
                "fill": f"url(#{gradient_id})",
                "stroke": "#333",
                "stroke-width": "1",
                "class": "colorbar",
            },
        ),
        SvgElement(
            tag="text",
            attributes={"x": _n(bar.label_x), "y": _n(bar.y + config.colorbar_label_gap), "class": "axis-label"},
            text=format_value(max_val),
        ),
        SvgElement(
            tag="text",
            attributes={"x": _n(bar.label_x), "y": _n(bar.y + bar.height), "class": "axis-label"},
            text=format_value(min_val),
        ),
    ]


def _dimension_label(layout: CellLayout, config: LayoutConfig) -> SvgElement:
    return SvgElement(
        tag="text",
        attributes={
            "x": _n(layout.x_offset),
            "y": _n(layout.height - config.dimension_label_margin),
            "class": "axis-label",
        },
        text=f"{layout.rows}×{layout.cols}",
    )


def compose_scene(
    grid: Grid,
    options: RenderOptions,
    gradient_id: str = DEFAULT_GRADIENT_ID,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Scene:
    """Lay out and color every cell of ``grid`` into a Scene.

    ``gradient_id`` must be unique within one HTML page when several scenes
    with colorbars are embedded together.
    """
    rows, cols = grid_shape(grid)
    min_val, max_val = value_range(grid)
    normalized = normalize(grid, min_val, max_val)
    layout = compute_layout(rows, cols, options.width, options.height, config)
    scheme = options.colorscheme

    elements: list[SvgElement] = [
        _border(options.width, options.height),
        _title(options.title, options.width, config),
    ]
    elements.extend(_cells(normalized, layout, scheme, config))
    if options.show_values:
        elements.extend(_value_labels(grid, normalized, layout, config))

    defs: tuple[SvgElement, ...] = ()
    if options.show_colorbar:
        defs = (_colorbar_gradient(scheme, gradient_id, config),)
        elements.extend(_colorbar(layout, gradient_id, min_val, max_val, config))

    elements.append(_dimension_label(layout, config))

    logger.debug(
        "Composed scene %r: %d×%d cells, range [%g, %g], %d elements",
        options.title,
        rows,
        cols,
        min_val,
        max_val,
        len(elements),
    )
    return Scene(
        width=options.width,
        height=options.height,
        title=options.title,
        styles=scene_styles(config),
        defs=defs,
        elements=tuple(elements),
    )
