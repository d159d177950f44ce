"""Color scheme engine — table-driven piecewise-linear colormaps.

Each scheme is a sorted list of (breakpoint, anchor RGB) stops spanning
[0, 1]. A single interpolation routine walks the table, so adding a scheme
means adding a table entry:

    _SCHEME_STOPS[ColorScheme.MAGMA] = (
        (0.0, (0, 0, 4)),
        (1.0, (252, 253, 191)),
    )

Unknown scheme names resolve to grayscale through an explicit fallback in
``resolve_scheme``.
"""

from __future__ import annotations

import enum
import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
Stop = tuple[float, RGB]


class ColorScheme(str, enum.Enum):
    GRAYSCALE = "grayscale"
    VIRIDIS = "viridis"
    PLASMA = "plasma"
    COOLWARM = "coolwarm"


_SCHEME_STOPS: dict[ColorScheme, tuple[Stop, ...]] = {
    # white at 0 → black at 1
    ColorScheme.GRAYSCALE: (
        (0.0, (255, 255, 255)),
        (1.0, (0, 0, 0)),
    ),
    ColorScheme.VIRIDIS: (
        (0.0, (68, 1, 84)),
        (0.25, (85, 104, 109)),
        (0.5, (43, 144, 140)),
        (0.75, (33, 168, 95)),
        (1.0, (253, 231, 37)),
    ),
    ColorScheme.PLASMA: (
        (0.0, (13, 8, 135)),
        (0.33, (126, 3, 167)),
        (0.66, (204, 71, 120)),
        (1.0, (240, 249, 33)),
    ),
    ColorScheme.COOLWARM: (
        (0.0, (59, 76, 192)),
        (0.5, (221, 221, 221)),
        (1.0, (180, 4, 38)),
    ),
}

FALLBACK_SCHEME = ColorScheme.GRAYSCALE


def _build_table(stops: tuple[Stop, ...]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    breakpoints = np.array([bp for bp, _ in stops], dtype=np.float64)
    anchors = np.array([rgb for _, rgb in stops], dtype=np.float64)
    return breakpoints, anchors


_TABLES = {scheme: _build_table(stops) for scheme, stops in _SCHEME_STOPS.items()}


def available_schemes() -> list[str]:
    return [scheme.value for scheme in _SCHEME_STOPS]


def scheme_stops(scheme: str | ColorScheme) -> tuple[Stop, ...]:
    """The (breakpoint, anchor) table behind a scheme."""
    return _SCHEME_STOPS[resolve_scheme(scheme)]


def resolve_scheme(name: Any) -> ColorScheme:
    """Look up a scheme by exact name; any other value falls back to grayscale."""
    if isinstance(name, ColorScheme):
        return name
    try:
        return ColorScheme(name)
    except (ValueError, TypeError):
        logger.debug("Unknown colorscheme %r, falling back to %s", name, FALLBACK_SCHEME.value)
        return FALLBACK_SCHEME


def colormap(values: ArrayLike, scheme: str | ColorScheme) -> NDArray[np.uint8]:
    """Map normalized values to RGB. Output shape is ``values.shape + (3,)``.

    Values are clamped to [0, 1]; channels are rounded half-up.
    """
    breakpoints, anchors = _TABLES[resolve_scheme(scheme)]
    v = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    channels = [np.interp(v, breakpoints, anchors[:, i]) for i in range(3)]
    rgb = np.floor(np.stack(channels, axis=-1) + 0.5)
    return np.clip(rgb, 0, 255).astype(np.uint8)


def color(value: float, scheme: str | ColorScheme = FALLBACK_SCHEME) -> RGB:
    """Single normalized value → (r, g, b) integer triple."""
    r, g, b = colormap(value, scheme)
    return int(r), int(g), int(b)


def rgb_string(rgb: RGB | NDArray[np.uint8]) -> str:
    r, g, b = (int(c) for c in rgb)
    return f"rgb({r},{g},{b})"
