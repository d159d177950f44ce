"""Write SVG and tile-grid HTML markup from element definitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from arrayplot.models.svg_document import SvgElement

SVG_NS = "http://www.w3.org/2000/svg"

_ATTR_ENTITIES = {'"': "&quot;"}


def format_number(value: float) -> str:
    """Compact coordinate formatting: 2 decimals, trailing zeros dropped."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def serialize_element(elem: SvgElement, depth: int = 1) -> list[str]:
    pad = "  " * depth
    attr_str = " ".join(
        f'{k}="{escape(str(v), _ATTR_ENTITIES)}"' for k, v in elem.attributes.items()
    )
    open_tag = f"<{elem.tag} {attr_str}" if attr_str else f"<{elem.tag}"

    if elem.text is not None:
        return [f"{pad}{open_tag}>{escape(elem.text)}</{elem.tag}>"]
    if not elem.children:
        return [f"{pad}{open_tag}/>"]

    lines = [f"{pad}{open_tag}>"]
    for child in elem.children:
        lines.extend(serialize_element(child, depth + 1))
    lines.append(f"{pad}</{elem.tag}>")
    return lines


def serialize_svg(
    elements: Iterable[SvgElement],
    width: float,
    height: float,
    styles: dict[str, str] | None = None,
    defs: Sequence[SvgElement] = (),
) -> str:
    """Generate a standalone, pixel-dimensioned SVG document."""
    lines = [
        f'<svg width="{format_number(width)}" height="{format_number(height)}" xmlns="{SVG_NS}">',
    ]

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    if defs:
        lines.append("  <defs>")
        for elem in defs:
            lines.extend(serialize_element(elem, depth=2))
        lines.append("  </defs>")

    for elem in elements:
        lines.extend(serialize_element(elem))

    lines.append("</svg>")
    return "\n".join(lines)


def serialize_tile_grid(
    svgs: Iterable[str],
    tile_width: float,
    columns: int,
    gap: float,
) -> str:
    """Wrap SVG documents in a CSS grid container, one ``<div>`` per tile."""
    style = (
        f"display: grid; grid-template-columns: repeat({columns}, {format_number(tile_width)}px); "
        f"gap: {format_number(gap)}px;"
    )
    lines = [f'<div style="{style}">']
    for svg in svgs:
        lines.append(f"<div>{svg}</div>")
    lines.append("</div>")
    return "\n".join(lines)
