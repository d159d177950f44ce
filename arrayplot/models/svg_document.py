"""Rendered document models — a single plot scene and a grid of tiles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from arrayplot.svg.serializer import serialize_svg, serialize_tile_grid


class SvgElement(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    children: tuple[SvgElement, ...] = ()

    @property
    def css_class(self) -> str:
        return self.attributes.get("class", "")


class Scene(BaseModel):
    """A fully composed array plot. Displays as SVG in notebook frontends."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    title: str = ""
    styles: dict[str, str] = Field(default_factory=dict)
    defs: tuple[SvgElement, ...] = ()
    elements: tuple[SvgElement, ...] = ()

    def select(self, tag: str, css_class: str | None = None) -> list[SvgElement]:
        """Drawn elements with the given tag (and class, if given), in draw order."""
        return [
            e
            for e in self.elements
            if e.tag == tag and (css_class is None or e.css_class == css_class)
        ]

    def to_svg(self) -> str:
        return serialize_svg(
            self.elements,
            self.width,
            self.height,
            styles=self.styles,
            defs=self.defs,
        )

    def _repr_svg_(self) -> str:
        return self.to_svg()

    def __str__(self) -> str:
        return self.to_svg()


class Tile(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    scene: Scene


class TileGrid(BaseModel):
    """Several scenes arranged in a fixed-column CSS grid. Displays as HTML."""

    model_config = ConfigDict(frozen=True)

    tiles: tuple[Tile, ...] = ()
    tile_width: int
    columns: int = 3
    gap: int = 10

    def to_html(self) -> str:
        return serialize_tile_grid(
            (tile.scene.to_svg() for tile in self.tiles),
            self.tile_width,
            self.columns,
            self.gap,
        )

    def _repr_html_(self) -> str:
        return self.to_html()

    def __len__(self) -> int:
        return len(self.tiles)

    def __str__(self) -> str:
        return self.to_html()
