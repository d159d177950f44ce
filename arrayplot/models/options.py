"""Render options for single and tiled plots."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arrayplot.engine.colorscheme import ColorScheme, resolve_scheme


class RenderOptions(BaseModel):
    # Misspelled option names raise instead of being dropped
    model_config = ConfigDict(frozen=True, extra="forbid")

    colorscheme: ColorScheme = Field(default=ColorScheme.GRAYSCALE)
    width: int = Field(default=400, gt=0, description="Canvas width in pixels")
    height: int = Field(default=400, gt=0, description="Canvas height in pixels")
    title: str = "Array Plot"
    show_values: bool = False
    show_colorbar: bool = True

    @field_validator("colorscheme", mode="before")
    @classmethod
    def _resolve_colorscheme(cls, value: Any) -> ColorScheme:
        # Any unrecognized value renders as grayscale
        return resolve_scheme(value)


class TileOptions(BaseModel):
    """Options shared by every tile; titles come from the mapping keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    colorscheme: ColorScheme = Field(default=ColorScheme.GRAYSCALE)
    width: int = Field(default=250, gt=0, description="Width of one tile in pixels")
    height: int = Field(default=250, gt=0, description="Height of one tile in pixels")
    show_values: bool = False
    show_colorbar: bool = False
    gap: int = Field(default=10, ge=0, description="Spacing between tiles in pixels")

    @field_validator("colorscheme", mode="before")
    @classmethod
    def _resolve_colorscheme(cls, value: Any) -> ColorScheme:
        return resolve_scheme(value)

    def for_tile(self, title: str) -> RenderOptions:
        return RenderOptions(
            colorscheme=self.colorscheme,
            width=self.width,
            height=self.height,
            title=title,
            show_values=self.show_values,
            show_colorbar=self.show_colorbar,
        )
