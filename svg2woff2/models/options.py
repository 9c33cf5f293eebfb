"""Caller-facing option models. Optional fields are filled by the engine, not here."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SvgSource(BaseModel):
    """One icon: a unique name and its raw SVG markup."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Glyph name and CSS class suffix")
    content: str = Field(..., description="Raw SVG markup")


class SvgFontParameters(BaseModel):
    font_family: str | None = Field(default=None, description="Font family name (required)")
    units_per_em: float | None = Field(default=None, description="Em-square height, default 1024")
    ascent: float | None = Field(default=None, description="Defaults to units_per_em")
    descent: float | None = None
    offset_y: float | None = Field(default=None, description="Baseline shift applied after scaling")
    height_decrease: float | None = Field(default=None, description="Shrinks the usable glyph height")
    preserve_viewbox: bool | None = Field(
        default=None,
        description="Scale against the source viewBox instead of the path bounds, default True",
    )


class TtfFontParameters(BaseModel):
    version: str = "1.0"
    description: str = ""
    url: str = ""
    ts: int | None = Field(default=None, description="Creation timestamp (Unix seconds)")


class Svg2Woff2Options(BaseModel):
    ttf_font_opt: TtfFontParameters = Field(default_factory=TtfFontParameters)
    svg_font_opt: SvgFontParameters
    unicode_base: int | None = Field(default=None, description="First code point, default U+E000")


class GenerateCssOptions(BaseModel):
    font_family: str
    font_url: str
    unicode_base: int | None = None
    vertical_align: str | None = None
