"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg2woff2.models.options import SvgFontParameters, SvgSource, TtfFontParameters


class SvgFontRequest(BaseModel):
    svgs: list[SvgSource] = Field(..., description="Icons in code point order")
    svg_font_opt: SvgFontParameters
    unicode_base: int | None = Field(default=None, description="First code point, default from settings")


class Woff2Request(SvgFontRequest):
    ttf_font_opt: TtfFontParameters = Field(default_factory=TtfFontParameters)


class CssRequest(BaseModel):
    names: list[str] = Field(..., description="Icon names in code point order")
    font_family: str
    font_url: str = Field(..., description="URL the stylesheet loads the WOFF2 from")
    unicode_base: int | None = None
    vertical_align: str | None = None
