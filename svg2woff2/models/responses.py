"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class GlyphSummary(BaseModel):
    name: str
    code_point: int
    advance_width: float


class DiagnosticOut(BaseModel):
    kind: str
    source: str
    message: str
    tag: str | None = None


class SvgFontResponse(BaseModel):
    svg_font: str
    glyphs: list[GlyphSummary] = Field(default_factory=list)
    diagnostics: list[DiagnosticOut] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class CssResponse(BaseModel):
    css: str
