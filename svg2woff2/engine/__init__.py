"""svg2woff2 glyph engine."""

from svg2woff2.engine.config import FontMetrics, resolve_font_metrics
from svg2woff2.engine.context import ConversionReport, Diagnostic, DiagnosticKind, Glyph, ViewBox
from svg2woff2.engine.pipeline import GlyphPipeline, build_glyphs, create_pipeline

__all__ = [
    "FontMetrics",
    "resolve_font_metrics",
    "ConversionReport",
    "Diagnostic",
    "DiagnosticKind",
    "Glyph",
    "ViewBox",
    "GlyphPipeline",
    "build_glyphs",
    "create_pipeline",
]
