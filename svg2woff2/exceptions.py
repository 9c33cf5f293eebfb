"""Exception hierarchy for the glyph pipeline.

Per-source and per-node failures are recovered by the pipeline and recorded in a
ConversionReport. Configuration and collaborator failures propagate to the caller.
"""

from __future__ import annotations


class Svg2Woff2Error(Exception):
    """Base class for all svg2woff2 errors."""


class SourceParseError(Svg2Woff2Error):
    """Raw SVG markup is not well-formed or is not an <svg> document."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ShapeConversionError(Svg2Woff2Error):
    """A basic shape element could not be converted to path data."""

    def __init__(self, tag: str, message: str) -> None:
        super().__init__(f"<{tag}>: {message}")
        self.tag = tag


class DegenerateGeometryError(Svg2Woff2Error):
    """A glyph's geometry cannot be scaled (empty path, zero height, non-finite result)."""


class ConfigurationError(Svg2Woff2Error):
    """Font metrics or conversion options are missing or invalid."""


class DuplicateGlyphNameError(ConfigurationError):
    """Two sources share a name, so glyph names and CSS classes would collide."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"Duplicate glyph names: {', '.join(names)}")
        self.names = names


class FontCompileError(Svg2Woff2Error):
    """The SVG-font document could not be compiled into a TrueType font."""
