"""svg2woff2: build an icon web font and its stylesheet from SVG icons.

Each icon's outline is normalized into the font's em-square, assigned a code
point in the Private Use Area, written into an SVG font, compiled to TTF and
compressed to WOFF2. The stylesheet maps ``.hf-<name>`` classes to those code
points.

Example:
    >>> from svg2woff2 import SvgSource, SvgFontParameters, svgs_to_svg_font
    >>> icons = [SvgSource(name="dot", content='<svg><circle r="5"/></svg>')]
    >>> svg_font = svgs_to_svg_font(icons, SvgFontParameters(font_family="Icons"))
"""

from svg2woff2.css.emitter import generate_css
from svg2woff2.engine.config import DEFAULT_UNICODE_BASE, FontMetrics, resolve_font_metrics
from svg2woff2.engine.context import ConversionReport, DiagnosticKind, Glyph
from svg2woff2.engine.pipeline import (
    GlyphPipeline,
    build_glyphs,
    create_pipeline,
    svg2ttf,
    svg2woff2,
    svgs_to_svg_font,
)
from svg2woff2.exceptions import (
    ConfigurationError,
    DegenerateGeometryError,
    DuplicateGlyphNameError,
    FontCompileError,
    ShapeConversionError,
    SourceParseError,
    Svg2Woff2Error,
)
from svg2woff2.models.options import (
    GenerateCssOptions,
    Svg2Woff2Options,
    SvgFontParameters,
    SvgSource,
    TtfFontParameters,
)
from svg2woff2.svg.serializer import serialize_svg_font

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build_glyphs",
    "serialize_svg_font",
    "generate_css",
    "svgs_to_svg_font",
    "svg2ttf",
    "svg2woff2",
    "GlyphPipeline",
    "create_pipeline",
    # Models
    "SvgSource",
    "SvgFontParameters",
    "TtfFontParameters",
    "Svg2Woff2Options",
    "GenerateCssOptions",
    "FontMetrics",
    "resolve_font_metrics",
    "Glyph",
    "ConversionReport",
    "DiagnosticKind",
    "DEFAULT_UNICODE_BASE",
    # Exceptions
    "Svg2Woff2Error",
    "SourceParseError",
    "ShapeConversionError",
    "DegenerateGeometryError",
    "ConfigurationError",
    "DuplicateGlyphNameError",
    "FontCompileError",
    # Metadata
    "__version__",
]
