"""Pipeline orchestrator: named SVG sources -> glyphs -> SVG font -> TTF -> WOFF2.

The i-th source always gets code point ``unicode_base + i``. A source that is
dropped (bad markup, no geometry, degenerate geometry) leaves its code point
unused instead of shifting later sources; the CSS emitter relies on this.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from svg2woff2.engine.config import (
    DEFAULT_PRECISION,
    DEFAULT_UNICODE_BASE,
    FontMetrics,
    check_code_point_range,
    check_unique_names,
    resolve_font_metrics,
)
from svg2woff2.engine.context import ConversionReport, DiagnosticKind, Glyph
from svg2woff2.engine.normalize import normalize_path
from svg2woff2.exceptions import DegenerateGeometryError
from svg2woff2.fonts.compiler import compile_ttf
from svg2woff2.fonts.compressor import compress_woff2
from svg2woff2.models.options import Svg2Woff2Options, SvgFontParameters, SvgSource
from svg2woff2.svg.serializer import serialize_svg_font
from svg2woff2.svg.walker import parse_svg

logger = logging.getLogger(__name__)


class GlyphPipeline:
    """Builds glyphs and SVG-font documents for one set of resolved metrics."""

    def __init__(self, metrics: FontMetrics, unicode_base: int = DEFAULT_UNICODE_BASE) -> None:
        self.metrics = metrics
        self.unicode_base = unicode_base

    def build_glyphs(
        self,
        sources: Sequence[SvgSource],
        report: ConversionReport | None = None,
    ) -> list[Glyph]:
        """Glyphs in input order. Per-source failures go to ``report`` and drop that source."""
        if report is None:
            report = ConversionReport()
        check_unique_names(s.name for s in sources)
        check_code_point_range(self.unicode_base, len(sources))

        start = time.perf_counter()
        glyphs: list[Glyph] = []

        for index, source in enumerate(sources):
            parsed = parse_svg(
                source.content,
                source.name,
                report,
                keep_view_box=self.metrics.preserve_viewbox,
            )
            if parsed is None:
                continue

            try:
                normalized = normalize_path(parsed.path, self.metrics, parsed.view_box)
            except DegenerateGeometryError as e:
                report.add(DiagnosticKind.DEGENERATE_GEOMETRY, source.name, str(e))
                continue
            except Exception as e:
                # Malformed path data surfaces here, from the path parser
                report.add(DiagnosticKind.TRANSFORM_ERROR, source.name, str(e))
                continue

            code_point = self.unicode_base + index
            glyphs.append(
                Glyph(
                    name=source.name,
                    unicode=chr(code_point),
                    path=normalized.path,
                    advance_width=normalized.width,
                )
            )
            logger.debug("  %s -> U+%04X, width %.2f", source.name, code_point, normalized.width)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Built %d/%d glyphs in %.0fms (%d dropped)",
            len(glyphs),
            len(sources),
            elapsed,
            len(sources) - len(glyphs),
        )
        return glyphs

    def build_svg_font(
        self,
        sources: Sequence[SvgSource],
        report: ConversionReport | None = None,
    ) -> str:
        return serialize_svg_font(self.build_glyphs(sources, report), self.metrics)


def create_pipeline(
    params: SvgFontParameters | FontMetrics,
    unicode_base: int | None = None,
    precision: int = DEFAULT_PRECISION,
) -> GlyphPipeline:
    """Resolve metrics once and return a pipeline bound to them."""
    metrics = resolve_font_metrics(params, precision=precision)
    return GlyphPipeline(metrics, DEFAULT_UNICODE_BASE if unicode_base is None else unicode_base)


def build_glyphs(
    sources: Sequence[SvgSource],
    metrics: SvgFontParameters | FontMetrics,
    unicode_base: int | None = None,
    report: ConversionReport | None = None,
) -> list[Glyph]:
    return create_pipeline(metrics, unicode_base).build_glyphs(sources, report)


def svgs_to_svg_font(
    sources: Sequence[SvgSource],
    metrics: SvgFontParameters | FontMetrics,
    unicode_base: int | None = None,
    report: ConversionReport | None = None,
) -> str:
    """Sources straight to SVG-font text."""
    return create_pipeline(metrics, unicode_base).build_svg_font(sources, report)


def svg2ttf(
    sources: Sequence[SvgSource],
    options: Svg2Woff2Options,
    report: ConversionReport | None = None,
) -> bytes:
    svg_font = svgs_to_svg_font(sources, options.svg_font_opt, options.unicode_base, report)
    return compile_ttf(svg_font, options.ttf_font_opt)


def svg2woff2(
    sources: Sequence[SvgSource],
    options: Svg2Woff2Options,
    report: ConversionReport | None = None,
) -> bytes:
    return compress_woff2(svg2ttf(sources, options, report))
