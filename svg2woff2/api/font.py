"""POST /api/font/*: SVG font, stylesheet and WOFF2 generation."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from svg2woff2.config import Settings
from svg2woff2.css.emitter import generate_css
from svg2woff2.dependencies import get_settings
from svg2woff2.engine.context import ConversionReport
from svg2woff2.engine.pipeline import create_pipeline
from svg2woff2.exceptions import ConfigurationError, FontCompileError
from svg2woff2.fonts.compiler import compile_ttf
from svg2woff2.fonts.compressor import compress_woff2
from svg2woff2.models.options import GenerateCssOptions
from svg2woff2.models.requests import CssRequest, SvgFontRequest, Woff2Request
from svg2woff2.models.responses import CssResponse, DiagnosticOut, GlyphSummary, SvgFontResponse
from svg2woff2.svg.serializer import serialize_svg_font

router = APIRouter(prefix="/font")


def _unicode_base(requested: int | None, settings: Settings) -> int:
    return settings.unicode_base if requested is None else requested


@router.post("/svg", response_model=SvgFontResponse)
async def svg_font(req: SvgFontRequest, settings: Settings = Depends(get_settings)) -> SvgFontResponse:
    start = time.perf_counter()
    report = ConversionReport()

    try:
        pipeline = create_pipeline(
            req.svg_font_opt,
            _unicode_base(req.unicode_base, settings),
            precision=settings.path_precision,
        )
        glyphs = pipeline.build_glyphs(req.svgs, report)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return SvgFontResponse(
        svg_font=serialize_svg_font(glyphs, pipeline.metrics),
        glyphs=[
            GlyphSummary(name=g.name, code_point=g.code_point, advance_width=g.advance_width)
            for g in glyphs
        ],
        diagnostics=[
            DiagnosticOut(kind=d.kind.value, source=d.source, message=d.message, tag=d.tag)
            for d in report.diagnostics
        ],
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/css", response_model=CssResponse)
async def css(req: CssRequest, settings: Settings = Depends(get_settings)) -> CssResponse:
    options = GenerateCssOptions(
        font_family=req.font_family,
        font_url=req.font_url,
        unicode_base=_unicode_base(req.unicode_base, settings),
        vertical_align=req.vertical_align,
    )
    try:
        return CssResponse(css=generate_css(req.names, options))
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/woff2")
async def woff2(req: Woff2Request, settings: Settings = Depends(get_settings)) -> Response:
    try:
        pipeline = create_pipeline(
            req.svg_font_opt,
            _unicode_base(req.unicode_base, settings),
            precision=settings.path_precision,
        )
        svg = pipeline.build_svg_font(req.svgs)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    try:
        data = compress_woff2(compile_ttf(svg, req.ttf_font_opt))
    except FontCompileError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return Response(content=data, media_type="font/woff2")
