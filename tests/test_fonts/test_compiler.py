"""Tests for TTF compilation and WOFF2 compression (fontTools)."""

import io
import time

import pytest
from fontTools.misc.timeTools import epoch_diff
from fontTools.ttLib import TTFont

from tests.conftest import SQUARE_SVG, TEXT_ONLY_SVG

from svg2woff2.engine.pipeline import build_glyphs, svg2ttf, svg2woff2, svgs_to_svg_font
from svg2woff2.exceptions import FontCompileError
from svg2woff2.fonts.compiler import compile_ttf
from svg2woff2.fonts.compressor import compress_woff2
from svg2woff2.models.options import Svg2Woff2Options, SvgFontParameters, SvgSource, TtfFontParameters


def _load(data: bytes) -> TTFont:
    return TTFont(io.BytesIO(data))


@pytest.fixture
def svg_font(icon_sources, metrics) -> str:
    return svgs_to_svg_font(icon_sources, metrics)


def test_compile_cmap_and_order(svg_font):
    font = _load(compile_ttf(svg_font))
    assert font.getGlyphOrder() == [".notdef", "ring", "face", "house", "bars"]
    assert font.getBestCmap() == {
        0xE000: "ring",
        0xE001: "face",
        0xE002: "house",
        0xE003: "bars",
    }


def test_compile_metrics(svg_font, icon_sources, metrics):
    font = _load(compile_ttf(svg_font))
    assert font["head"].unitsPerEm == 1000
    assert font["hhea"].ascent == 1000
    assert font["hhea"].descent == 0
    assert tuple(font["hmtx"][".notdef"]) == (1000, 0)

    glyphs = build_glyphs(icon_sources, metrics)
    for glyph in glyphs:
        advance, _ = font["hmtx"][glyph.name]
        assert advance == round(glyph.advance_width)


def test_outlines_present(svg_font):
    font = _load(compile_ttf(svg_font))
    glyf = font["glyf"]
    assert glyf[".notdef"].numberOfContours == 0
    # Head plus two eyes plus the mouth
    assert glyf["face"].numberOfContours == 4
    assert glyf["ring"].numberOfContours == 1
    assert glyf["house"].numberOfContours == 2


def test_square_outline_bounds(metrics):
    svg = svgs_to_svg_font([SvgSource(name="sq", content=SQUARE_SVG)], metrics)
    font = _load(compile_ttf(svg))
    glyph = font["glyf"]["sq"]
    assert (glyph.xMin, glyph.yMin, glyph.xMax, glyph.yMax) == (0, 0, 1000, 1000)


def test_name_table():
    svg = svgs_to_svg_font(
        [SvgSource(name="sq", content=SQUARE_SVG)],
        SvgFontParameters(font_family="My Icons"),
    )
    meta = TtfFontParameters(version="2.1", description="Test set", url="https://example.com")
    font = _load(compile_ttf(svg, meta))
    name = font["name"]
    assert name.getDebugName(1) == "My Icons"
    assert name.getDebugName(4) == "My Icons Regular"
    assert name.getDebugName(5) == "Version 2.1"
    assert name.getDebugName(6) == "MyIcons-Regular"
    assert name.getDebugName(10) == "Test set"
    assert name.getDebugName(11) == "https://example.com"


def test_timestamp(svg_font):
    font = _load(compile_ttf(svg_font, TtfFontParameters(ts=1_700_000_000)))
    assert font["head"].created == 1_700_000_000 - epoch_diff
    assert font["head"].modified == 1_700_000_000 - epoch_diff


def test_default_timestamp_is_now(svg_font):
    before = int(time.time())
    font = _load(compile_ttf(svg_font))
    after = int(time.time())
    assert before - epoch_diff <= font["head"].created <= after - epoch_diff
    assert font["head"].modified == font["head"].created


def test_epoch_timestamp(svg_font):
    font = _load(compile_ttf(svg_font, TtfFontParameters(ts=0)))
    # Seconds from 1904-01-01 to 1970-01-01
    assert font["head"].created == 2_082_844_800


def test_same_timestamp_same_bytes(svg_font):
    meta = TtfFontParameters(ts=0)
    assert compile_ttf(svg_font, meta) == compile_ttf(svg_font, meta)


def test_no_font_element():
    with pytest.raises(FontCompileError, match="<font>"):
        compile_ttf("<svg xmlns='http://www.w3.org/2000/svg'/>")


def test_malformed_document():
    with pytest.raises(FontCompileError):
        compile_ttf("<svg><defs><font>")


def test_units_per_em_out_of_range():
    with pytest.raises(FontCompileError, match="units-per-em"):
        compile_ttf("<svg><defs><font><font-face units-per-em='8'/></font></defs></svg>")


def test_compress_woff2(svg_font):
    ttf = compile_ttf(svg_font)
    woff2 = compress_woff2(ttf)
    assert woff2[:4] == b"wOF2"
    font = _load(woff2)
    assert font.flavor == "woff2"
    assert font.getBestCmap()[0xE000] == "ring"


def test_svg2ttf_and_svg2woff2(icon_sources):
    options = Svg2Woff2Options(svg_font_opt=SvgFontParameters(font_family="Icons"))
    ttf = svg2ttf(icon_sources, options)
    assert _load(ttf)["head"].unitsPerEm == 1024
    assert svg2woff2(icon_sources, options)[:4] == b"wOF2"


def test_svg2woff2_keeps_code_point_gaps():
    sources = [
        SvgSource(name="a", content=SQUARE_SVG),
        SvgSource(name="b", content=TEXT_ONLY_SVG),
        SvgSource(name="c", content=SQUARE_SVG),
    ]
    options = Svg2Woff2Options(svg_font_opt=SvgFontParameters(font_family="Icons"), unicode_base=0xF000)
    font = _load(svg2woff2(sources, options))
    assert font.getBestCmap() == {0xF000: "a", 0xF002: "c"}
