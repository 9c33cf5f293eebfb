"""SVG font -> TrueType via fontTools.

Reads the <font> element of an SVG-font document (font-face metrics,
missing-glyph, glyph*) and builds a TTF. Glyph path data is already in font
space (y-up); cubic curves are converted to quadratics with Cu2QuPen.
"""

from __future__ import annotations

import io
import logging
import re
import time

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.timeTools import epoch_diff
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from svgpathtools import CubicBezier, Line, Path, QuadraticBezier

from svg2woff2.exceptions import FontCompileError, SourceParseError
from svg2woff2.models.options import TtfFontParameters
from svg2woff2.models.svg_document import SvgNode
from svg2woff2.svg.parser import parse_markup
from svg2woff2.utils.geometry import load_path

logger = logging.getLogger(__name__)

NOTDEF = ".notdef"
# Max deviation (font units) when approximating cubics with quadratics
CU2QU_MAX_ERR = 1.0
_PS_NAME_RE = re.compile(r"[^A-Za-z0-9-]")


def _find(node: SvgNode, name: str) -> SvgNode | None:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.name == name:
            return current
        stack.extend(reversed(current.children))
    return None


def _number(node: SvgNode | None, attr: str, default: float) -> float:
    if node is None or attr not in node.attributes:
        return default
    try:
        return float(node.attributes[attr])
    except ValueError as e:
        raise FontCompileError(f"<{node.name}> has invalid {attr}={node.attributes[attr]!r}") from e


def draw_path(path: Path, pen) -> None:
    """Replay svgpathtools segments into a fontTools segment pen."""
    subpath_start: complex | None = None
    current: complex | None = None

    def xy(z: complex) -> tuple[float, float]:
        return (z.real, z.imag)

    for seg in path:
        if current is None or seg.start != current:
            if subpath_start is not None:
                pen.endPath()
            pen.moveTo(xy(seg.start))
            subpath_start = seg.start

        if isinstance(seg, Line):
            pen.lineTo(xy(seg.end))
        elif isinstance(seg, QuadraticBezier):
            pen.qCurveTo(xy(seg.control), xy(seg.end))
        elif isinstance(seg, CubicBezier):
            pen.curveTo(xy(seg.control1), xy(seg.control2), xy(seg.end))
        else:
            raise FontCompileError(f"Unsupported segment type: {type(seg).__name__}")

        current = seg.end
        if current == subpath_start:
            pen.closePath()
            current = None
            subpath_start = None

    if subpath_start is not None:
        pen.endPath()


def _build_glyph(path_data: str, glyph_name: str):
    pen = TTGlyphPen(None)
    if path_data.strip():
        try:
            path = load_path(path_data)
        except Exception as e:
            raise FontCompileError(f"Glyph {glyph_name!r} has invalid path data: {e}") from e
        # SVG-font contours come out counter-clockwise in y-up space; TrueType wants clockwise
        draw_path(path, Cu2QuPen(pen, max_err=CU2QU_MAX_ERR, reverse_direction=True))
    return pen.glyph()


def _ps_name(family: str) -> str:
    return (_PS_NAME_RE.sub("", family) or "Icons") + "-Regular"


def compile_ttf(svg_font: str, metadata: TtfFontParameters | None = None) -> bytes:
    """Compile SVG-font text into TrueType bytes."""
    metadata = metadata or TtfFontParameters()
    try:
        root = parse_markup(svg_font, "svg-font")
    except SourceParseError as e:
        raise FontCompileError(str(e)) from e

    font_el = _find(root, "font")
    if font_el is None:
        raise FontCompileError("No <font> element in SVG font")
    face = next((c for c in font_el.children if c.name == "font-face"), None)
    missing = next((c for c in font_el.children if c.name == "missing-glyph"), None)

    upm = round(_number(face, "units-per-em", 1000.0))
    if not 16 <= upm <= 16384:
        raise FontCompileError(f"units-per-em must be within 16..16384, got {upm}")
    ascent = round(_number(face, "ascent", upm))
    descent = abs(round(_number(face, "descent", 0.0)))
    family = (face.attributes.get("font-family") if face is not None else None) or "Icons"
    default_advance = round(_number(font_el, "horiz-adv-x", _number(missing, "horiz-adv-x", upm)))

    glyph_order = [NOTDEF]
    glyphs = {NOTDEF: TTGlyphPen(None).glyph()}
    advances = {NOTDEF: round(_number(missing, "horiz-adv-x", default_advance))}
    cmap: dict[int, str] = {}

    for index, glyph_el in enumerate(c for c in font_el.children if c.name == "glyph"):
        unicode_value = glyph_el.attributes.get("unicode", "")
        name = glyph_el.attributes.get("glyph-name") or (
            f"uni{ord(unicode_value):04X}" if len(unicode_value) == 1 else f"glyph{index}"
        )
        if name in glyphs:
            raise FontCompileError(f"Duplicate glyph name {name!r}")

        glyph_order.append(name)
        glyphs[name] = _build_glyph(glyph_el.attributes.get("d", ""), name)
        advances[name] = round(_number(glyph_el, "horiz-adv-x", default_advance))
        if len(unicode_value) == 1:
            cmap[ord(unicode_value)] = name
        elif unicode_value:
            logger.debug("Glyph %s maps to a sequence %r; left out of cmap", name, unicode_value)

    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (advances[name], getattr(glyf[name], "xMin", 0)) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=ascent, descent=-descent)

    names = {
        "familyName": family,
        "styleName": "Regular",
        "uniqueFontIdentifier": f"{family} {metadata.version}",
        "fullName": f"{family} Regular",
        "psName": _ps_name(family),
        "version": f"Version {metadata.version}",
    }
    if metadata.description:
        names["description"] = metadata.description
    if metadata.url:
        names["vendorURL"] = metadata.url
    fb.setupNameTable(names)
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=-descent,
        sTypoLineGap=0,
        usWinAscent=ascent,
        usWinDescent=descent,
    )
    fb.setupPost()
    fb.setupMaxp()

    ts = metadata.ts if metadata.ts is not None else int(time.time())
    head = fb.font["head"]
    head.created = head.modified = ts - epoch_diff
    fb.font.recalcTimestamp = False

    buf = io.BytesIO()
    fb.save(buf)
    logger.info("Compiled TTF %r: %d glyphs, %d bytes", family, len(glyph_order), buf.tell())
    return buf.getvalue()
