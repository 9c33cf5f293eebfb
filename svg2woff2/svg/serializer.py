"""Write the SVG-font document from assembled glyphs."""

from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import escape

from svg2woff2.engine.config import FontMetrics
from svg2woff2.engine.context import Glyph
from svg2woff2.models.svg_document import SvgNode, element
from svg2woff2.utils.math_helpers import format_number

SVG_NS = "http://www.w3.org/2000/svg"

XML_DECLARATION = '<?xml version="1.0" standalone="no"?>\n'
SVG11_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)
_ATTR_ENTITIES = {'"': "&quot;"}


def stringify(node: SvgNode) -> str:
    """Compact XML text for a node tree. Childless elements self-close."""
    attrs = "".join(f' {k}="{escape(v, _ATTR_ENTITIES)}"' for k, v in node.attributes.items())
    if not node.children:
        return f"<{node.name}{attrs}/>"
    inner = "".join(stringify(child) for child in node.children)
    return f"<{node.name}{attrs}>{inner}</{node.name}>"


def build_svg_font_document(glyphs: Sequence[Glyph], metrics: FontMetrics) -> SvgNode:
    """svg > defs > font > (font-face, missing-glyph, glyph*) in glyph-list order."""

    def num(value: float) -> str:
        return format_number(value, metrics.precision)

    em = num(metrics.units_per_em)
    glyph_nodes = [
        element(
            "glyph",
            {
                "glyph-name": glyph.name,
                "unicode": glyph.unicode,
                "horiz-adv-x": num(glyph.advance_width),
                "vert-adv-y": em,
                "d": glyph.path,
            },
        )
        for glyph in glyphs
    ]

    font = element(
        "font",
        {},
        element(
            "font-face",
            {
                "font-family": metrics.font_family,
                "units-per-em": em,
                "ascent": num(metrics.ascent),
                "descent": num(metrics.descent),
            },
        ),
        element("missing-glyph", {"horiz-adv-x": em, "vert-adv-y": em}),
        *glyph_nodes,
    )
    return element("svg", {"xmlns": SVG_NS, "version": "1.1"}, element("defs", {}, font))


def serialize_svg_font(glyphs: Sequence[Glyph], metrics: FontMetrics) -> str:
    """Full SVG-font text: XML declaration, SVG 1.1 DOCTYPE, then the document."""
    return XML_DECLARATION + SVG11_DOCTYPE + stringify(build_svg_font_document(glyphs, metrics))
