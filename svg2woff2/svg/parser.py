"""SVG markup parser: facade over xml.etree.

Converts raw SVG text into an immutable SvgNode tree with namespace prefixes
stripped from tag and attribute names.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svg2woff2.exceptions import SourceParseError
from svg2woff2.models.svg_document import SvgNode

logger = logging.getLogger(__name__)


def parse_markup(svg_text: str, name: str | None = None) -> SvgNode:
    """Parse raw SVG markup. Raises SourceParseError on malformed input."""
    try:
        root = ET.fromstring(svg_text.lstrip("\ufeff").strip())
    except ET.ParseError as e:
        raise SourceParseError(f"Malformed SVG markup: {e}", source=name) from e

    node = _to_node(root)
    if node.name != "svg":
        raise SourceParseError(f"Root element is <{node.name}>, expected <svg>", source=name)

    logger.debug("Parsed SVG %s", name or "<anonymous>")
    return node


def _to_node(el: ET.Element) -> SvgNode:
    return SvgNode(
        name=_local_name(el.tag),
        attributes={_local_name(k): v for k, v in el.attrib.items()},
        children=tuple(_to_node(child) for child in el if isinstance(child.tag, str)),
    )


def _local_name(tag: str) -> str:
    """'{http://www.w3.org/2000/svg}path' -> 'path'."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag
