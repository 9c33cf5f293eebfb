"""Tests for SVG markup parser."""

import pytest

from tests.conftest import FACE_SVG, MALFORMED_SVG, RING_SVG

from svg2woff2.exceptions import SourceParseError
from svg2woff2.svg.parser import parse_markup


def test_parse_ring():
    root = parse_markup(RING_SVG)
    assert root.name == "svg"
    assert root.attributes["viewBox"] == "0 0 32 32"
    assert len(root.children) == 1
    circle = root.children[0]
    assert circle.name == "circle"
    assert circle.attributes == {"cx": "16", "cy": "16", "r": "12"}


def test_parse_face_keeps_document_order():
    root = parse_markup(FACE_SVG)
    assert [c.name for c in root.children] == ["circle", "circle", "circle", "path"]


def test_namespace_prefixes_stripped():
    root = parse_markup(
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
        '<use xlink:href="#a"/></svg>'
    )
    assert root.children[0].name == "use"
    assert root.children[0].attributes == {"href": "#a"}


def test_leading_bom_and_whitespace():
    root = parse_markup("\ufeff\n  <svg><path d='M0 0'/></svg>\n")
    assert root.children[0].attributes["d"] == "M0 0"


def test_comments_skipped():
    root = parse_markup("<svg><!-- note --><path d='M0 0'/></svg>")
    assert [c.name for c in root.children] == ["path"]


def test_malformed_markup():
    with pytest.raises(SourceParseError) as exc_info:
        parse_markup(MALFORMED_SVG, "broken")
    assert exc_info.value.source == "broken"


def test_non_svg_root():
    with pytest.raises(SourceParseError, match="expected <svg>"):
        parse_markup("<html><body/></html>")
