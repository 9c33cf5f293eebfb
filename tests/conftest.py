"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svg2woff2.engine.config import FontMetrics
from svg2woff2.models.options import SvgSource


# Sample icons (32x32 filled shapes plus hand-made edge cases)

RING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <circle cx="16" cy="16" r="12"/>
</svg>'''

FACE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <circle cx="16" cy="16" r="14"/>
  <circle cx="11" cy="12" r="2"/>
  <circle cx="21" cy="12" r="2"/>
  <path d="M10 20 Q16 26 22 20"/>
</svg>'''

HOUSE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <polygon points="16,3 29,15 25,15 25,29 7,29 7,15 3,15"/>
  <rect x="13" y="20" width="6" height="9"/>
</svg>'''

BARS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <line x1="8" y1="26" x2="8" y2="18"/>
  <line x1="16" y1="26" x2="16" y2="12"/>
  <line x1="24" y1="26" x2="24" y2="6"/>
</svg>'''

# 10x10 square filling its canvas
SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <rect x="0" y="0" width="10" height="10"/>
</svg>'''

# Same square, hand-authored as a path
SQUARE_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="M0,0 H10 V10 H0 Z"/>
</svg>'''

# 10x10 square centered on a 20x20 canvas
INSET_SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <g><rect x="5" y="5" width="10" height="10"/></g>
</svg>'''

# 10x6 bar near the top-left corner of a 20x20 canvas
TOP_BAR_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <rect x="0" y="2" width="10" height="6"/>
</svg>'''

ZERO_HEIGHT_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <rect x="0" y="5" width="10" height="0"/>
</svg>'''

TEXT_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <text x="2" y="20">A</text>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0 L10 10"'


@pytest.fixture
def icon_sources() -> list[SvgSource]:
    return [
        SvgSource(name="ring", content=RING_SVG),
        SvgSource(name="face", content=FACE_SVG),
        SvgSource(name="house", content=HOUSE_SVG),
        SvgSource(name="bars", content=BARS_SVG),
    ]


@pytest.fixture
def metrics() -> FontMetrics:
    return FontMetrics(font_family="Test Icons", units_per_em=1000, ascent=1000)
