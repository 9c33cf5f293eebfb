"""Font metrics configuration: the single place optional parameters get their defaults."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from svg2woff2.exceptions import ConfigurationError, DuplicateGlyphNameError
from svg2woff2.models.options import SvgFontParameters

# Start of the Unicode Private Use Area
DEFAULT_UNICODE_BASE = 0xE000
DEFAULT_UNITS_PER_EM = 1024.0
# Decimal places kept when formatting output path data
DEFAULT_PRECISION = 4

MAX_CODE_POINT = 0x10FFFF
_FIRST_PRINTABLE = 0x20
_SURROGATES = range(0xD800, 0xE000)
_BMP_NONCHARACTERS = range(0xFFFE, 0x10000)


@dataclass(frozen=True)
class FontMetrics:
    """Resolved SVG-font metrics. Every field has a value."""

    font_family: str
    units_per_em: float = DEFAULT_UNITS_PER_EM
    ascent: float = DEFAULT_UNITS_PER_EM
    descent: float = 0.0
    offset_y: float = 0.0
    height_decrease: float = 0.0
    preserve_viewbox: bool = True
    precision: int = DEFAULT_PRECISION

    @property
    def glyph_height(self) -> float:
        """Usable glyph height in font units."""
        return self.units_per_em - self.height_decrease


def resolve_font_metrics(
    params: SvgFontParameters | FontMetrics,
    precision: int = DEFAULT_PRECISION,
) -> FontMetrics:
    """Fill defaults and validate.

    units_per_em -> 1024, ascent -> units_per_em, descent/offset_y/height_decrease -> 0,
    preserve_viewbox -> True. Raises ConfigurationError for a missing family name or
    metrics that would make every glyph degenerate.
    """
    if isinstance(params, FontMetrics):
        metrics = params
    else:
        family = (params.font_family or "").strip()
        if not family:
            raise ConfigurationError("font_family is required")
        units_per_em = params.units_per_em if params.units_per_em is not None else DEFAULT_UNITS_PER_EM
        metrics = FontMetrics(
            font_family=family,
            units_per_em=units_per_em,
            ascent=params.ascent if params.ascent is not None else units_per_em,
            descent=params.descent if params.descent is not None else 0.0,
            offset_y=params.offset_y if params.offset_y is not None else 0.0,
            height_decrease=params.height_decrease if params.height_decrease is not None else 0.0,
            preserve_viewbox=params.preserve_viewbox if params.preserve_viewbox is not None else True,
            precision=precision,
        )

    if not metrics.font_family.strip():
        raise ConfigurationError("font_family is required")
    if metrics.units_per_em <= 0:
        raise ConfigurationError(f"units_per_em must be positive, got {metrics.units_per_em}")
    if metrics.glyph_height <= 0:
        raise ConfigurationError(
            f"height_decrease ({metrics.height_decrease}) must be smaller than "
            f"units_per_em ({metrics.units_per_em})"
        )
    if metrics.precision < 0:
        raise ConfigurationError(f"precision must be >= 0, got {metrics.precision}")
    return metrics


def check_code_point_range(unicode_base: int, count: int) -> None:
    """Every ``unicode_base + i`` for ``i < count`` must be a character usable in XML text."""
    if unicode_base < _FIRST_PRINTABLE:
        raise ConfigurationError(f"unicode_base must be >= U+0020, got {unicode_base:#x}")
    if count == 0:
        return
    last = unicode_base + count - 1
    if last > MAX_CODE_POINT:
        raise ConfigurationError(
            f"{count} glyphs starting at U+{unicode_base:04X} exceed U+{MAX_CODE_POINT:04X}"
        )
    for blocked in (_SURROGATES, _BMP_NONCHARACTERS):
        if unicode_base <= blocked[-1] and last >= blocked[0]:
            raise ConfigurationError(
                f"Code points U+{unicode_base:04X}..U+{last:04X} overlap "
                f"U+{blocked[0]:04X}..U+{blocked[-1]:04X}"
            )


def check_unique_names(names: Iterable[str]) -> None:
    """Glyph names double as CSS class suffixes: they must be non-empty and unique."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        if not name or not name.strip():
            raise ConfigurationError("Glyph names must not be empty")
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise DuplicateGlyphNameError(duplicates)
