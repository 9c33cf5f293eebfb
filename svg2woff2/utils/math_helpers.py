"""Number helpers for path and attribute formatting. No engine imports."""

from __future__ import annotations

import math
import re

# Separator between coordinates in points/viewBox lists: whitespace and/or one comma.
_LIST_SEP_RE = re.compile(r"\s*,\s*|\s+")
_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px)?\s*$")


def format_number(value: float, precision: int = 4) -> str:
    """Round to ``precision`` decimals and drop trailing zeros. ``-0`` becomes ``0``."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite number: {value!r}")
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def parse_length(value: str) -> float:
    """Parse an SVG length in user units. Only unitless and ``px`` values are accepted."""
    m = _LENGTH_RE.match(value)
    if not m:
        raise ValueError(f"Unsupported length: {value!r}")
    number = float(m.group(1))
    if not math.isfinite(number):
        raise ValueError(f"Non-finite length: {value!r}")
    return number


def parse_number_list(value: str) -> list[float]:
    """Split a comma/whitespace separated number list (``points``, ``viewBox``)."""
    text = value.strip()
    if not text:
        return []
    numbers = [float(part) for part in _LIST_SEP_RE.split(text)]
    if not all(math.isfinite(n) for n in numbers):
        raise ValueError(f"Non-finite value in list: {value!r}")
    return numbers
