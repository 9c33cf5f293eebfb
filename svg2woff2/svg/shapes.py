"""Basic shape -> path data conversion (rect, circle, ellipse, line, polygon, polyline).

Each converter is a pure function of one element's attributes. Missing or invalid
required attributes raise ShapeConversionError; the caller decides what to skip.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from svg2woff2.exceptions import ShapeConversionError
from svg2woff2.utils.math_helpers import parse_length, parse_number_list


def _num(value: float) -> str:
    """Exact float text: integral values without the trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _length(tag: str, attrs: Mapping[str, str], key: str, default: float | None = None) -> float:
    raw = attrs.get(key)
    if raw is None or not raw.strip():
        if default is None:
            raise ShapeConversionError(tag, f"missing required attribute '{key}'")
        return default
    try:
        return parse_length(raw)
    except ValueError as e:
        raise ShapeConversionError(tag, f"invalid '{key}': {e}") from e


def _non_negative(tag: str, key: str, value: float) -> float:
    if value < 0:
        raise ShapeConversionError(tag, f"'{key}' must not be negative, got {_num(value)}")
    return value


def _positive(tag: str, key: str, value: float) -> float:
    if value <= 0:
        raise ShapeConversionError(tag, f"'{key}' must be positive, got {_num(value)}")
    return value


def _corner_radius(attrs: Mapping[str, str], key: str) -> float | None:
    raw = attrs.get(key)
    if raw is None or raw.strip() in ("", "auto"):
        return None
    return _non_negative("rect", key, _length("rect", attrs, key))


def rect_to_path(attrs: Mapping[str, str]) -> str:
    x = _length("rect", attrs, "x", 0.0)
    y = _length("rect", attrs, "y", 0.0)
    w = _non_negative("rect", "width", _length("rect", attrs, "width"))
    h = _non_negative("rect", "height", _length("rect", attrs, "height"))

    # rx/ry: a missing radius takes the other's value, both clamp to half the side
    rx = _corner_radius(attrs, "rx")
    ry = _corner_radius(attrs, "ry")
    if rx is None:
        rx = ry or 0.0
    if ry is None:
        ry = rx
    rx = min(rx, w / 2)
    ry = min(ry, h / 2)

    if rx <= 0 or ry <= 0:
        return f"M{_num(x)} {_num(y)} H{_num(x + w)} V{_num(y + h)} H{_num(x)} Z"

    r = f"{_num(rx)} {_num(ry)}"
    return (
        f"M{_num(x + rx)} {_num(y)} H{_num(x + w - rx)} "
        f"A{r} 0 0 1 {_num(x + w)} {_num(y + ry)} V{_num(y + h - ry)} "
        f"A{r} 0 0 1 {_num(x + w - rx)} {_num(y + h)} H{_num(x + rx)} "
        f"A{r} 0 0 1 {_num(x)} {_num(y + h - ry)} V{_num(y + ry)} "
        f"A{r} 0 0 1 {_num(x + rx)} {_num(y)} Z"
    )


def _ellipse_path(cx: float, cy: float, rx: float, ry: float) -> str:
    # Two half-arcs: a single arc cannot start and end on the same point
    r = f"{_num(rx)} {_num(ry)}"
    return (
        f"M{_num(cx - rx)} {_num(cy)} "
        f"A{r} 0 1 0 {_num(cx + rx)} {_num(cy)} "
        f"A{r} 0 1 0 {_num(cx - rx)} {_num(cy)} Z"
    )


def circle_to_path(attrs: Mapping[str, str]) -> str:
    cx = _length("circle", attrs, "cx", 0.0)
    cy = _length("circle", attrs, "cy", 0.0)
    r = _positive("circle", "r", _length("circle", attrs, "r"))
    return _ellipse_path(cx, cy, r, r)


def ellipse_to_path(attrs: Mapping[str, str]) -> str:
    cx = _length("ellipse", attrs, "cx", 0.0)
    cy = _length("ellipse", attrs, "cy", 0.0)
    rx = _positive("ellipse", "rx", _length("ellipse", attrs, "rx"))
    ry = _positive("ellipse", "ry", _length("ellipse", attrs, "ry"))
    return _ellipse_path(cx, cy, rx, ry)


def line_to_path(attrs: Mapping[str, str]) -> str:
    x1 = _length("line", attrs, "x1", 0.0)
    y1 = _length("line", attrs, "y1", 0.0)
    x2 = _length("line", attrs, "x2", 0.0)
    y2 = _length("line", attrs, "y2", 0.0)
    return f"M{_num(x1)} {_num(y1)} L{_num(x2)} {_num(y2)}"


def _points_path(tag: str, attrs: Mapping[str, str], close: bool) -> str:
    raw = attrs.get("points")
    if raw is None or not raw.strip():
        raise ShapeConversionError(tag, "missing required attribute 'points'")
    try:
        coords = parse_number_list(raw)
    except ValueError as e:
        raise ShapeConversionError(tag, f"invalid 'points': {e}") from e
    if len(coords) % 2:
        raise ShapeConversionError(tag, f"'points' has an odd number of coordinates ({len(coords)})")

    pairs = [f"{_num(coords[i])} {_num(coords[i + 1])}" for i in range(0, len(coords), 2)]
    d = "M" + " L".join(pairs)
    return d + " Z" if close else d


def polygon_to_path(attrs: Mapping[str, str]) -> str:
    return _points_path("polygon", attrs, close=True)


def polyline_to_path(attrs: Mapping[str, str]) -> str:
    return _points_path("polyline", attrs, close=False)


_CONVERTERS: dict[str, Callable[[Mapping[str, str]], str]] = {
    "rect": rect_to_path,
    "circle": circle_to_path,
    "ellipse": ellipse_to_path,
    "line": line_to_path,
    "polygon": polygon_to_path,
    "polyline": polyline_to_path,
}

SHAPE_TAGS = frozenset(_CONVERTERS)


def shape_to_path(tag: str, attrs: Mapping[str, str]) -> str | None:
    """Convert one shape element to path data. Returns None for tags that are not shapes."""
    converter = _CONVERTERS.get(tag)
    if converter is None:
        return None
    return converter(attrs)
