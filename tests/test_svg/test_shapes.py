"""Tests for basic shape -> path conversion."""

import pytest

from svg2woff2.exceptions import ShapeConversionError
from svg2woff2.svg.shapes import (
    SHAPE_TAGS,
    circle_to_path,
    ellipse_to_path,
    line_to_path,
    polygon_to_path,
    polyline_to_path,
    rect_to_path,
    shape_to_path,
)


class TestRect:
    def test_plain(self):
        d = rect_to_path({"x": "0", "y": "0", "width": "10", "height": "10"})
        assert d == "M0 0 H10 V10 H0 Z"

    def test_position_defaults_to_origin(self):
        assert rect_to_path({"width": "4", "height": "2"}) == "M0 0 H4 V2 H0 Z"

    def test_fractional_and_px(self):
        d = rect_to_path({"x": "1.5", "y": "2px", "width": "3", "height": "4"})
        assert d == "M1.5 2 H4.5 V6 H1.5 Z"

    def test_rounded_corners(self):
        d = rect_to_path({"width": "10", "height": "10", "rx": "2"})
        assert d == (
            "M2 0 H8 A2 2 0 0 1 10 2 V8 A2 2 0 0 1 8 10 H2 "
            "A2 2 0 0 1 0 8 V2 A2 2 0 0 1 2 0 Z"
        )

    def test_ry_mirrors_rx(self):
        with_rx = rect_to_path({"width": "10", "height": "10", "rx": "3"})
        with_ry = rect_to_path({"width": "10", "height": "10", "ry": "3"})
        assert with_rx == with_ry

    def test_radius_clamped_to_half_side(self):
        d = rect_to_path({"width": "10", "height": "4", "rx": "8"})
        # rx clamps to 5, ry follows rx and clamps to 2
        assert d.startswith("M5 0 H5 A5 2 0 0 1 10 2")

    def test_zero_height_allowed(self):
        assert rect_to_path({"width": "10", "height": "0"}) == "M0 0 H10 V0 H0 Z"

    def test_missing_width(self):
        with pytest.raises(ShapeConversionError, match="width"):
            rect_to_path({"height": "10"})

    def test_negative_height(self):
        with pytest.raises(ShapeConversionError, match="negative"):
            rect_to_path({"width": "10", "height": "-1"})

    def test_unsupported_unit(self):
        with pytest.raises(ShapeConversionError, match="invalid 'width'"):
            rect_to_path({"width": "10em", "height": "10"})


def test_circle():
    d = circle_to_path({"cx": "12", "cy": "12", "r": "10"})
    assert d == "M2 12 A10 10 0 1 0 22 12 A10 10 0 1 0 2 12 Z"


def test_circle_zero_radius():
    with pytest.raises(ShapeConversionError) as exc_info:
        circle_to_path({"cx": "5", "cy": "5", "r": "0"})
    assert exc_info.value.tag == "circle"
    assert str(exc_info.value).startswith("<circle>: ")


def test_ellipse():
    d = ellipse_to_path({"cx": "10", "cy": "5", "rx": "10", "ry": "5"})
    assert d == "M0 5 A10 5 0 1 0 20 5 A10 5 0 1 0 0 5 Z"


def test_ellipse_missing_ry():
    with pytest.raises(ShapeConversionError, match="ry"):
        ellipse_to_path({"rx": "10"})


def test_line():
    assert line_to_path({"x1": "18", "x2": "18", "y1": "20", "y2": "10"}) == "M18 20 L18 10"


def test_line_defaults():
    assert line_to_path({"x2": "5"}) == "M0 0 L5 0"


def test_polygon():
    assert polygon_to_path({"points": "0,0 10,0 10,10"}) == "M0 0 L10 0 L10 10 Z"


def test_polyline():
    assert polyline_to_path({"points": "0 0, 5 5  10 0"}) == "M0 0 L5 5 L10 0"


def test_points_odd_count():
    with pytest.raises(ShapeConversionError, match="odd number"):
        polygon_to_path({"points": "0 0 10"})


def test_points_missing():
    with pytest.raises(ShapeConversionError, match="points"):
        polyline_to_path({})


def test_shape_to_path_dispatch():
    assert shape_to_path("line", {"x2": "1"}) == "M0 0 L1 0"
    assert shape_to_path("text", {"x": "1"}) is None
    assert shape_to_path("g", {}) is None


def test_shape_tags():
    assert SHAPE_TAGS == {"rect", "circle", "ellipse", "line", "polygon", "polyline"}
