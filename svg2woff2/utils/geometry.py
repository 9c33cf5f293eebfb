"""Leaf-node path geometry helpers over svgpathtools. No engine imports.

Points are complex numbers (x + 1j*y), as in svgpathtools.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path
from svgpathtools.path import bpoints2bezier

from svg2woff2.exceptions import DegenerateGeometryError
from svg2woff2.utils.math_helpers import format_number


@dataclass(frozen=True)
class BBox:
    """Axis-aligned bounding box as (x, y, width, height)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height


def load_path(d: str) -> Path:
    """Parse path data, expanding elliptical arcs into cubic Béziers."""
    segments: list[Line | QuadraticBezier | CubicBezier] = []
    for seg in parse_path(d):
        if isinstance(seg, Arc):
            segments.extend(_arc_to_cubics(seg))
        else:
            segments.append(seg)
    return Path(*segments)


def _arc_to_cubics(arc: Arc) -> list[CubicBezier]:
    """Approximate an arc with cubics whose endpoints chain exactly onto the arc's own."""
    # At most a quarter turn per cubic
    cubics = list(arc.as_cubic_curves(max(1, math.ceil(abs(arc.delta) / 90))))
    out: list[CubicBezier] = []
    start = arc.start
    for i, cubic in enumerate(cubics):
        end = arc.end if i == len(cubics) - 1 else cubic.end
        out.append(CubicBezier(start, cubic.control1, cubic.control2, end))
        start = end
    return out


def path_bbox(path: Path) -> BBox:
    """Exact bounding box of a path (curve extrema included)."""
    if len(path) == 0:
        raise DegenerateGeometryError("path has no drawable segments")
    xmin, xmax, ymin, ymax = path.bbox()
    return BBox(x=xmin, y=ymin, width=xmax - xmin, height=ymax - ymin)


def map_points(path: Path, fn: Callable[[complex], complex]) -> Path:
    """Apply a point mapping to every control point. Exact for affine maps."""
    mapped = []
    for seg in path:
        if isinstance(seg, Arc):
            raise TypeError("arcs must be expanded with load_path() before mapping points")
        mapped.append(bpoints2bezier([fn(p) for p in seg.bpoints()]))
    return Path(*mapped)


def flip_vertical(path: Path) -> Path:
    """Mirror y about the horizontal center line of the path's own box.

    The box itself is left unchanged.
    """
    box = path_bbox(path)
    axis = box.y + box.y_max
    return map_points(path, lambda z: complex(z.real, axis - z.imag))


def translate(path: Path, dx: float, dy: float) -> Path:
    offset = complex(dx, dy)
    return map_points(path, lambda z: z + offset)


def scale(path: Path, factor: float) -> Path:
    """Uniform scale about the origin."""
    return map_points(path, lambda z: z * factor)


def path_to_d(path: Path, precision: int = 4) -> str:
    """Serialize as absolute M/L/Q/C/Z commands, numbers rounded to ``precision``."""

    def pt(z: complex) -> str:
        return f"{format_number(z.real, precision)} {format_number(z.imag, precision)}"

    parts: list[str] = []
    subpath_start: complex | None = None
    current: complex | None = None

    for seg in path:
        if current is None or seg.start != current:
            parts.append(f"M{pt(seg.start)}")
            subpath_start = seg.start

        if isinstance(seg, Line):
            parts.append(f"L{pt(seg.end)}")
        elif isinstance(seg, QuadraticBezier):
            parts.append(f"Q{pt(seg.control)} {pt(seg.end)}")
        elif isinstance(seg, CubicBezier):
            parts.append(f"C{pt(seg.control1)} {pt(seg.control2)} {pt(seg.end)}")
        else:
            raise TypeError(f"Unsupported segment type: {type(seg).__name__}")

        current = seg.end
        if current == subpath_start:
            parts.append("Z")
            # Next segment always opens a new subpath
            current = None
            subpath_start = None

    return " ".join(parts)
