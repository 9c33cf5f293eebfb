"""Path geometry transform: SVG user space (y-down) to font em-square space (y-up).

Order of operations on the combined glyph path:
1. flip y about the path's own bounds (SVG y-down -> font y-up)
2. pick the reference box: the source viewBox when preserved, else the flipped path's bounds
3. scale_y = (units_per_em - height_decrease) / reference height, used on both axes
4. translate the reference box's minimum corner to the origin
5. scale uniformly
6. shift by offset_y
The advance width is the horizontal extent of the final path.
"""

from __future__ import annotations

import logging
import math

from svg2woff2.engine.config import FontMetrics
from svg2woff2.engine.context import NormalizedPath, ViewBox
from svg2woff2.exceptions import DegenerateGeometryError
from svg2woff2.utils.geometry import BBox, flip_vertical, load_path, path_bbox, path_to_d, scale, translate

logger = logging.getLogger(__name__)


def _finite(box: BBox) -> bool:
    return all(math.isfinite(v) for v in (box.x, box.y, box.width, box.height))


def normalize_path(d: str, metrics: FontMetrics, view_box: ViewBox | None = None) -> NormalizedPath:
    """Transform combined path data into font space.

    Raises DegenerateGeometryError when the path has no height (nothing to scale
    against) or the result is not finite.
    """
    path = load_path(d)
    ink = path_bbox(path)
    if not _finite(ink):
        raise DegenerateGeometryError(f"non-finite bounding box {ink}")
    if ink.height <= 0:
        raise DegenerateGeometryError(f"zero-height bounding box {ink}")

    flipped = flip_vertical(path)
    if metrics.preserve_viewbox and view_box is not None:
        reference = BBox(view_box.x, view_box.y, view_box.width, view_box.height)
    else:
        reference = path_bbox(flipped)

    scale_y = metrics.glyph_height / reference.height
    if not math.isfinite(scale_y) or scale_y <= 0:
        raise DegenerateGeometryError(f"invalid scale factor {scale_y!r} for reference {reference}")

    processed = translate(flipped, -reference.x, -reference.y)
    processed = scale(processed, scale_y)
    processed = translate(processed, 0.0, metrics.offset_y)

    result = path_bbox(processed)
    if not _finite(result):
        raise DegenerateGeometryError(f"non-finite transformed bounding box {result}")

    logger.debug("normalized path: scale %.4f, width %.2f", scale_y, result.width)
    return NormalizedPath(path=path_to_d(processed, metrics.precision), width=result.width)
