"""SVG tree walker: collects path data from every path-bearing node.

Native <path d> values are kept verbatim, basic shapes go through the shape
converter. A failure on one node is recorded in the ConversionReport and the
walk continues with that node's children and siblings.
"""

from __future__ import annotations

from svg2woff2.engine.context import ConversionReport, DiagnosticKind, ParsedGlyphSource, ViewBox
from svg2woff2.exceptions import ShapeConversionError, SourceParseError
from svg2woff2.models.svg_document import SvgNode
from svg2woff2.svg.parser import parse_markup
from svg2woff2.svg.shapes import SHAPE_TAGS, shape_to_path
from svg2woff2.utils.math_helpers import parse_number_list


def parse_view_box(value: str) -> ViewBox:
    """'0 0 24 24' -> ViewBox. Raises ValueError unless exactly four numbers with positive size."""
    try:
        numbers = parse_number_list(value)
    except ValueError as e:
        raise ValueError(f"invalid viewBox {value!r}: {e}") from e
    if len(numbers) != 4:
        raise ValueError(f"invalid viewBox {value!r}: expected 4 numbers, got {len(numbers)}")
    return ViewBox(*numbers)


def walk_svg_tree(
    root: SvgNode,
    name: str,
    report: ConversionReport,
    keep_view_box: bool = True,
) -> ParsedGlyphSource | None:
    """Depth-first walk in document order. Returns None when no node yields path data."""
    paths: list[str] = []
    view_box: ViewBox | None = None

    # Worklist of (node, is_root); children pushed reversed to keep document order
    stack: list[tuple[SvgNode, bool]] = [(root, True)]
    while stack:
        node, is_root = stack.pop()
        try:
            d = node.attributes.get("d", "").strip()
            if node.name == "path" and d:
                paths.append(d)
            elif node.name in SHAPE_TAGS:
                shape_d = shape_to_path(node.name, node.attributes)
                if shape_d:
                    paths.append(shape_d)
            elif is_root and node.name == "svg" and "viewBox" in node.attributes:
                view_box = parse_view_box(node.attributes["viewBox"])
        except ShapeConversionError as e:
            report.add(DiagnosticKind.SHAPE_CONVERSION_ERROR, name, str(e), tag=node.name)
        except Exception as e:
            report.add(DiagnosticKind.NODE_ERROR, name, str(e), tag=node.name)

        stack.extend((child, False) for child in reversed(node.children))

    if not paths:
        report.add(DiagnosticKind.NO_GEOMETRY, name, "no convertible elements found")
        return None

    return ParsedGlyphSource(
        path=" ".join(paths),
        view_box=view_box if keep_view_box else None,
    )


def parse_svg(
    content: str,
    name: str,
    report: ConversionReport,
    keep_view_box: bool = True,
) -> ParsedGlyphSource | None:
    """Parse markup and walk it. Malformed markup is recorded and yields None."""
    try:
        root = parse_markup(content, name)
    except SourceParseError as e:
        report.add(DiagnosticKind.SOURCE_PARSE_ERROR, name, str(e))
        return None
    return walk_svg_tree(root, name, report, keep_view_box=keep_view_box)
