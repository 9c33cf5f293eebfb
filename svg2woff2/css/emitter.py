"""Companion stylesheet: one ``.hf-<name>`` class per source, pointing at its code point.

The code point of the i-th source is ``unicode_base + i`` whether or not that
source produced a glyph, matching the glyph pipeline's assignment.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from svg2woff2.engine.config import DEFAULT_UNICODE_BASE, check_code_point_range, check_unique_names
from svg2woff2.models.options import GenerateCssOptions, SvgSource

logger = logging.getLogger(__name__)

CLASS_PREFIX = "hf"
CONTENT_PROPERTY = "--hf"


def _name(source: SvgSource | str) -> str:
    return source if isinstance(source, str) else source.name


def generate_css(sources: Sequence[SvgSource | str], options: GenerateCssOptions) -> str:
    names = [_name(s) for s in sources]
    check_unique_names(names)
    unicode_base = options.unicode_base if options.unicode_base is not None else DEFAULT_UNICODE_BASE
    check_code_point_range(unicode_base, len(names))

    family = options.font_family
    align = f"vertical-align: {options.vertical_align}; " if options.vertical_align else ""

    lines = [
        f"@font-face {{ font-family: '{family}'; font-style: normal; font-weight: 400; "
        f'font-display: block; src: url("{options.font_url}") format("woff2"); }}',
        f"@layer font {{ .{CLASS_PREFIX} {{ font-family: '{family}'; font-style: normal; "
        f"font-weight: normal; {align}}} }}",
        f"@layer font {{ .{CLASS_PREFIX}::before {{ content: var({CONTENT_PROPERTY}); }} }}",
    ]
    for index, name in enumerate(names):
        code_point = unicode_base + index
        lines.append(f'@layer font {{ .{CLASS_PREFIX}-{name} {{ {CONTENT_PROPERTY}: "\\{code_point:x}"; }} }}')

    logger.debug("Generated CSS for %d icons", len(names))
    return "\n".join(lines) + "\n"
