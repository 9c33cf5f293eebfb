"""TrueType -> WOFF2 via fontTools (brotli backend)."""

from __future__ import annotations

import io
import logging

from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)


def compress_woff2(ttf: bytes) -> bytes:
    font = TTFont(io.BytesIO(ttf), recalcTimestamp=False)
    font.flavor = "woff2"
    buf = io.BytesIO()
    font.save(buf)
    logger.info("WOFF2: %d -> %d bytes", len(ttf), buf.tell())
    return buf.getvalue()
