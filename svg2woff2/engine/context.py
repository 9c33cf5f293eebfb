"""Records flowing through the glyph pipeline, plus the diagnostics sink.

SvgSource -> ParsedGlyphSource -> NormalizedPath -> Glyph
Per-source / per-node problems -> ConversionReport.diagnostics
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewBox:
    """Root <svg viewBox>. Width and height are always > 0."""

    x: float = 0.0
    y: float = 0.0
    width: float = 1000.0
    height: float = 1000.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewBox width/height must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class ParsedGlyphSource:
    # Space-joined path data of every path-bearing node
    path: str
    view_box: ViewBox | None = None


@dataclass(frozen=True)
class NormalizedPath:
    path: str
    width: float


@dataclass(frozen=True)
class Glyph:
    name: str
    # Single character, e.g. "\ue000"
    unicode: str
    path: str
    advance_width: float

    @property
    def code_point(self) -> int:
        return ord(self.unicode)


class DiagnosticKind(str, enum.Enum):
    SOURCE_PARSE_ERROR = "source_parse_error"
    NO_GEOMETRY = "no_geometry"
    SHAPE_CONVERSION_ERROR = "shape_conversion_error"
    NODE_ERROR = "node_error"
    DEGENERATE_GEOMETRY = "degenerate_geometry"
    TRANSFORM_ERROR = "transform_error"


# Kinds that drop the whole source rather than one node
_DROPPING_KINDS = {
    DiagnosticKind.SOURCE_PARSE_ERROR,
    DiagnosticKind.NO_GEOMETRY,
    DiagnosticKind.DEGENERATE_GEOMETRY,
    DiagnosticKind.TRANSFORM_ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    source: str
    message: str
    tag: str | None = None

    def __str__(self) -> str:
        where = f"{self.source} <{self.tag}>" if self.tag else self.source
        return f"{self.kind.value}: {where}: {self.message}"


@dataclass
class ConversionReport:
    """Diagnostics collected during one conversion call."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add(self, kind: DiagnosticKind, source: str, message: str, tag: str | None = None) -> Diagnostic:
        diag = Diagnostic(kind=kind, source=source, message=message, tag=tag)
        self.diagnostics.append(diag)
        if kind == DiagnosticKind.SOURCE_PARSE_ERROR:
            logger.error("%s", diag)
        else:
            logger.warning("%s", diag)
        return diag

    @property
    def dropped_sources(self) -> list[str]:
        """Names of sources that produced no glyph, in the order they were dropped."""
        return [d.source for d in self.diagnostics if d.kind in _DROPPING_KINDS]

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]
