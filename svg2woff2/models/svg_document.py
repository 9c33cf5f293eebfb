"""Namespace-free element tree used for both input icons and the generated SVG font."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SvgNode(BaseModel):
    """One element: local tag name, attributes, ordered children."""

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: tuple[SvgNode, ...] = ()


def element(name: str, attributes: dict[str, str] | None = None, *children: SvgNode) -> SvgNode:
    """Shorthand for building a node with positional children."""
    return SvgNode(name=name, attributes=attributes or {}, children=children)
