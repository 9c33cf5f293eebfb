"""FastAPI dependency injection."""

from __future__ import annotations

from svg2woff2.config import Settings, settings


def get_settings() -> Settings:
    return settings
