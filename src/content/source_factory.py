# src/content/source_factory.py — v1
"""Factory for content source instantiation."""

from __future__ import annotations

from sitecontent.config.settings import Settings
from sitecontent.content.base_source import BaseContentSource


def create_content_source(settings: Settings | None = None) -> BaseContentSource:
    """Instantiate the configured content source.

    Args:
        settings: Application settings. Defaults to files under ./config.

    Returns:
        Configured BaseContentSource implementation.
    """
    backend = "file" if settings is None else settings.content_source

    if backend == "file":
        from sitecontent.content.file_source import FileContentSource
        root = settings.content_root if settings is not None else None
        return FileContentSource(root or "config")

    if backend == "bundle":
        from sitecontent.content.bundle_source import BundleContentSource
        return BundleContentSource()

    raise ValueError(f"Unsupported content source: {backend!r}")
