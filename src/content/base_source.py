# src/content/base_source.py — v1
"""Abstract content source interface and source errors.

A source turns a logical path into a raw parsed document. It knows nothing
about schemas; validation happens in the loader.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ContentError(Exception):
    """Base class for errors raised inside the content core."""


class SourceNotFoundError(ContentError):
    """No document exists at the requested path."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        message = f"Content file not found: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SourceParseError(ContentError):
    """The document exists but could not be decoded into structured data."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Malformed content in {path}: {detail}")


class BaseContentSource(ABC):
    """Unified interface for content stores (filesystem, bundled JSON, remote)."""

    @abstractmethod
    async def fetch(self, path: str) -> Any:
        """Return the raw parsed document stored at path.

        Raises:
            SourceNotFoundError: No document at path.
            SourceParseError: Document could not be parsed.
        """

    @abstractmethod
    async def list_paths(self) -> list[str]:
        """List every logical path the source can serve."""
