# src/content/bundle_source.py — v1
"""In-memory content source for documents bundled with the application."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any

from sitecontent.content.base_source import (
    BaseContentSource,
    SourceNotFoundError,
    SourceParseError,
)


class BundleContentSource(BaseContentSource):
    """Serves documents from a path -> document mapping.

    Values may be already-parsed structures or raw JSON text/bytes. Parsed
    structures are deep-copied on every fetch so that a caller can never
    mutate the bundle.
    """

    def __init__(self, documents: Mapping[str, Any] | None = None) -> None:
        self._documents: dict[str, Any] = dict(documents or {})

    def add(self, path: str, document: Any) -> None:
        """Register or replace the document at path."""
        self._documents[path] = document

    def remove(self, path: str) -> None:
        self._documents.pop(path, None)

    async def fetch(self, path: str) -> Any:
        if path not in self._documents:
            raise SourceNotFoundError(path)
        document = self._documents[path]
        if isinstance(document, (str, bytes, bytearray)):
            try:
                return json.loads(document)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise SourceParseError(path, str(e)) from e
        return copy.deepcopy(document)

    async def list_paths(self) -> list[str]:
        return sorted(self._documents)
