# src/content/file_source.py — v1
"""JSON file content source (default CONTENT_SOURCE=file).

Logical paths are relative to CONTENT_ROOT, e.g. 'content/navigation.json'
resolves to '<root>/content/navigation.json'.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from sitecontent.content.base_source import (
    BaseContentSource,
    SourceNotFoundError,
    SourceParseError,
)

logger = logging.getLogger(__name__)


class FileContentSource(BaseContentSource):
    """Reads JSON documents from a directory tree."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    async def fetch(self, path: str) -> Any:
        """Read and decode the JSON document at root/path."""
        file_path = self._resolve(path)
        return await asyncio.to_thread(self._read_json, path, file_path)

    async def list_paths(self) -> list[str]:
        """Every *.json file under root, as root-relative POSIX paths."""
        if not self._root.is_dir():
            return []
        return sorted(
            p.relative_to(self._root).as_posix()
            for p in self._root.rglob("*.json")
            if p.is_file()
        )

    def _resolve(self, path: str) -> Path:
        """Map a logical path to a file under root, refusing escapes."""
        candidate = (self._root / path).resolve()
        if not candidate.is_relative_to(self._root):
            logger.warning("Rejected content path outside root: %s", path)
            raise SourceNotFoundError(path, "outside content root")
        return candidate

    @staticmethod
    def _read_json(path: str, file_path: Path) -> Any:
        try:
            text = file_path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise SourceNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise SourceParseError(path, f"not UTF-8: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceParseError(path, f"line {e.lineno} column {e.colno}: {e.msg}") from e
