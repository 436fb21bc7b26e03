# src/cache/models.py — v1
"""Cache domain models: FieldError, Valid, Invalid, CacheEntry, CacheStats.

Outcomes are the unit stored in the cache. Both arms are frozen so that a
cached value can be shared by reference across every caller.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

InvalidKind = Literal["source_not_found", "source_parse_failure", "schema_validation"]


class FieldError(BaseModel):
    """One validation problem located by its field-name/index path."""

    model_config = ConfigDict(frozen=True)

    loc: tuple[str | int, ...] = ()
    message: str

    @property
    def dotted(self) -> str:
        """Render loc as 'header.nav_items.0.href' (empty for document-level errors)."""
        return ".".join(str(part) for part in self.loc)


class Valid(BaseModel, Generic[T]):
    """Successful load: the schema-conformant content."""

    model_config = ConfigDict(frozen=True)

    content: T
    is_valid: Literal[True] = True

    def unwrap_or(self, default: Any = None) -> T:
        return self.content


class Invalid(BaseModel):
    """Failed load: source error or schema violations, in reported order."""

    model_config = ConfigDict(frozen=True)

    kind: InvalidKind
    errors: tuple[FieldError, ...] = ()
    is_valid: Literal[False] = False

    def unwrap_or(self, default: Any = None) -> Any:
        return default

    def error_paths(self) -> list[str]:
        """Dotted paths of every error (document-level errors render as '')."""
        return [e.dotted for e in self.errors]

    def summary(self) -> str:
        """One-line description suitable for logs and CLI output."""
        parts = [
            f"{e.dotted}: {e.message}" if e.loc else e.message
            for e in self.errors
        ]
        if not parts:
            return self.kind
        return f"{self.kind}: " + "; ".join(parts)


Outcome = Union[Valid, Invalid]


class EntryState(str, Enum):
    """Lifecycle of one cache slot."""

    EMPTY = "empty"
    LOADING = "loading"
    CACHED = "cached"


class CacheEntry(BaseModel):
    """Snapshot of one cache slot as returned by BaseCacheStore.get()."""

    model_config = ConfigDict(frozen=True)

    path: str
    state: EntryState = EntryState.EMPTY
    outcome: Valid | Invalid | None = None
    loaded_at: datetime | None = None


class CacheStats(BaseModel):
    """Loader statistics for debugging and monitoring."""

    size: int
    paths: list[str]
    loading: list[str]
    cache_enabled: bool
