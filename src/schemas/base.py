# src/schemas/base.py — v2
"""Common base for every content document model.

Models are frozen and mapping fields are exposed as read-only views, so a
cached document cannot be edited by one caller under another.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    WrapSerializer,
)

K = TypeVar("K")
V = TypeVar("V")


def _read_only(value: dict[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(value)


def _dump_as_dict(value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


# dict on input, MappingProxyType once validated, plain dict again in model_dump().
FrozenMapping = Annotated[
    dict[K, V],
    AfterValidator(_read_only),
    WrapSerializer(_dump_as_dict),
]


class ContentModel(BaseModel):
    """Frozen model; unknown keys in content files are dropped, not rejected."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class VersionedContent(ContentModel):
    """Top-level document carrying the editorial version stamp."""

    version: str
    updated: str
