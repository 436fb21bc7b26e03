# src/content/validator.py — v1
"""Schema validator contract and the pydantic adapter.

The loader is written against SchemaValidator only; it never looks at the
document kind. Each content kind supplies one validator instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from sitecontent.cache.models import FieldError, Invalid, Valid

T = TypeVar("T")


class SchemaValidator(ABC, Generic[T]):
    """Judges a raw document and reports Valid(content) or Invalid(errors)."""

    name: str = "schema"

    @abstractmethod
    def validate(self, raw: Any) -> Valid[T] | Invalid:
        """Validate raw; must not raise for bad input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class PydanticValidator(SchemaValidator[T]):
    """Validates against a pydantic model (or any type TypeAdapter accepts)."""

    def __init__(self, schema: type[T], name: str | None = None) -> None:
        self._schema = schema
        self._adapter: TypeAdapter[T] = TypeAdapter(schema)
        self.name = name or getattr(schema, "__name__", repr(schema))

    @property
    def schema(self) -> type[T]:
        return self._schema

    def validate(self, raw: Any) -> Valid[T] | Invalid:
        try:
            content = self._adapter.validate_python(raw)
        except ValidationError as e:
            return Invalid(
                kind="schema_validation",
                errors=tuple(
                    FieldError(loc=tuple(err["loc"]), message=err["msg"])
                    for err in e.errors()
                ),
            )
        return Valid(content=content)

    def json_schema(self) -> dict[str, Any]:
        """JSON Schema of the validated shape (for docs and editors)."""
        return self._adapter.json_schema()
