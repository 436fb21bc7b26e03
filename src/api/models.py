# src/api/models.py — v2
"""Public API models: per-document validation reports and their summary."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DocumentReport(BaseModel):
    """Validation result of one well-known content document."""

    name: str
    path: str
    valid: bool
    kind: str | None = None
    errors: list[str] = Field(default_factory=list)


class ValidationSummary(BaseModel):
    """Aggregate of validate_all()."""

    reports: list[DocumentReport] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.reports)

    @property
    def valid(self) -> int:
        return sum(1 for r in self.reports if r.valid)

    @property
    def invalid(self) -> int:
        return self.total - self.valid

    @property
    def ok(self) -> bool:
        return self.invalid == 0
