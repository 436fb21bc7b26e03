# src/content/template.py — v1
"""Placeholder interpolation for message catalogs.

    interpolate("Only {quantity} remaining", {"quantity": 5})  # "Only 5 remaining"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timezone

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

TemplateValue = str | int | float | bool | None


def interpolate(template: str, values: Mapping[str, TemplateValue]) -> str:
    """Replace {name} placeholders; missing or None values become ''."""

    def _sub(match: re.Match[str]) -> str:
        value = values.get(match.group(1))
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    return _PLACEHOLDER.sub(_sub, template)


def interpolate_with_year(
    template: str, values: Mapping[str, TemplateValue] | None = None,
) -> str:
    """interpolate() with {year} set to the current year (copyright lines)."""
    merged: dict[str, TemplateValue] = dict(values or {})
    merged["year"] = datetime.now(timezone.utc).year
    return interpolate(template, merged)


def placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance."""
    seen: list[str] = []
    for name in _PLACEHOLDER.findall(template):
        if name not in seen:
            seen.append(name)
    return seen
