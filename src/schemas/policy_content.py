# src/schemas/policy_content.py — v1
"""Policy page body (privacy, terms, returns, shipping, warranty)."""

from __future__ import annotations

from pydantic import Field

from sitecontent.schemas.base import ContentModel


class PolicySection(ContentModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class PolicyContent(ContentModel):
    """Markdown body plus optional Q&A sections."""

    heading: str = Field(min_length=1)
    body: str = Field(min_length=1)
    updated: str = Field(
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="Last edit date, YYYY-MM-DD",
    )
    is_draft: bool | None = Field(default=None, alias="isDraft")
    sections: tuple[PolicySection, ...] | None = None
