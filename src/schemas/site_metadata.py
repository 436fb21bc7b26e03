# src/schemas/site_metadata.py — v2
"""Site-wide metadata, SEO defaults and per-page metadata."""

from __future__ import annotations

from pydantic import ConfigDict, EmailStr, HttpUrl

from sitecontent.schemas.base import ContentModel, FrozenMapping, VersionedContent


class PageMetadata(ContentModel):
    """Either a fixed title/description or a template; extra keys kept."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    title_template: str | None = None
    description: str | None = None
    description_template: str | None = None


class Site(ContentModel):
    name: str
    tagline: str
    description: str
    url: HttpUrl
    contact_email: EmailStr
    support_email: EmailStr


class Meta(ContentModel):
    default_title: str
    title_template: str
    default_description: str
    keywords: tuple[str, ...]
    og_image: str
    twitter_handle: str
    favicon: str


class SiteMetadata(VersionedContent):
    """content/site-metadata.json"""

    site: Site
    meta: Meta
    pages: FrozenMapping[str, PageMetadata]

    def page_title(self, page: str) -> str:
        """Title for page, falling back to the site default."""
        entry = self.pages.get(page)
        if entry is not None and entry.title:
            return entry.title
        return self.meta.default_title
