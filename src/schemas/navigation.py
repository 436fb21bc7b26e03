# src/schemas/navigation.py — v2
"""Navigation document: header nav, footer structure, breadcrumb labels."""

from __future__ import annotations

from sitecontent.schemas.base import ContentModel, FrozenMapping, VersionedContent


class NavItem(ContentModel):
    id: str
    label: str
    href: str
    aria_label: str


class Header(ContentModel):
    logo_alt: str
    nav_items: tuple[NavItem, ...]


class FooterLink(ContentModel):
    label: str
    href: str
    aria_label: str
    external: bool | None = None


class FooterSection(ContentModel):
    id: str
    heading: str
    links: tuple[FooterLink, ...]


class LegalLink(ContentModel):
    label: str
    href: str


class Footer(ContentModel):
    sections: tuple[FooterSection, ...]
    copyright: str
    legal_links: tuple[LegalLink, ...]


class Navigation(VersionedContent):
    """Site navigation loaded from content/navigation.json."""

    header: Header
    footer: Footer
    breadcrumbs: FrozenMapping[str, str]

    def breadcrumb(self, segment: str) -> str:
        """Label for a URL segment, falling back to the segment itself."""
        return self.breadcrumbs.get(segment, segment)
