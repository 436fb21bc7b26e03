# src/content/registry.py — v2
"""Fixed bindings of logical paths to content-kind validators.

Each accessor pairs one path with one validator, so every caller of, say,
get_navigation() shares the same cache slot and the same validated value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from sitecontent.cache.models import FieldError, Invalid, Valid
from sitecontent.content.loader import ContentLoader
from sitecontent.content.validator import PydanticValidator, SchemaValidator
from sitecontent.schemas.navigation import Navigation
from sitecontent.schemas.page_content import (
    HomePageContent,
    ProductDetailContent,
    ProductsListingContent,
)
from sitecontent.schemas.policy_content import PolicyContent
from sitecontent.schemas.site_metadata import SiteMetadata
from sitecontent.schemas.ui_strings import UIStrings
from sitecontent.schemas.validation_messages import ValidationMessages

NAVIGATION_PATH = "content/navigation.json"
VALIDATION_MESSAGES_PATH = "content/validation-messages.json"
SITE_METADATA_PATH = "content/site-metadata.json"
HOME_PAGE_PATH = "content/pages/home.json"
PRODUCTS_LISTING_PATH = "content/pages/products-listing.json"
PRODUCT_DETAIL_PATH = "content/pages/product-detail.json"
UI_STRINGS_PATH = "content/ui-strings.json"

POLICY_SLUGS: tuple[str, ...] = ("privacy", "terms", "returns", "shipping", "warranty")

_SLUG_RE = re.compile(r"^[a-z0-9-]+$")

navigation_validator = PydanticValidator(Navigation)
validation_messages_validator = PydanticValidator(ValidationMessages)
site_metadata_validator = PydanticValidator(SiteMetadata)
home_page_validator = PydanticValidator(HomePageContent)
products_listing_validator = PydanticValidator(ProductsListingContent)
product_detail_validator = PydanticValidator(ProductDetailContent)
ui_strings_validator = PydanticValidator(UIStrings)
policy_validator = PydanticValidator(PolicyContent)


@dataclass(frozen=True)
class ContentDocument:
    """One well-known content document."""

    path: str
    validator: SchemaValidator[Any]
    name: str


CONTENT_DOCUMENTS: tuple[ContentDocument, ...] = (
    ContentDocument(SITE_METADATA_PATH, site_metadata_validator, "Site Metadata"),
    ContentDocument(NAVIGATION_PATH, navigation_validator, "Navigation"),
    ContentDocument(HOME_PAGE_PATH, home_page_validator, "Homepage Content"),
    ContentDocument(PRODUCTS_LISTING_PATH, products_listing_validator, "Products Listing Content"),
    ContentDocument(PRODUCT_DETAIL_PATH, product_detail_validator, "Product Detail Content"),
    ContentDocument(UI_STRINGS_PATH, ui_strings_validator, "UI Strings"),
    ContentDocument(VALIDATION_MESSAGES_PATH, validation_messages_validator, "Validation Messages"),
) + tuple(
    ContentDocument(f"content/pages/{slug}.json", policy_validator, f"Policy: {slug}")
    for slug in POLICY_SLUGS
)

# Kind name -> validator, for tools that validate an arbitrary path.
VALIDATORS_BY_KIND: dict[str, SchemaValidator[Any]] = {
    "navigation": navigation_validator,
    "validation-messages": validation_messages_validator,
    "site-metadata": site_metadata_validator,
    "home": home_page_validator,
    "products-listing": products_listing_validator,
    "product-detail": product_detail_validator,
    "ui-strings": ui_strings_validator,
    "policy": policy_validator,
}


def policy_path(slug: str) -> str:
    """Logical path of a policy page. Raises ValueError for unsafe slugs."""
    if not _SLUG_RE.match(slug):
        raise ValueError(f"Invalid policy slug: {slug!r}")
    return f"content/pages/{slug}.json"


async def get_navigation(loader: ContentLoader) -> Valid[Navigation] | Invalid:
    return await loader.load(NAVIGATION_PATH, navigation_validator)


async def get_validation_messages(loader: ContentLoader) -> Valid[ValidationMessages] | Invalid:
    return await loader.load(VALIDATION_MESSAGES_PATH, validation_messages_validator)


async def get_site_metadata(loader: ContentLoader) -> Valid[SiteMetadata] | Invalid:
    return await loader.load(SITE_METADATA_PATH, site_metadata_validator)


async def get_home_page_content(loader: ContentLoader) -> Valid[HomePageContent] | Invalid:
    return await loader.load(HOME_PAGE_PATH, home_page_validator)


async def get_products_listing_content(
    loader: ContentLoader,
) -> Valid[ProductsListingContent] | Invalid:
    return await loader.load(PRODUCTS_LISTING_PATH, products_listing_validator)


async def get_product_detail_content(
    loader: ContentLoader,
) -> Valid[ProductDetailContent] | Invalid:
    return await loader.load(PRODUCT_DETAIL_PATH, product_detail_validator)


async def get_ui_strings(loader: ContentLoader) -> Valid[UIStrings] | Invalid:
    """Button labels, cart copy and aria strings shared across the layout."""
    return await loader.load(UI_STRINGS_PATH, ui_strings_validator)


async def get_policy_content(loader: ContentLoader, slug: str) -> Valid[PolicyContent] | Invalid:
    """Policy page body for slug (e.g. 'privacy').

    An unsafe slug is reported as a missing document rather than raised.
    """
    try:
        path = policy_path(slug)
    except ValueError as e:
        return Invalid(kind="source_not_found", errors=(FieldError(message=str(e)),))
    return await loader.load(path, policy_validator)
