# tests/conftest.py — v3
"""Shared test fixtures for all unit and integration tests.

Provides sample content documents, a counting fake source and fresh
loader/store instances. No external dependencies, no real files unless a
test writes them under tmp_path.
"""

from __future__ import annotations

import asyncio
import copy
import json
from pathlib import Path
from typing import Any

import pytest

from sitecontent.cache.memory_store import MemoryCacheStore
from sitecontent.content.base_source import BaseContentSource, SourceNotFoundError
from sitecontent.content.loader import ContentLoader


# === FIXTURES: Sample documents ===


NAVIGATION_DOC: dict[str, Any] = {
    "version": "1.0",
    "updated": "2025-01-15",
    "header": {
        "logo_alt": "Imajin home",
        "nav_items": [
            {"id": "shop", "label": "Shop", "href": "/products", "aria_label": "Shop all products"},
            {"id": "about", "label": "About", "href": "/about", "aria_label": "About us"},
        ],
    },
    "footer": {
        "sections": [
            {
                "id": "support",
                "heading": "Support",
                "links": [
                    {"label": "Contact", "href": "/contact", "aria_label": "Contact us"},
                    {"label": "Docs", "href": "https://docs.example.com",
                     "aria_label": "Documentation", "external": True},
                ],
            }
        ],
        "copyright": "© {year} Imajin",
        "legal_links": [{"label": "Privacy", "href": "/privacy"}],
    },
    "breadcrumbs": {"products": "Products", "account": "My Account"},
}

VALIDATION_MESSAGES_DOC: dict[str, Any] = {
    "version": "1.0",
    "updated": "2025-01-15",
    "cart_validation": {
        "product_unavailable_template": "{product_name} is no longer available",
        "product_sold_out_template": "{product_name} is sold out",
        "insufficient_stock_template": "Only {quantity} of {product_name} left",
        "quantity_exceeds_stock_template": "Max {max} per order",
        "voltage_mismatch": "Voltage mismatch between components",
        "missing_required_component_template": "{product_name} requires {component}",
        "suggested_component_template": "Consider adding {component}",
        "incompatible_products_template": "{a} is incompatible with {b}",
    },
    "product_validation": {
        "invalid_variant": "Invalid variant",
        "invalid_quantity": "Invalid quantity",
        "quantity_too_low": "Quantity must be at least 1",
        "quantity_too_high_template": "Quantity must be at most {max}",
    },
    "checkout_validation": {
        "required_field_template": "{field} is required",
        "invalid_email": "Invalid email",
        "invalid_phone": "Invalid phone",
        "invalid_postal_code": "Invalid postal code",
        "invalid_card": "Invalid card",
        "card_declined": "Card declined",
    },
    "form_validation": {
        "required": "Required",
        "email_invalid": "Invalid email",
        "min_length_template": "At least {min} characters",
        "max_length_template": "At most {max} characters",
        "pattern_mismatch": "Invalid format",
    },
}

UI_STRINGS_DOC: dict[str, Any] = {
    "version": "1.0",
    "updated": "2025-01-15",
    "cart": {
        "heading": "Your Cart",
        "empty_state": {"heading": "Your cart is empty", "message": "Add a light", "cta_label": "Shop"},
        "item_count": {"singular": "item", "plural": "items"},
        "summary": {
            "subtotal": "Subtotal",
            "shipping": "Shipping",
            "shipping_calculated": "Calculated at checkout",
            "total": "Total",
        },
        "actions": {
            "checkout": "Checkout",
            "continue_shopping": "Continue shopping",
            "update_cart": "Update cart",
            "clear_cart": "Clear cart",
        },
    },
    "cart_item": {
        "limited_edition_badge": "Limited",
        "low_stock_template": "Only {quantity} left",
        "quantity_label": "Qty",
        "remove_label": "Remove",
        "update_label": "Update",
        "aria": {
            "increase_quantity": "Increase quantity",
            "decrease_quantity": "Decrease quantity",
            "remove_item": "Remove item",
        },
    },
    "buttons": {
        "add_to_cart": "Add to cart", "adding": "Adding...", "added": "Added",
        "buy_now": "Buy now", "checkout": "Checkout", "continue": "Continue",
        "back": "Back", "close": "Close", "cancel": "Cancel", "save": "Save",
        "submit": "Submit", "loading": "Loading...", "learn_more": "Learn more",
        "view_details": "View details", "shop_now": "Shop now",
    },
    "forms": {
        "required_field": "Required",
        "optional_field": "Optional",
        "select_placeholder": "Select...",
        "search_placeholder": "Search...",
    },
    "loading": {"loading": "Loading", "please_wait": "Please wait"},
    "errors": {"generic": "Something went wrong", "network": "Network error", "not_found": "Not found"},
    "aria": {
        "close_dialog": "Close dialog",
        "close_cart": "Close cart",
        "open_cart": "Open cart",
        "open_menu": "Open menu",
        "close_menu": "Close menu",
        "skip_to_content": "Skip to content",
    },
}

POLICY_DOC: dict[str, Any] = {
    "heading": "Privacy Policy",
    "body": "We collect **only** what we need.",
    "updated": "2025-01-15",
    "isDraft": True,
    "sections": [{"question": "Do you sell data?", "answer": "No."}],
}


@pytest.fixture
def navigation_doc() -> dict[str, Any]:
    """Valid navigation document (fresh copy per test)."""
    return copy.deepcopy(NAVIGATION_DOC)


@pytest.fixture
def validation_messages_doc() -> dict[str, Any]:
    """Valid validation-message catalog."""
    return copy.deepcopy(VALIDATION_MESSAGES_DOC)


@pytest.fixture
def policy_doc() -> dict[str, Any]:
    """Valid policy page document."""
    return copy.deepcopy(POLICY_DOC)


@pytest.fixture
def ui_strings_doc() -> dict[str, Any]:
    """Valid UI strings document."""
    return copy.deepcopy(UI_STRINGS_DOC)


# === FIXTURES: Fake source ===


class CountingSource(BaseContentSource):
    """In-memory source recording every fetch.

    When gate is set, fetches block until the test calls gate.set(), which
    lets tests pile up concurrent callers on one in-flight load.
    """

    def __init__(self, documents: dict[str, Any] | None = None) -> None:
        self.documents: dict[str, Any] = dict(documents or {})
        self.calls: list[str] = []
        self.gate: asyncio.Event | None = None
        self.error: Exception | None = None

    async def fetch(self, path: str) -> Any:
        self.calls.append(path)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if path not in self.documents:
            raise SourceNotFoundError(path)
        return copy.deepcopy(self.documents[path])

    async def list_paths(self) -> list[str]:
        return sorted(self.documents)

    def count(self, path: str) -> int:
        return self.calls.count(path)


@pytest.fixture
def counting_source(navigation_doc: dict[str, Any]) -> CountingSource:
    """Fake source preloaded with the navigation document."""
    return CountingSource({"content/navigation.json": navigation_doc})


@pytest.fixture
def memory_store() -> MemoryCacheStore:
    """Fresh, empty cache store."""
    return MemoryCacheStore()


@pytest.fixture
def loader(counting_source: CountingSource, memory_store: MemoryCacheStore) -> ContentLoader:
    """Loader over the counting source with caching enabled."""
    return ContentLoader(counting_source, memory_store)


# === FIXTURES: Temp dirs ===


@pytest.fixture
def content_root(
    tmp_path: Path,
    navigation_doc: dict[str, Any],
    validation_messages_doc: dict[str, Any],
    policy_doc: dict[str, Any],
) -> Path:
    """Temporary content root with navigation, messages and a privacy page."""
    root = tmp_path / "config"
    pages = root / "content" / "pages"
    pages.mkdir(parents=True)
    (root / "content" / "navigation.json").write_text(
        json.dumps(navigation_doc), encoding="utf-8"
    )
    (root / "content" / "validation-messages.json").write_text(
        json.dumps(validation_messages_doc), encoding="utf-8"
    )
    (pages / "privacy.json").write_text(json.dumps(policy_doc), encoding="utf-8")
    return root


@pytest.fixture
def make_source() -> type[CountingSource]:
    """CountingSource class, for tests that need their own documents."""
    return CountingSource
