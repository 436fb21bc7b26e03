# src/schemas/ui_strings.py — v1
"""UI labels, button text and common strings (content/ui-strings.json)."""

from __future__ import annotations

from pydantic import Field

from sitecontent.schemas.base import ContentModel, VersionedContent


class CartEmptyState(ContentModel):
    heading: str
    message: str
    cta_label: str


class ItemCount(ContentModel):
    singular: str
    plural: str

    def label(self, count: int) -> str:
        return self.singular if count == 1 else self.plural


class CartSummary(ContentModel):
    subtotal: str
    shipping: str
    shipping_calculated: str
    total: str


class CartActions(ContentModel):
    checkout: str
    continue_shopping: str
    update_cart: str
    clear_cart: str


class CartStrings(ContentModel):
    heading: str
    empty_state: CartEmptyState
    item_count: ItemCount
    summary: CartSummary
    actions: CartActions


class CartItemAria(ContentModel):
    increase_quantity: str
    decrease_quantity: str
    remove_item: str


class CartItemStrings(ContentModel):
    limited_edition_badge: str
    low_stock_template: str
    quantity_label: str
    remove_label: str
    update_label: str
    aria: CartItemAria


class ButtonStrings(ContentModel):
    add_to_cart: str
    adding: str
    added: str
    buy_now: str
    checkout: str
    continue_: str = Field(alias="continue")
    back: str
    close: str
    cancel: str
    save: str
    submit: str
    loading: str
    learn_more: str
    view_details: str
    shop_now: str


class FormStrings(ContentModel):
    required_field: str
    optional_field: str
    select_placeholder: str
    search_placeholder: str


class LoadingStrings(ContentModel):
    loading: str
    please_wait: str


class ErrorStrings(ContentModel):
    generic: str
    network: str
    not_found: str


class AriaStrings(ContentModel):
    close_dialog: str
    close_cart: str
    open_cart: str
    open_menu: str
    close_menu: str
    skip_to_content: str


class UIStrings(VersionedContent):
    """Shared UI copy used by the layout and cart components."""

    cart: CartStrings
    cart_item: CartItemStrings
    buttons: ButtonStrings
    forms: FormStrings
    loading: LoadingStrings
    errors: ErrorStrings
    aria: AriaStrings
