# src/schemas/validation_messages.py — v1
"""Validation message catalog.

Keys ending in '_template' carry {placeholder} fields filled by
sitecontent.content.template.interpolate().
"""

from __future__ import annotations

from sitecontent.schemas.base import ContentModel, VersionedContent


class CartValidationMessages(ContentModel):
    product_unavailable_template: str
    product_sold_out_template: str
    insufficient_stock_template: str
    quantity_exceeds_stock_template: str
    voltage_mismatch: str
    missing_required_component_template: str
    suggested_component_template: str
    incompatible_products_template: str


class ProductValidationMessages(ContentModel):
    invalid_variant: str
    invalid_quantity: str
    quantity_too_low: str
    quantity_too_high_template: str


class CheckoutValidationMessages(ContentModel):
    required_field_template: str
    invalid_email: str
    invalid_phone: str
    invalid_postal_code: str
    invalid_card: str
    card_declined: str


class FormValidationMessages(ContentModel):
    required: str
    email_invalid: str
    min_length_template: str
    max_length_template: str
    pattern_mismatch: str


class ValidationMessages(VersionedContent):
    """Catalog loaded from content/validation-messages.json."""

    cart_validation: CartValidationMessages
    product_validation: ProductValidationMessages
    checkout_validation: CheckoutValidationMessages
    form_validation: FormValidationMessages
