# src/schemas/page_content.py — v1
"""Page content documents: home, products listing, product detail."""

from __future__ import annotations

from pydantic import Field

from sitecontent.schemas.base import ContentModel, VersionedContent


class CTA(ContentModel):
    label: str
    href: str
    aria_label: str


class ValueProp(ContentModel):
    id: str
    heading: str
    description: str
    icon: str


class ColorOption(ContentModel):
    id: str
    label: str
    quantity: int = Field(ge=0)
    quantity_label: str


class Hero(ContentModel):
    heading: str
    subheading: str
    cta_primary: CTA
    cta_secondary: CTA


class FounderSection(ContentModel):
    heading: str
    description: str
    # Quantities now come from the database; kept for older content files.
    colors: tuple[ColorOption, ...] | None = None
    cta: CTA


class CtaSection(ContentModel):
    heading: str
    description: str
    cta: CTA


class BrowseAllSection(ContentModel):
    heading: str
    cta: CTA


class HomePageContent(VersionedContent):
    """content/pages/home.json"""

    hero: Hero
    value_props: tuple[ValueProp, ...]
    founder_section: FounderSection
    expansion_section: CtaSection
    accessories_section: CtaSection
    diy_section: CtaSection
    about_section: CtaSection
    browse_all_section: BrowseAllSection


class FilterOption(ContentModel):
    value: str
    label: str
    description: str


class FilterSection(ContentModel):
    id: str
    label: str
    options: tuple[FilterOption, ...]


class ProductSection(ContentModel):
    id: str
    heading: str
    description: str


class PageHeading(ContentModel):
    heading: str
    subheading: str


class Filters(ContentModel):
    heading: str
    sections: tuple[FilterSection, ...]
    clear_filters_label: str
    active_filters_label: str


class LoadingStates(ContentModel):
    loading_products: str
    no_products: str
    try_again: str


class ProductsListingContent(VersionedContent):
    """content/pages/products-listing.json"""

    page: PageHeading
    filters: Filters
    loading_states: LoadingStates
    product_sections: tuple[ProductSection, ...]


class SectionHeading(ContentModel):
    heading: str


class DetailSections(ContentModel):
    description: SectionHeading
    specifications: SectionHeading
    whats_included: SectionHeading
    warranty: SectionHeading


class VariantSelector(ContentModel):
    color_label: str
    quantity_label: str
    out_of_stock_label: str
    out_of_stock_suffix: str


class Badges(ContentModel):
    limited_edition: str
    sold_out: str
    requires_assembly: str
    multiple_colors: str
    low_stock_template: str
    in_stock: str


class Assembly(ContentModel):
    notice: str


class DetailCTA(ContentModel):
    add_to_cart: str
    adding: str
    added: str
    sold_out: str
    notify_me: str


class Shipping(ContentModel):
    estimate: str
    free_shipping_notice: str


class ProductDetailContent(VersionedContent):
    """content/pages/product-detail.json"""

    sections: DetailSections
    variant_selector: VariantSelector
    badges: Badges
    assembly: Assembly
    cta: DetailCTA
    shipping: Shipping
