"""Pricing and inventory schemas."""

from pydantic import Field

from bigcommerce_catalog.models.envelope import CatalogModel


class PricingRequestContext(CatalogModel):
    """Shopper context prices are calculated for."""

    channel_id: int | None = None
    customer_id: int | None = None
    customer_group_id: int | None = None


class PricingRequestFilters(CatalogModel):
    sales_taxable: bool | None = None


class PricingRequestAggregations(CatalogModel):
    """Aggregates to compute over the priced items."""

    tax_excluded_price_min: bool | None = None
    tax_excluded_price_max: bool | None = None
    tax_included_price_min: bool | None = None
    tax_included_price_max: bool | None = None


class PricingRequest(CatalogModel):
    """Body of a batch price calculation request."""

    product_ids: list[int] | None = None
    variant_ids: list[int] | None = None
    include_taxes: bool | None = None
    currencies: list[str] | None = None
    context: PricingRequestContext | None = None
    filters: PricingRequestFilters | None = None
    aggregations: PricingRequestAggregations | None = None


class PricingTier(CatalogModel):
    """Calculated price of one bulk pricing tier."""

    quantity_min: int | None = None
    quantity_max: int | None = None
    type: str | None = None
    amount: float | None = None
    price_excluding_tax: float | None = None
    price_including_tax: float | None = None
    tax_amount: float | None = None


class ItemPricing(CatalogModel):
    """Calculated prices of one product or variant."""

    price_excluding_tax: float | None = None
    price_including_tax: float | None = None
    tax_amount: float | None = None
    retail_price_excluding_tax: float | None = None
    retail_price_including_tax: float | None = None
    retail_tax_amount: float | None = None
    sale_price_excluding_tax: float | None = None
    sale_price_including_tax: float | None = None
    sale_tax_amount: float | None = None
    map_price_excluding_tax: float | None = None
    map_price_including_tax: float | None = None
    map_tax_amount: float | None = None
    bulk_pricing_tiers: list[PricingTier] = Field(default_factory=list)
    currency: str | None = None


class PricingAggregations(CatalogModel):
    tax_excluded_price_min: float | None = None
    tax_excluded_price_max: float | None = None
    tax_included_price_min: float | None = None
    tax_included_price_max: float | None = None


class PricingData(CatalogModel):
    """Pricing results keyed by product or variant id."""

    products: dict[str, ItemPricing] = Field(default_factory=dict)
    variants: dict[str, ItemPricing] = Field(default_factory=dict)
    aggregations: PricingAggregations | None = None


class ProductInventory(CatalogModel):
    """Inventory aggregated over a product and its variants."""

    product_id: int | None = None
    inventory_level: int | None = None
    inventory_warning_level: int | None = None
    warranties_count: int | None = None
    variants_count: int | None = None
    inventory_tracking: str | None = None
