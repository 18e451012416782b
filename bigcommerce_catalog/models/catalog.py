"""Catalog record schemas.

Records mirror the BigCommerce v3 catalog resources field for field.
Relationships are plain identifier references: a product lists category
ids and a brand id, a variant lists option value references.
"""

from pydantic import Field

from bigcommerce_catalog.models.envelope import CatalogModel


# ============================================================================
# Shared Types
# ============================================================================


class CustomURL(CatalogModel):
    """Storefront URL of a product, category or brand."""

    url: str | None = None
    is_customized: bool | None = None


class OptionValue(CatalogModel):
    """Value of a product option or modifier (e.g. "Red" for "Color")."""

    id: int | None = None
    option_id: int | None = None
    label: str | None = None
    sort_order: int | None = None
    value: str | None = None
    is_default: bool | None = None


# ============================================================================
# Categories and Brands
# ============================================================================


class Category(CatalogModel):
    """Catalog category. parent_id 0 marks a top-level category."""

    id: int | None = None
    parent_id: int = 0
    name: str | None = None
    description: str | None = None
    views: int | None = None
    sort_order: int | None = None
    page_title: str | None = None
    meta_keywords: list[str] | None = None
    meta_description: str | None = None
    layout_file: str | None = None
    is_visible: bool | None = None
    default_product_sort: str | None = None
    image_url: str | None = None
    custom_url: CustomURL | None = None


class Brand(CatalogModel):
    """Catalog brand."""

    id: int | None = None
    name: str | None = None
    page_title: str | None = None
    meta_keywords: list[str] | None = None
    meta_description: str | None = None
    image_url: str | None = None
    search_keywords: str | None = None
    custom_url: CustomURL | None = None


# ============================================================================
# Product Sub-resources
# ============================================================================


class ProductImage(CatalogModel):
    """Product image. image_file or image_url is set on creation."""

    id: int | None = None
    product_id: int | None = None
    is_thumbnail: bool | None = None
    sort_order: int | None = None
    description: str | None = None
    image_file: str | None = None
    image_url: str | None = None
    url_zoom: str | None = None
    url_standard: str | None = None
    url_thumbnail: str | None = None
    url_tiny: str | None = None
    date_modified: str | None = None


class ProductVideo(CatalogModel):
    """Product video hosted on an external platform."""

    id: int | None = None
    product_id: int | None = None
    title: str | None = None
    description: str | None = None
    sort_order: int | None = None
    type: str | None = None
    video_id: str | None = None
    url: str | None = None


class CustomField(CatalogModel):
    """Free-form name/value pair shown on a product page."""

    id: int | None = None
    name: str | None = None
    value: str | None = None
    product_id: int | None = None


class PricingRule(CatalogModel):
    """Bulk (quantity tier) pricing rule. quantity_max 0 means unbounded."""

    id: int | None = None
    quantity_min: int | None = None
    quantity_max: int | None = None
    type: str | None = None
    amount: float | None = None
    product_id: int | None = None


class Variant(CatalogModel):
    """Purchasable combination of option values."""

    id: int | None = None
    product_id: int | None = None
    sku: str | None = None
    price: float | None = None
    cost_price: float | None = None
    sale_price: float | None = None
    retail_price: float | None = None
    weight: float | None = None
    width: float | None = None
    height: float | None = None
    depth: float | None = None
    is_free_shipping: bool | None = None
    fixed_cost_shipping_price: float | None = None
    purchasing_disabled: bool | None = None
    purchasing_disabled_message: str | None = None
    image_url: str | None = None
    upc: str | None = None
    mpn: str | None = None
    gtin: str | None = None
    inventory_level: int | None = None
    inventory_warning_level: int | None = None
    bin_picking_number: str | None = None
    option_values: list[OptionValue] | None = None


class OptionConfig(CatalogModel):
    """Type-specific configuration of a product option."""

    default_value: str | None = None
    checked_by_default: bool | None = None
    checkbox_label: str | None = None
    date_limited: bool | None = None
    date_limit_mode: str | None = None
    date_earliest_value: str | None = None
    date_latest_value: str | None = None
    file_types_supported: list[str] | None = None
    file_max_size: int | None = None
    text_min_length: int | None = None
    text_max_length: int | None = None
    text_characters_limited: bool | None = None
    number_limited: bool | None = None
    number_limit_mode: str | None = None
    number_lowest_value: float | None = None
    number_highest_value: float | None = None
    number_integers_only: bool | None = None


class ModifierConfig(OptionConfig):
    """Type-specific configuration of a product modifier."""

    product_list_adjusts_inventory: bool | None = None
    product_list_adjusts_pricing: bool | None = None


class ProductOption(CatalogModel):
    """Variant option (e.g. Color, Size) of a product."""

    id: int | None = None
    product_id: int | None = None
    display_name: str | None = None
    type: str | None = None
    config: OptionConfig | None = None
    option_values: list[OptionValue] | None = None


class Modifier(CatalogModel):
    """Product modifier: a shopper choice that does not create variants."""

    id: int | None = None
    product_id: int | None = None
    name: str | None = None
    display_name: str | None = None
    type: str | None = None
    required: bool | None = None
    config: ModifierConfig | None = None
    option_values: list[OptionValue] | None = None


class Review(CatalogModel):
    """Product review. rating is 1-5."""

    id: int | None = None
    product_id: int | None = None
    title: str | None = None
    text: str | None = None
    status: str | None = None
    rating: int | None = None
    email: str | None = None
    name: str | None = None
    date_reviewed: str | None = None
    date_created: str | None = None
    date_modified: str | None = None


class RuleAdjuster(CatalogModel):
    """Price adjustment applied when a complex rule matches."""

    adjuster: str | None = None
    adjuster_value: float | None = None


class RuleCondition(CatalogModel):
    """Option value a complex rule matches on."""

    product_option_id: int | None = None
    product_option_value_id: int | None = None
    rule: str | None = None


class ComplexRule(CatalogModel):
    """Rule adjusting price or purchasability for option combinations."""

    id: int | None = None
    product_id: int | None = None
    enabled: bool | None = None
    stop: bool | None = None
    purchasing_disabled: bool | None = None
    purchasing_disabled_message: str | None = None
    price_adjuster: RuleAdjuster | None = None
    conditions: list[RuleCondition] | None = None
    sort_order: int | None = None


class SummaryImage(CatalogModel):
    """Primary image reference inside a product summary."""

    id: int | None = None
    product_id: int | None = None
    url_thumbnail: str | None = None
    url_standard: str | None = None


class ProductSummary(CatalogModel):
    """Aggregated sales, inventory and rating figures for one product."""

    inventory_level: int | None = None
    inventory_warning_level: int | None = None
    primary_category_id: int | None = None
    total_sold: int | None = None
    primary_image: SummaryImage | None = None
    availability: str | None = None
    rating_average: float | None = None
    number_of_reviews: int | None = None


# ============================================================================
# Products
# ============================================================================


class Product(CatalogModel):
    """Catalog product.

    Sub-resources (images, variants, ...) are only populated when the
    matching names are passed in QueryParams.include.
    """

    id: int | None = None
    name: str | None = None
    type: str | None = None
    sku: str | None = None
    description: str | None = None
    weight: float | None = None
    width: float | None = None
    depth: float | None = None
    height: float | None = None
    price: float | None = None
    cost_price: float | None = None
    retail_price: float | None = None
    sale_price: float | None = None
    map_price: float | None = None
    tax_class_id: int | None = None
    product_tax_code: str | None = None
    categories: list[int] | None = None
    brand_id: int | None = None
    inventory_level: int | None = None
    inventory_warning_level: int | None = None
    inventory_tracking: str | None = None
    fixed_cost_shipping_price: float | None = None
    is_free_shipping: bool | None = None
    is_visible: bool | None = None
    is_featured: bool | None = None
    related_products: list[int] | None = None
    warranty: str | None = None
    bin_picking_number: str | None = None
    layout_file: str | None = None
    upc: str | None = None
    mpn: str | None = None
    gtin: str | None = None
    search_keywords: str | None = None
    availability: str | None = None
    availability_description: str | None = None
    gift_wrapping_options_type: str | None = None
    sort_order: int | None = None
    condition: str | None = None
    is_condition_shown: bool | None = None
    order_quantity_minimum: int | None = None
    order_quantity_maximum: int | None = None
    page_title: str | None = None
    meta_keywords: list[str] | None = None
    meta_description: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    view_count: int | None = None
    preorder_release_date: str | None = None
    preorder_message: str | None = None
    is_preorder_only: bool | None = None
    is_price_hidden: bool | None = None
    price_hidden_label: str | None = None
    custom_url: CustomURL | None = None
    base_variant_id: int | None = None
    open_graph_type: str | None = None
    open_graph_title: str | None = None
    open_graph_description: str | None = None
    images: list[ProductImage] | None = None
    videos: list[ProductVideo] | None = None
    custom_fields: list[CustomField] | None = None
    bulk_pricing_rules: list[PricingRule] | None = None
    variants: list[Variant] | None = None
    options: list[ProductOption] | None = None
    modifiers: list[Modifier] | None = None
    reviews: list[Review] | None = None
    complex_rules: list[ComplexRule] | None = None


# ============================================================================
# Channels and Metafields
# ============================================================================


class Channel(CatalogModel):
    """Sales channel (storefront, marketplace, POS)."""

    id: int | None = None
    name: str | None = None
    type: str | None = None
    platform: str | None = None
    status: str | None = None
    is_listable: bool | None = None
    is_visible: bool | None = None
    external_id: str | None = None
    is_externally_managed: bool | None = None
    date_created: str | None = None
    date_modified: str | None = None


class Metafield(CatalogModel):
    """Namespaced key/value data attached to a catalog resource."""

    id: int | None = None
    key: str | None = None
    value: str | None = None
    namespace: str | None = None
    permission: str | None = None
    resource_type: str | None = None
    resource_id: int | None = None
    description: str | None = None
    date_created: str | None = None
    date_modified: str | None = None


# ============================================================================
# Assignments and Batch Results
# ============================================================================


class ProductChannelAssignment(CatalogModel):
    """Listing of a product on a channel."""

    product_id: int | None = None
    channel_id: int | None = None


class CategoryAssignment(CatalogModel):
    """Membership of a product in a category."""

    product_id: int | None = None
    category_id: int | None = None


class BatchError(CatalogModel):
    """Per-item failure reported by a batch endpoint."""

    error: str | None = None
    resource_id: int | None = None
    resource_url: str | None = None
    status: int | None = None


class RelatedProductsRequest(CatalogModel):
    """Body assigning related products."""

    product_ids: list[int] = Field(default_factory=list)


class ChannelAssignmentsRequest(CatalogModel):
    """Body assigning a product to channels."""

    channel_ids: list[int] = Field(default_factory=list)


class CategoryAssignmentsRequest(CatalogModel):
    """Body assigning a product to categories."""

    category_ids: list[int] = Field(default_factory=list)
