"""Catalog API schemas."""

from bigcommerce_catalog.models.catalog import (
    BatchError,
    Brand,
    Category,
    CategoryAssignment,
    CategoryAssignmentsRequest,
    Channel,
    ChannelAssignmentsRequest,
    ComplexRule,
    CustomField,
    CustomURL,
    Metafield,
    Modifier,
    ModifierConfig,
    OptionConfig,
    OptionValue,
    PricingRule,
    Product,
    ProductChannelAssignment,
    ProductImage,
    ProductOption,
    ProductSummary,
    ProductVideo,
    RelatedProductsRequest,
    Review,
    RuleAdjuster,
    RuleCondition,
    SummaryImage,
    Variant,
)
from bigcommerce_catalog.models.envelope import (
    CatalogModel,
    Envelope,
    ErrorBody,
    Meta,
    Pagination,
    PaginationLinks,
)
from bigcommerce_catalog.models.pricing import (
    ItemPricing,
    PricingAggregations,
    PricingData,
    PricingRequest,
    PricingRequestAggregations,
    PricingRequestContext,
    PricingRequestFilters,
    PricingTier,
    ProductInventory,
)

__all__ = [
    # Envelope
    "CatalogModel",
    "Envelope",
    "ErrorBody",
    "Meta",
    "Pagination",
    "PaginationLinks",
    # Catalog
    "BatchError",
    "Brand",
    "Category",
    "CategoryAssignment",
    "CategoryAssignmentsRequest",
    "Channel",
    "ChannelAssignmentsRequest",
    "ComplexRule",
    "CustomField",
    "CustomURL",
    "Metafield",
    "Modifier",
    "ModifierConfig",
    "OptionConfig",
    "OptionValue",
    "PricingRule",
    "Product",
    "ProductChannelAssignment",
    "ProductImage",
    "ProductOption",
    "ProductSummary",
    "ProductVideo",
    "RelatedProductsRequest",
    "Review",
    "RuleAdjuster",
    "RuleCondition",
    "SummaryImage",
    "Variant",
    # Pricing
    "ItemPricing",
    "PricingAggregations",
    "PricingData",
    "PricingRequest",
    "PricingRequestAggregations",
    "PricingRequestContext",
    "PricingRequestFilters",
    "PricingTier",
    "ProductInventory",
]
