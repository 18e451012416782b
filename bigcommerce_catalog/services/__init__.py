"""Resource services, one per catalog endpoint family."""

from bigcommerce_catalog.services.assignments import (
    ProductCategoriesService,
    ProductChannelAssignmentsService,
    RelatedProductsService,
)
from bigcommerce_catalog.services.base import (
    CatalogService,
    CollectionService,
    ProductResourceService,
)
from bigcommerce_catalog.services.batch import BatchService
from bigcommerce_catalog.services.catalog import (
    BrandsService,
    CategoriesService,
    ChannelsService,
    ProductsService,
)
from bigcommerce_catalog.services.metafields import MetafieldsService
from bigcommerce_catalog.services.options import ModifiersService, OptionsService
from bigcommerce_catalog.services.pricing import InventoryService, PricingService
from bigcommerce_catalog.services.product_resources import (
    BulkPricingRulesService,
    ComplexRulesService,
    CustomFieldsService,
    ProductImagesService,
    ProductVideosService,
    ReviewsService,
    SummaryService,
    VariantsService,
)

__all__ = [
    # Base
    "CatalogService",
    "CollectionService",
    "ProductResourceService",
    # Collections
    "BrandsService",
    "CategoriesService",
    "ChannelsService",
    "ProductsService",
    # Product sub-resources
    "BulkPricingRulesService",
    "ComplexRulesService",
    "CustomFieldsService",
    "ModifiersService",
    "OptionsService",
    "ProductImagesService",
    "ProductVideosService",
    "ReviewsService",
    "SummaryService",
    "VariantsService",
    # Relationships
    "ProductCategoriesService",
    "ProductChannelAssignmentsService",
    "RelatedProductsService",
    # Other
    "BatchService",
    "InventoryService",
    "MetafieldsService",
    "PricingService",
]
