"""BigCommerce catalog API client.

Groups every resource service behind one object that shares a single
transport and connection pool.
"""

import httpx

from bigcommerce_catalog.config import Settings
from bigcommerce_catalog.services import (
    BatchService,
    BrandsService,
    BulkPricingRulesService,
    CategoriesService,
    ChannelsService,
    ComplexRulesService,
    CustomFieldsService,
    InventoryService,
    MetafieldsService,
    ModifiersService,
    OptionsService,
    PricingService,
    ProductCategoriesService,
    ProductChannelAssignmentsService,
    ProductImagesService,
    ProductsService,
    ProductVideosService,
    RelatedProductsService,
    ReviewsService,
    SummaryService,
    VariantsService,
)
from bigcommerce_catalog.transport import (
    DEFAULT_API_ROOT,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    CatalogTransport,
    ClientConfig,
)


class BigCommerceClient:
    """Entry point to the v3 catalog API of one store.

    Example usage:
        async with BigCommerceClient("abc123", "token") as client:
            created = await client.categories.create(Category(name="Toys"))
            products = await client.products.list(QueryParams(limit=50))
    """

    def __init__(
        self,
        store_hash: str,
        auth_token: str,
        *,
        api_root: str = DEFAULT_API_ROOT,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            store_hash: Store identifier from the API account.
            auth_token: API account access token.
            api_root: Scheme and host of the API.
            timeout: Per-request timeout in seconds.
            user_agent: User-Agent sent with every request.
            transport: Optional httpx transport (used to fake the API in tests).

        Raises:
            URLError: If the base URL cannot be built from the inputs.
        """
        self.config = ClientConfig(
            store_hash=store_hash,
            auth_token=auth_token,
            api_root=api_root,
            user_agent=user_agent,
            timeout=timeout,
        )
        self.transport = CatalogTransport(self.config, transport=transport)

        # Collections
        self.products = ProductsService(self.transport)
        self.categories = CategoriesService(self.transport)
        self.brands = BrandsService(self.transport)
        self.channels = ChannelsService(self.transport)

        # Product sub-resources
        self.variants = VariantsService(self.transport)
        self.product_images = ProductImagesService(self.transport)
        self.product_videos = ProductVideosService(self.transport)
        self.custom_fields = CustomFieldsService(self.transport)
        self.reviews = ReviewsService(self.transport)
        self.complex_rules = ComplexRulesService(self.transport)
        self.bulk_pricing_rules = BulkPricingRulesService(self.transport)
        self.options = OptionsService(self.transport)
        self.modifiers = ModifiersService(self.transport)
        self.summary = SummaryService(self.transport)

        # Relationships
        self.related_products = RelatedProductsService(self.transport)
        self.product_channel_assignments = ProductChannelAssignmentsService(
            self.transport
        )
        self.product_categories = ProductCategoriesService(self.transport)

        # Other
        self.metafields = MetafieldsService(self.transport)
        self.inventory = InventoryService(self.transport)
        self.pricing = PricingService(self.transport)
        self.batch = BatchService(self.transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BigCommerceClient":
        """Create a client from loaded settings."""
        return cls(
            settings.store_hash,
            settings.auth_token,
            api_root=settings.api_root,
            timeout=settings.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the shared connection pool."""
        await self.transport.close()

    async def __aenter__(self) -> "BigCommerceClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
