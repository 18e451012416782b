"""Price calculation and inventory lookups."""

from bigcommerce_catalog.models import (
    Envelope,
    PricingData,
    PricingRequest,
    ProductInventory,
)
from bigcommerce_catalog.query import encode_ids
from bigcommerce_catalog.services.base import CatalogService


class PricingService(CatalogService):
    """Shopper-facing price calculation at pricing/products."""

    async def get(self, request: PricingRequest) -> Envelope[PricingData]:
        """Calculate prices for products and variants.

        The endpoint is read-only but takes its input as a POST body.

        Args:
            request: Items to price and the shopper context.

        Returns:
            Envelope with prices keyed by product and variant id.
        """
        return await self._call(
            "POST", "pricing/products", Envelope[PricingData], body=request
        )


class InventoryService(CatalogService):
    """Aggregated product inventory."""

    async def get(self, product_id: int) -> Envelope[ProductInventory]:
        return await self._call(
            "GET",
            f"catalog/products/{product_id}/inventory",
            Envelope[ProductInventory],
        )

    async def list(self, product_ids: list[int]) -> Envelope[list[ProductInventory]]:
        """Get inventory for several products in one request.

        Each id is sent as its own id:in entry, in the given order.

        Args:
            product_ids: Products to look up.

        Returns:
            Envelope with one inventory record per product.
        """
        return await self._call(
            "GET",
            "catalog/products/inventory",
            Envelope[list[ProductInventory]],
            params=encode_ids("id:in", product_ids),
        )
