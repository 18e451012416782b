"""Batch product writes against catalog/products."""

from bigcommerce_catalog.models import BatchError, Envelope, Product
from bigcommerce_catalog.services.base import CatalogService

BATCH_PATH = "catalog/products"


class BatchService(CatalogService):
    """Create, update or delete many products in one request.

    The API caps a batch at 10 products; larger batches come back as an
    APIError rather than being split here.
    """

    async def create_products(self, products: list[Product]) -> Envelope[list[Product]]:
        """Create several products at once.

        Args:
            products: Products to create.

        Returns:
            Envelope with the created products in request order.
        """
        return await self._call(
            "POST",
            BATCH_PATH,
            Envelope[list[Product]],
            body={"products": products},
        )

    async def update_products(self, products: list[Product]) -> Envelope[list[Product]]:
        """Update several products at once. Every product must carry its id."""
        return await self._call(
            "PUT",
            BATCH_PATH,
            Envelope[list[Product]],
            body={"products": products},
        )

    async def delete_products(self, product_ids: list[int]) -> Envelope[list[BatchError]]:
        """Delete several products at once.

        Args:
            product_ids: Products to delete.

        Returns:
            Envelope listing the products that could not be deleted.
        """
        return await self._call(
            "DELETE",
            BATCH_PATH,
            Envelope[list[BatchError]],
            body={"product_ids": product_ids},
        )
