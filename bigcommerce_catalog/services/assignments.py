"""Product relationship endpoints: related products, channels, categories.

These endpoints take id lists and answer without a useful body, so the
write operations return None.
"""

from bigcommerce_catalog.models import (
    CategoryAssignment,
    CategoryAssignmentsRequest,
    ChannelAssignmentsRequest,
    Envelope,
    ProductChannelAssignment,
    RelatedProductsRequest,
)
from bigcommerce_catalog.services.base import CatalogService


class RelatedProductsService(CatalogService):
    """Related products at catalog/products/{product_id}/related."""

    async def create(self, product_id: int, related_product_ids: list[int]) -> None:
        """Relate products to a product.

        Args:
            product_id: Product id.
            related_product_ids: Ids of products to relate.
        """
        await self._call(
            "POST",
            f"catalog/products/{product_id}/related",
            body=RelatedProductsRequest(product_ids=related_product_ids),
        )

    async def delete_all(self, product_id: int) -> None:
        await self._call("DELETE", f"catalog/products/{product_id}/related")

    async def delete(self, product_id: int, related_product_id: int) -> None:
        await self._call(
            "DELETE", f"catalog/products/{product_id}/related/{related_product_id}"
        )


class ProductChannelAssignmentsService(CatalogService):
    """Channel listings at catalog/products/{product_id}/channels."""

    async def create(self, product_id: int, channel_ids: list[int]) -> None:
        await self._call(
            "POST",
            f"catalog/products/{product_id}/channels",
            body=ChannelAssignmentsRequest(channel_ids=channel_ids),
        )

    async def delete(self, product_id: int, channel_id: int) -> None:
        await self._call(
            "DELETE", f"catalog/products/{product_id}/channels/{channel_id}"
        )

    async def list(self, product_id: int) -> Envelope[list[ProductChannelAssignment]]:
        return await self._call(
            "GET",
            f"catalog/products/{product_id}/channels",
            Envelope[list[ProductChannelAssignment]],
        )


class ProductCategoriesService(CatalogService):
    """Category membership at catalog/products/{product_id}/categories."""

    async def create(self, product_id: int, category_ids: list[int]) -> None:
        await self._call(
            "POST",
            f"catalog/products/{product_id}/categories",
            body=CategoryAssignmentsRequest(category_ids=category_ids),
        )

    async def delete_all(self, product_id: int) -> None:
        await self._call("DELETE", f"catalog/products/{product_id}/categories")

    async def delete(self, product_id: int, category_id: int) -> None:
        await self._call(
            "DELETE", f"catalog/products/{product_id}/categories/{category_id}"
        )

    async def list(self, product_id: int) -> Envelope[list[CategoryAssignment]]:
        return await self._call(
            "GET",
            f"catalog/products/{product_id}/categories",
            Envelope[list[CategoryAssignment]],
        )

