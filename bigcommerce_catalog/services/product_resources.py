"""Product sub-resources addressed as catalog/products/{product_id}/<resource>."""

from bigcommerce_catalog.models import (
    ComplexRule,
    CustomField,
    Envelope,
    PricingRule,
    ProductImage,
    ProductSummary,
    ProductVideo,
    Review,
    Variant,
)
from bigcommerce_catalog.services.base import CatalogService, ProductResourceService


class VariantsService(ProductResourceService[Variant]):
    resource = "variants"
    model = Variant


class ProductImagesService(ProductResourceService[ProductImage]):
    resource = "images"
    model = ProductImage


class ProductVideosService(ProductResourceService[ProductVideo]):
    resource = "videos"
    model = ProductVideo


class CustomFieldsService(ProductResourceService[CustomField]):
    resource = "custom-fields"
    model = CustomField


class ReviewsService(ProductResourceService[Review]):
    resource = "reviews"
    model = Review


class ComplexRulesService(ProductResourceService[ComplexRule]):
    resource = "complex-rules"
    model = ComplexRule


class BulkPricingRulesService(ProductResourceService[PricingRule]):
    """Quantity tier pricing rules of a product."""

    resource = "bulk-pricing-rules"
    model = PricingRule

    async def update_batch(
        self, product_id: int, rules: list[PricingRule]
    ) -> Envelope[list[PricingRule]]:
        """Replace the product's rules in one request.

        Args:
            product_id: Parent product id.
            rules: Rules to store.

        Returns:
            Envelope with the stored rules.
        """
        return await self._call(
            "PUT",
            self._path(product_id),
            Envelope[list[PricingRule]],
            body={"bulk_pricing_rules": rules},
        )

    async def delete_all(self, product_id: int) -> None:
        """Delete every bulk pricing rule of a product."""
        await self._call("DELETE", self._path(product_id))


class SummaryService(CatalogService):
    """Read-only product summary at catalog/products/{product_id}/summary."""

    async def get(self, product_id: int) -> Envelope[ProductSummary]:
        return await self._call(
            "GET",
            f"catalog/products/{product_id}/summary",
            Envelope[ProductSummary],
        )
