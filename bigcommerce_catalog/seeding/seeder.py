"""Store seeder.

Fills a store with generated demo data through the catalog client.
Categories, brands and products are created first; every later step hangs
off them, so a failure there aborts the run with SeedingError. Per-product
extras (custom fields, images, videos, options and variants, reviews,
bulk pricing) are logged on failure and the run moves on.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

import structlog

from bigcommerce_catalog.client import BigCommerceClient
from bigcommerce_catalog.config import Settings
from bigcommerce_catalog.exceptions import CatalogClientError, SeedingError
from bigcommerce_catalog.models import OptionValue
from bigcommerce_catalog.seeding.generator import OPTION_NAMES, CatalogDataGenerator

logger = structlog.get_logger()

ProductStep = Callable[[int, "SeedReport"], Awaitable[None]]


# ============================================================================
# Configuration and Results
# ============================================================================


@dataclass
class SeedConfig:
    """How much data a seeding run creates.

    Attributes:
        num_categories: Categories to create.
        num_brands: Brands to create.
        num_products: Products to create.
        num_custom_fields: Custom fields per product.
        max_variants: Upper bound of variants per product with options.
        max_options: Upper bound of options per product.
        max_images: Upper bound of images per product (at least one).
        max_videos: Upper bound of videos per product.
        max_reviews: Upper bound of reviews per product.
    """

    num_categories: int = 10
    num_brands: int = 5
    num_products: int = 30
    num_custom_fields: int = 2
    max_variants: int = 3
    max_options: int = 2
    max_images: int = 3
    max_videos: int = 1
    max_reviews: int = 5

    @classmethod
    def from_settings(cls, settings: Settings) -> "SeedConfig":
        return cls(
            num_categories=settings.num_categories,
            num_brands=settings.num_brands,
            num_products=settings.num_products,
            num_custom_fields=settings.num_custom_fields,
            max_variants=settings.max_variants,
            max_options=settings.max_options,
            max_images=settings.max_images,
            max_videos=settings.max_videos,
            max_reviews=settings.max_reviews,
        )


@dataclass
class SeedReport:
    """Outcome of a seeding run.

    Counts only include records the API confirmed. failures lists the
    per-product steps that were skipped, as "<step> (product <id>)".
    """

    category_ids: list[int] = field(default_factory=list)
    brand_ids: list[int] = field(default_factory=list)
    product_ids: list[int] = field(default_factory=list)
    custom_fields: int = 0
    images: int = 0
    videos: int = 0
    options: int = 0
    option_values: int = 0
    variants: int = 0
    reviews: int = 0
    bulk_pricing_rules: int = 0
    failures: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        """Get record counts keyed by resource name."""
        return {
            "categories": len(self.category_ids),
            "brands": len(self.brand_ids),
            "products": len(self.product_ids),
            "custom_fields": self.custom_fields,
            "images": self.images,
            "videos": self.videos,
            "options": self.options,
            "option_values": self.option_values,
            "variants": self.variants,
            "reviews": self.reviews,
            "bulk_pricing_rules": self.bulk_pricing_rules,
            "failures": len(self.failures),
        }


# ============================================================================
# Seeder
# ============================================================================


class StoreSeeder:
    """Creates a demo catalog in a store.

    Example usage:
        async with BigCommerceClient.from_settings(settings) as client:
            seeder = StoreSeeder(client, CatalogDataGenerator(seed=42))
            report = await seeder.run()
    """

    def __init__(
        self,
        client: BigCommerceClient,
        generator: CatalogDataGenerator,
        config: SeedConfig | None = None,
    ) -> None:
        """Initialize seeder.

        Args:
            client: Catalog client of the target store.
            generator: Source of generated payloads.
            config: Record counts; defaults to SeedConfig().
        """
        self.client = client
        self.generator = generator
        self.config = config or SeedConfig()

    async def run(self) -> SeedReport:
        """Seed the store.

        Returns:
            Report of what was created.

        Raises:
            SeedingError: If a category, brand or product cannot be created.
        """
        report = SeedReport()
        logger.info("Seeding store", seed=self.generator.seed, **vars(self.config))

        await self._create_categories(report)
        logger.info("Created categories", count=len(report.category_ids))

        await self._create_brands(report)
        logger.info("Created brands", count=len(report.brand_ids))

        await self._create_products(report)
        logger.info("Created products", count=len(report.product_ids))

        for product_id in report.product_ids:
            await self._enrich_product(product_id, report)

        logger.info("Finished seeding store", **report.summary())
        return report

    # ------------------------------------------------------------------
    # Critical steps
    # ------------------------------------------------------------------

    async def _create_categories(self, report: SeedReport) -> None:
        for index in range(self.config.num_categories):
            category = self.generator.category(index, report.category_ids)
            try:
                response = await self.client.categories.create(category)
            except CatalogClientError as e:
                logger.error(
                    "Failed to create category", name=category.name, error=str(e)
                )
                raise SeedingError("categories", e) from e
            report.category_ids.append(response.data.id)
            logger.info(
                "Created category",
                name=category.name,
                category_id=response.data.id,
                parent_id=category.parent_id,
            )

    async def _create_brands(self, report: SeedReport) -> None:
        for _ in range(self.config.num_brands):
            brand = self.generator.brand()
            try:
                response = await self.client.brands.create(brand)
            except CatalogClientError as e:
                logger.error("Failed to create brand", name=brand.name, error=str(e))
                raise SeedingError("brands", e) from e
            report.brand_ids.append(response.data.id)
            logger.info("Created brand", name=brand.name, brand_id=response.data.id)

    async def _create_products(self, report: SeedReport) -> None:
        for index in range(self.config.num_products):
            product = self.generator.product(
                index, report.category_ids, report.brand_ids
            )
            try:
                response = await self.client.products.create(product)
            except CatalogClientError as e:
                logger.error(
                    "Failed to create product", name=product.name, error=str(e)
                )
                raise SeedingError("products", e) from e
            report.product_ids.append(response.data.id)
            logger.info(
                "Created product", name=product.name, product_id=response.data.id
            )

    # ------------------------------------------------------------------
    # Per-product steps
    # ------------------------------------------------------------------

    async def _enrich_product(self, product_id: int, report: SeedReport) -> None:
        """Add sub-resources to one product.

        A custom field failure skips the remaining steps of the product.
        """
        if not await self._step(
            "custom fields", product_id, report, self._add_custom_fields
        ):
            return

        steps: list[tuple[str, ProductStep]] = [
            ("images", self._add_images),
            ("videos", self._add_videos),
            ("options and variants", self._add_options_and_variants),
            ("reviews", self._add_reviews),
            ("bulk pricing rules", self._add_bulk_pricing_rules),
        ]
        for name, action in steps:
            await self._step(name, product_id, report, action)

    async def _step(
        self,
        name: str,
        product_id: int,
        report: SeedReport,
        action: ProductStep,
    ) -> bool:
        """Run one per-product step, logging and recording a failure.

        Returns:
            True if the step completed.
        """
        try:
            await action(product_id, report)
        except CatalogClientError as e:
            logger.error(
                "Failed to seed product step",
                step=name,
                product_id=product_id,
                error=str(e),
            )
            report.failures.append(f"{name} (product {product_id})")
            return False
        return True

    async def _add_custom_fields(self, product_id: int, report: SeedReport) -> None:
        for _ in range(self.config.num_custom_fields):
            await self.client.custom_fields.create(
                product_id, self.generator.custom_field()
            )
            report.custom_fields += 1

    async def _add_images(self, product_id: int, report: SeedReport) -> None:
        for index in range(self.generator.count(1, self.config.max_images)):
            await self.client.product_images.create(
                product_id, self.generator.image(index)
            )
            report.images += 1

    async def _add_videos(self, product_id: int, report: SeedReport) -> None:
        for index in range(self.generator.count(0, self.config.max_videos)):
            await self.client.product_videos.create(
                product_id, self.generator.video(index)
            )
            report.videos += 1

    async def _add_options_and_variants(
        self, product_id: int, report: SeedReport
    ) -> None:
        # Option names must be unique per product
        limit = min(self.config.max_options, len(OPTION_NAMES))
        num_options = self.generator.count(0, limit)
        if num_options == 0:
            return

        values_by_option: list[list[OptionValue]] = []
        for index in range(num_options):
            option = self.generator.option(index)
            created = await self.client.options.create(product_id, option)
            report.options += 1

            values: list[OptionValue] = []
            for value in self.generator.option_values(
                option.display_name, created.data.id
            ):
                created_value = await self.client.options.create_value(
                    product_id, created.data.id, value
                )
                report.option_values += 1
                value.id = created_value.data.id
                values.append(value)
            values_by_option.append(values)

        wanted = self.generator.count(1, self.config.max_variants)
        for combination in self.generator.variant_combinations(values_by_option, wanted):
            await self.client.variants.create(
                product_id, self.generator.variant(combination)
            )
            report.variants += 1

    async def _add_reviews(self, product_id: int, report: SeedReport) -> None:
        for _ in range(self.generator.count(0, self.config.max_reviews)):
            await self.client.reviews.create(product_id, self.generator.review())
            report.reviews += 1

    async def _add_bulk_pricing_rules(self, product_id: int, report: SeedReport) -> None:
        if not self.generator.wants_bulk_pricing():
            return

        for rule in self.generator.bulk_pricing_rules():
            await self.client.bulk_pricing_rules.create(product_id, rule)
            report.bulk_pricing_rules += 1
