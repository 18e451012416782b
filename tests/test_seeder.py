"""Tests for the store seeder."""

import json
from collections.abc import Callable

import httpx
import pytest

from bigcommerce_catalog import BigCommerceClient, SeedingError, Settings
from bigcommerce_catalog.seeding import (
    CatalogDataGenerator,
    SeedConfig,
    StoreSeeder,
)
from bigcommerce_catalog.seeding.generator import OPTION_NAMES
from tests.conftest import STORE_HASH, FakeStore, envelope

MakeClient = Callable[[FakeStore], BigCommerceClient]

SMALL = SeedConfig(
    num_categories=4,
    num_brands=2,
    num_products=3,
    num_custom_fields=2,
    max_variants=3,
    max_options=2,
    max_images=2,
    max_videos=1,
    max_reviews=2,
)


class CatalogStub:
    """Assigns ids to created records and fails requests on chosen paths."""

    def __init__(self, fail_suffix: str | None = None) -> None:
        self.fail_suffix = fail_suffix
        self.next_id = 100
        self.created: dict[int, dict] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix(f"/stores/{STORE_HASH}/v3/")
        if self.fail_suffix and path.endswith(self.fail_suffix):
            return httpx.Response(
                422, json={"status": 422, "title": "Invalid", "errors": ["rejected"]}
            )

        self.next_id += 1
        record = {**json.loads(request.content), "id": self.next_id}
        self.created[self.next_id] = record
        return httpx.Response(200, json=envelope(record))


def posts(store: FakeStore, suffix: str) -> list[httpx.Request]:
    """Requests that created records under a path suffix."""
    return [
        request
        for request in store.requests
        if request.method == "POST" and request.url.path.endswith(suffix)
    ]


class TestSeedConfig:
    """Tests for SeedConfig."""

    def test_defaults(self) -> None:
        """Defaults match the documented run size."""
        config = SeedConfig()

        assert (config.num_categories, config.num_brands, config.num_products) == (10, 5, 30)
        assert config.max_variants == 3

    def test_from_settings(self) -> None:
        """Counts are read from settings."""
        settings = Settings(_env_file=None, num_products=4, max_reviews=0)

        config = SeedConfig.from_settings(settings)

        assert config.num_products == 4
        assert config.max_reviews == 0


class TestStoreSeeder:
    """Tests for StoreSeeder.run."""

    @pytest.mark.asyncio
    async def test_full_run(self, make_client: MakeClient) -> None:
        """A run creates every record kind and reports the counts."""
        store = FakeStore(CatalogStub())
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=42), SMALL)

        report = await seeder.run()

        assert len(report.category_ids) == 4
        assert len(report.brand_ids) == 2
        assert len(report.product_ids) == 3
        assert report.custom_fields == 6
        assert 3 <= report.images <= 6
        assert report.failures == []
        assert len(posts(store, "/images")) == report.images
        assert len(posts(store, "/reviews")) == report.reviews
        assert len(posts(store, "/bulk-pricing-rules")) == report.bulk_pricing_rules
        assert report.summary()["products"] == 3

    @pytest.mark.asyncio
    async def test_products_use_created_ids(self, make_client: MakeClient) -> None:
        """Products reference the categories and brands the store created."""
        store = FakeStore(CatalogStub())
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=5), SMALL)

        report = await seeder.run()

        for request in posts(store, "catalog/products"):
            body = json.loads(request.content)
            assert set(body["categories"]) <= set(report.category_ids)
            assert body["brand_id"] in report.brand_ids

    @pytest.mark.asyncio
    async def test_nested_categories(self, make_client: MakeClient) -> None:
        """Categories after the third nest under earlier ones."""
        store = FakeStore(CatalogStub())
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=8), SMALL)

        report = await seeder.run()

        bodies = [json.loads(r.content) for r in posts(store, "catalog/categories")]
        assert [body["parent_id"] for body in bodies[:3]] == [0, 0, 0]
        assert bodies[3]["parent_id"] in report.category_ids[:3]

    @pytest.mark.asyncio
    async def test_variants_use_created_values(self, make_client: MakeClient) -> None:
        """Variants reference option values by the ids the store assigned."""
        stub = CatalogStub()
        store = FakeStore(stub)
        config = SeedConfig(
            num_categories=1, num_brands=1, num_products=8, max_options=2, max_variants=3
        )
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=21), config)

        report = await seeder.run()

        option_ids = {int(r.url.path.split("/")[-2]) for r in posts(store, "/values")}
        variant_posts = posts(store, "/variants")
        assert len(variant_posts) == report.variants
        assert len(posts(store, "/values")) == report.option_values
        for request in variant_posts:
            for value in json.loads(request.content)["option_values"]:
                assert value["option_id"] in option_ids
                assert stub.created[value["id"]]["option_id"] == value["option_id"]

    @pytest.mark.asyncio
    async def test_option_names_unique_per_product(
        self, make_client: MakeClient
    ) -> None:
        """Products never get two options with the same name."""
        store = FakeStore(CatalogStub())
        config = SeedConfig(
            num_categories=1, num_brands=1, num_products=10, max_options=10, max_variants=1
        )
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=13), config)

        report = await seeder.run()

        names_by_product: dict[str, list[str]] = {}
        for request in posts(store, "/options"):
            product_path = request.url.path.rsplit("/", 1)[0]
            names_by_product.setdefault(product_path, []).append(
                json.loads(request.content)["display_name"]
            )
        assert report.options == sum(len(names) for names in names_by_product.values())
        for names in names_by_product.values():
            assert len(names) == len(set(names)) <= len(OPTION_NAMES)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("suffix", "step"),
        [
            ("catalog/categories", "categories"),
            ("catalog/brands", "brands"),
            ("catalog/products", "products"),
        ],
    )
    async def test_critical_failure_aborts(
        self, make_client: MakeClient, suffix: str, step: str
    ) -> None:
        """A failed category, brand or product creation aborts the run."""
        store = FakeStore(CatalogStub(fail_suffix=suffix))
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=1), SMALL)

        with pytest.raises(SeedingError) as exc_info:
            await seeder.run()

        assert exc_info.value.step == step
        assert posts(store, "/custom-fields") == []

    @pytest.mark.asyncio
    async def test_optional_step_failure_continues(self, make_client: MakeClient) -> None:
        """A failed image step is recorded and later steps still run."""
        store = FakeStore(CatalogStub(fail_suffix="/images"))
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=2), SMALL)

        report = await seeder.run()

        assert report.images == 0
        assert report.failures == [
            f"images (product {product_id})" for product_id in report.product_ids
        ]
        assert report.custom_fields == 6
        assert len(posts(store, "/reviews")) == report.reviews

    @pytest.mark.asyncio
    async def test_custom_field_failure_skips_product(
        self, make_client: MakeClient
    ) -> None:
        """A failed custom field skips the rest of that product."""
        store = FakeStore(CatalogStub(fail_suffix="/custom-fields"))
        seeder = StoreSeeder(make_client(store), CatalogDataGenerator(seed=3), SMALL)

        report = await seeder.run()

        assert len(report.failures) == 3
        assert posts(store, "/images") == []
        assert posts(store, "/reviews") == []
        assert report.summary()["images"] == 0
