"""Tests for the demo catalog data generator."""

import pytest

from bigcommerce_catalog.models import OptionValue
from bigcommerce_catalog.seeding.generator import (
    BULK_PRICING_TIERS,
    OPTION_NAMES,
    SIZES,
    CatalogDataGenerator,
)


class TestDeterminism:
    """Tests for seeded generation."""

    def test_same_seed_same_payloads(self) -> None:
        """Same seed produces the same products."""
        gen1 = CatalogDataGenerator(seed=42)
        gen2 = CatalogDataGenerator(seed=42)

        for index in range(5):
            p1 = gen1.product(index, [1, 2, 3], [7, 8])
            p2 = gen2.product(index, [1, 2, 3], [7, 8])
            assert p1.model_dump() == p2.model_dump()

    def test_different_seeds_differ(self) -> None:
        """Different seeds produce different products."""
        products1 = [CatalogDataGenerator(seed=42).product(i, [1], [1]) for i in range(3)]
        products2 = [CatalogDataGenerator(seed=99).product(i, [1], [1]) for i in range(3)]

        assert [p.sku for p in products1] != [p.sku for p in products2]

    def test_clock_seed_is_recorded(self) -> None:
        """Without a seed, the clock-derived seed is exposed for replay."""
        generator = CatalogDataGenerator()

        assert isinstance(generator.seed, int)


class TestCategories:
    """Tests for category generation."""

    @pytest.fixture
    def generator(self) -> CatalogDataGenerator:
        """Create seeded generator."""
        return CatalogDataGenerator(seed=7)

    def test_first_categories_are_top_level(self, generator: CatalogDataGenerator) -> None:
        """The first three categories have no parent."""
        created: list[int] = []
        for index in range(3):
            category = generator.category(index, created)
            assert category.parent_id == 0
            created.append(100 + index)

    def test_later_categories_nest_under_created_ones(
        self, generator: CatalogDataGenerator
    ) -> None:
        """Later categories pick a parent among created ids."""
        created = [100, 101, 102]
        for index in range(3, 10):
            category = generator.category(index, created)
            assert category.parent_id in created
            created.append(100 + index)

    def test_names_are_unique(self, generator: CatalogDataGenerator) -> None:
        """Category names never repeat within a run."""
        names = [generator.category(i, []).name for i in range(50)]

        assert len(names) == len(set(names))

    def test_first_category_is_visible(self, generator: CatalogDataGenerator) -> None:
        """The first category is always visible."""
        category = generator.category(0, [])

        assert category.is_visible is True
        assert category.sort_order == 0


class TestProducts:
    """Tests for product generation."""

    @pytest.fixture
    def generator(self) -> CatalogDataGenerator:
        """Create seeded generator."""
        return CatalogDataGenerator(seed=11)

    def test_categories_and_brand(self, generator: CatalogDataGenerator) -> None:
        """Products get 1 to 3 distinct categories and a known brand."""
        for index in range(20):
            product = generator.product(index, [1, 2, 3, 4], [7, 8])
            assert 1 <= len(product.categories) <= 3
            assert len(set(product.categories)) == len(product.categories)
            assert set(product.categories) <= {1, 2, 3, 4}
            assert product.brand_id in (7, 8)

    def test_price_relations(self, generator: CatalogDataGenerator) -> None:
        """Derived prices follow the list price."""
        product = generator.product(0, [1], [1])

        assert 10 <= product.price <= 1000
        assert product.cost_price == pytest.approx(product.price * 0.6, abs=0.01)
        assert product.retail_price == pytest.approx(product.price * 1.2, abs=0.01)
        assert product.sale_price == pytest.approx(product.price * 0.9, abs=0.01)

    def test_names_are_unique(self, generator: CatalogDataGenerator) -> None:
        """Product names never repeat within a run."""
        names = [generator.product(i, [1], [1]).name for i in range(100)]

        assert len(names) == len(set(names))

    def test_text_fields(self, generator: CatalogDataGenerator) -> None:
        """Text fields are non-empty strings with the expected formats."""
        product = generator.product(3, [1], [1])

        assert product.type == "physical"
        assert product.sort_order == 3
        assert product.description
        assert len(product.upc) == 12 and product.upc.isdigit()
        assert len(product.gtin) == 14 and product.gtin.isdigit()
        assert product.mpn.startswith("MPN-")
        assert product.page_title == product.name


class TestSubResources:
    """Tests for per-product payloads."""

    @pytest.fixture
    def generator(self) -> CatalogDataGenerator:
        """Create seeded generator."""
        return CatalogDataGenerator(seed=3)

    def test_first_image_is_thumbnail(self, generator: CatalogDataGenerator) -> None:
        """Only the first image is the thumbnail."""
        images = [generator.image(i) for i in range(3)]

        assert [image.is_thumbnail for image in images] == [True, False, False]
        assert [image.sort_order for image in images] == [0, 1, 2]

    def test_video(self, generator: CatalogDataGenerator) -> None:
        """Videos are YouTube videos."""
        video = generator.video(0)

        assert video.type == "youtube"
        assert len(video.video_id) == 11

    def test_option_names_cycle(self, generator: CatalogDataGenerator) -> None:
        """Options take their names in order."""
        names = [generator.option(i).display_name for i in range(len(OPTION_NAMES) + 1)]

        assert names == [*OPTION_NAMES, OPTION_NAMES[0]]

    @pytest.mark.parametrize("display_name", ["Color", "Size", "Material", "Style"])
    def test_option_values(
        self, generator: CatalogDataGenerator, display_name: str
    ) -> None:
        """Options get 2 to 4 distinct values; the first is the default."""
        values = generator.option_values(display_name, option_id=12)

        assert 2 <= len(values) <= 4
        assert len({value.label for value in values}) == len(values)
        assert [value.is_default for value in values] == [True] + [False] * (len(values) - 1)
        assert all(value.option_id == 12 for value in values)

    def test_size_values_in_order(self, generator: CatalogDataGenerator) -> None:
        """Size values start from the smallest size."""
        values = generator.option_values("Size", option_id=1)

        assert [value.label for value in values] == SIZES[: len(values)]

    def test_variant_combinations_are_distinct(
        self, generator: CatalogDataGenerator
    ) -> None:
        """Variants never repeat an option value combination."""
        colors = [OptionValue(id=i, option_id=1) for i in (1, 2)]
        sizes = [OptionValue(id=i, option_id=2) for i in (3, 4)]

        combinations = generator.variant_combinations([colors, sizes], 10)

        assert len(combinations) == 4
        keys = {tuple(value.id for value in combo) for combo in combinations}
        assert len(keys) == 4

    def test_variant_references_values(self, generator: CatalogDataGenerator) -> None:
        """Variants reference option values by id and option id."""
        variant = generator.variant([OptionValue(id=31, option_id=12, label="Red")])

        assert [value.model_dump(exclude_none=True) for value in variant.option_values] == [
            {"id": 31, "option_id": 12}
        ]

    def test_review(self, generator: CatalogDataGenerator) -> None:
        """Reviews are approved with a 2 to 5 rating."""
        for _ in range(20):
            review = generator.review()
            assert review.status == "approved"
            assert 2 <= review.rating <= 5
            assert "@" in review.email

    def test_bulk_pricing_tiers(self, generator: CatalogDataGenerator) -> None:
        """Bulk pricing uses the fixed price tiers."""
        rules = generator.bulk_pricing_rules()

        assert [
            (rule.quantity_min, rule.quantity_max, rule.amount) for rule in rules
        ] == BULK_PRICING_TIERS
        assert all(rule.type == "price" for rule in rules)
