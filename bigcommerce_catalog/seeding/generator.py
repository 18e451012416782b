"""Demo catalog data generator with deterministic seeding.

Builds category, brand, product and product sub-resource payloads filled
with synthetic text from Faker. Every random choice goes through one
seeded Random and one seeded Faker instance, so a fixed seed yields the
same payloads on every run.
"""

import itertools
import random
import time

from faker import Faker

from bigcommerce_catalog.models import (
    Brand,
    Category,
    CustomField,
    OptionValue,
    PricingRule,
    Product,
    ProductImage,
    ProductOption,
    ProductVideo,
    Review,
    Variant,
)


# ============================================================================
# Constants
# ============================================================================

PLACEHOLDER_IMAGE_URL = (
    "https://images.pexels.com/photos/45201/kitty-cat-kitten-pet-45201.jpeg"
)

CATEGORY_NOUNS = [
    "Apparel", "Audio", "Books", "Cameras", "Footwear", "Furniture",
    "Garden", "Gifts", "Home Decor", "Jewelry", "Kitchen", "Lighting",
    "Office", "Outdoor", "Pet Supplies", "Sports", "Toys", "Travel",
]

CATEGORY_QUALIFIERS = [
    "Everyday", "Premium", "Seasonal", "Classic", "Modern", "Vintage",
    "Kids", "Professional", "Eco", "Luxury",
]

PRODUCT_ADJECTIVES = [
    "Premium", "Elite", "Pro", "Ultra", "Classic", "Essential",
    "Advanced", "Smart", "Dynamic", "Flex", "Prime", "Compact",
]

PRODUCT_NOUNS = [
    "Backpack", "Blender", "Chair", "Desk Lamp", "Headphones", "Jacket",
    "Kettle", "Mug", "Notebook", "Sneakers", "Speaker", "Tent",
    "Watch", "Water Bottle", "Wallet",
]

OPTION_TYPES = ["dropdown", "radio_buttons", "rectangles"]

OPTION_NAMES = ["Color", "Size", "Material", "Style"]

COLORS = ["Black", "White", "Red", "Blue", "Green", "Navy", "Gray", "Olive"]

SIZES = ["Small", "Medium", "Large", "X-Large", "XX-Large"]

MATERIALS = ["Cotton", "Polyester", "Wool", "Leather", "Silk"]

# (quantity_min, quantity_max, amount); a max of 0 leaves the tier open-ended
BULK_PRICING_TIERS = [
    (2, 9, 5.0),
    (10, 19, 10.0),
    (20, 0, 15.0),
]

BULK_PRICING_SHARE = 0.3
FEATURED_SHARE = 0.2
HIDDEN_CATEGORY_SHARE = 0.1


# ============================================================================
# Generator
# ============================================================================


class CatalogDataGenerator:
    """Generates demo payloads for a BigCommerce store.

    Example usage:
        generator = CatalogDataGenerator(seed=42)
        category = generator.category(0, parent_ids=[])
        product = generator.product(0, category_ids=[10, 11], brand_ids=[3])
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize generator.

        Args:
            seed: Random seed; None seeds from the clock.
        """
        self.seed = seed if seed is not None else time.time_ns()
        self.rng = random.Random(self.seed)
        self.fake = Faker()
        self.fake.seed_instance(self.seed)
        self._category_names: set[str] = set()
        self._product_names: set[str] = set()

    def count(self, low: int, high: int) -> int:
        """Draw how many records of a kind to create (inclusive range)."""
        return self.rng.randint(low, high)

    def _unique_name(self, candidate: str, taken: set[str]) -> str:
        name = candidate
        suffix = 2
        while name in taken:
            name = f"{candidate} {suffix}"
            suffix += 1
        taken.add(name)
        return name

    def _keywords(self, count: int = 3) -> list[str]:
        return self.fake.words(nb=count, unique=True)

    # ------------------------------------------------------------------
    # Top-level records
    # ------------------------------------------------------------------

    def category(self, index: int, parent_ids: list[int]) -> Category:
        """Generate a category.

        The first three categories are top-level. Later ones are nested
        under a random category from parent_ids.

        Args:
            index: Position of the category in the run; used as sort order.
            parent_ids: Ids of categories already created.

        Returns:
            Category payload.
        """
        parent_id = 0
        if index > 2 and parent_ids:
            parent_id = self.rng.choice(parent_ids)

        name = self._unique_name(
            f"{self.rng.choice(CATEGORY_QUALIFIERS)} {self.rng.choice(CATEGORY_NOUNS)}",
            self._category_names,
        )
        return Category(
            parent_id=parent_id,
            name=name,
            description=self.fake.paragraph(nb_sentences=2),
            sort_order=index,
            page_title=self.fake.sentence(nb_words=3),
            meta_keywords=self._keywords(),
            meta_description=self.fake.paragraph(nb_sentences=1),
            layout_file="category.html",
            is_visible=index == 0 or self.rng.random() > HIDDEN_CATEGORY_SHARE,
            image_url=PLACEHOLDER_IMAGE_URL,
        )

    def brand(self) -> Brand:
        name = self.fake.unique.company()
        return Brand(
            name=name,
            page_title=f"{name} Products",
            meta_keywords=[name, *self._keywords(2)],
            meta_description=self.fake.paragraph(nb_sentences=1),
            image_url=PLACEHOLDER_IMAGE_URL,
            search_keywords=", ".join(self._keywords(2)),
        )

    def product(
        self, index: int, category_ids: list[int], brand_ids: list[int]
    ) -> Product:
        """Generate a physical product.

        Picks 1 to 3 distinct categories and one brand. Cost, retail and
        sale prices are derived from the list price (60%, 120%, 90%).

        Args:
            index: Position of the product in the run; used as sort order.
            category_ids: Ids of created categories.
            brand_ids: Ids of created brands.

        Returns:
            Product payload.
        """
        categories = self.rng.sample(
            category_ids, min(self.rng.randint(1, 3), len(category_ids))
        )
        brand_id = self.rng.choice(brand_ids) if brand_ids else None

        name = self._unique_name(
            f"{self.rng.choice(PRODUCT_ADJECTIVES)} "
            f"{self.fake.color_name()} {self.rng.choice(PRODUCT_NOUNS)}",
            self._product_names,
        )
        price = round(self.rng.uniform(10, 1000), 2)

        return Product(
            name=name,
            type="physical",
            sku=self.fake.uuid4(),
            description=self.fake.paragraph(nb_sentences=3),
            weight=round(self.rng.uniform(0.1, 25), 2),
            width=round(self.rng.uniform(1, 50), 2),
            depth=round(self.rng.uniform(1, 50), 2),
            height=round(self.rng.uniform(1, 50), 2),
            price=price,
            cost_price=round(price * 0.6, 2),
            retail_price=round(price * 1.2, 2),
            sale_price=round(price * 0.9, 2),
            categories=categories,
            brand_id=brand_id,
            inventory_level=self.rng.randint(0, 99),
            inventory_warning_level=10,
            inventory_tracking="product",
            is_visible=True,
            is_featured=self.rng.random() < FEATURED_SHARE,
            warranty=self.fake.sentence(nb_words=10),
            bin_picking_number=self.fake.numerify("######"),
            upc=self.fake.numerify("#" * 12),
            mpn=f"MPN-{self.fake.numerify('########')}",
            gtin=self.fake.numerify("#" * 14),
            search_keywords=", ".join(self._keywords()),
            availability="available",
            availability_description="Usually ships in 1-2 business days",
            sort_order=index,
            condition="New",
            is_condition_shown=True,
            order_quantity_minimum=1,
            order_quantity_maximum=10,
            page_title=name,
            meta_keywords=self._keywords(),
            meta_description=self.fake.paragraph(nb_sentences=1),
            open_graph_type="product",
            open_graph_title=name,
            open_graph_description=self.fake.sentence(nb_words=5),
        )

    # ------------------------------------------------------------------
    # Product sub-resources
    # ------------------------------------------------------------------

    def custom_field(self) -> CustomField:
        return CustomField(
            name=f"{self.fake.word().title()} Info",
            value=self.fake.sentence(nb_words=5),
        )

    def image(self, index: int) -> ProductImage:
        """Generate a product image; the first image is the thumbnail."""
        return ProductImage(
            image_url=PLACEHOLDER_IMAGE_URL,
            is_thumbnail=index == 0,
            sort_order=index,
            description=self.fake.sentence(nb_words=5),
        )

    def video(self, index: int) -> ProductVideo:
        return ProductVideo(
            title=f"{self.rng.choice(PRODUCT_NOUNS)} Video",
            description=self.fake.sentence(nb_words=10),
            sort_order=index,
            type="youtube",
            video_id=self.fake.lexify("?" * 11),
        )

    def option(self, index: int) -> ProductOption:
        return ProductOption(
            display_name=OPTION_NAMES[index % len(OPTION_NAMES)],
            type=self.rng.choice(OPTION_TYPES),
        )

    def option_values(self, display_name: str, option_id: int) -> list[OptionValue]:
        """Generate 2 to 4 distinct values for an option.

        Args:
            display_name: Option name; picks the value vocabulary.
            option_id: Id of the created option.

        Returns:
            Values in sort order; the first one is the default.
        """
        count = self.rng.randint(2, 4)
        if display_name == "Color":
            labels = self.rng.sample(COLORS, count)
        elif display_name == "Size":
            labels = SIZES[:count]
        elif display_name == "Material":
            labels = MATERIALS[:count]
        else:
            labels = [word.title() for word in self.fake.words(nb=count, unique=True)]

        return [
            OptionValue(
                option_id=option_id,
                label=label,
                sort_order=position,
                value=label,
                is_default=position == 0,
            )
            for position, label in enumerate(labels)
        ]

    def variant_combinations(
        self, values_by_option: list[list[OptionValue]], count: int
    ) -> list[list[OptionValue]]:
        """Pick distinct option value combinations for variants.

        Args:
            values_by_option: Created values of each option, in option order.
            count: Wanted number of variants.

        Returns:
            Up to count combinations, one value per option each.
        """
        combinations = [list(combo) for combo in itertools.product(*values_by_option)]
        return self.rng.sample(combinations, min(count, len(combinations)))

    def variant(self, option_values: list[OptionValue]) -> Variant:
        return Variant(
            sku=self.fake.uuid4(),
            price=round(self.rng.uniform(10, 1000), 2),
            weight=round(self.rng.uniform(0.1, 25), 2),
            depth=round(self.rng.uniform(1, 50), 2),
            height=round(self.rng.uniform(1, 50), 2),
            width=round(self.rng.uniform(1, 50), 2),
            inventory_level=self.rng.randint(0, 99),
            inventory_warning_level=10,
            option_values=[
                OptionValue(id=value.id, option_id=value.option_id)
                for value in option_values
            ],
        )

    def review(self) -> Review:
        return Review(
            title=self.fake.sentence(nb_words=3),
            text=self.fake.paragraph(nb_sentences=3),
            status="approved",
            rating=self.rng.randint(2, 5),
            name=self.fake.name(),
            email=self.fake.email(),
        )

    def wants_bulk_pricing(self) -> bool:
        """Decide whether a product gets bulk pricing tiers (about 30%)."""
        return self.rng.random() < BULK_PRICING_SHARE

    def bulk_pricing_rules(self) -> list[PricingRule]:
        return [
            PricingRule(
                quantity_min=quantity_min,
                quantity_max=quantity_max,
                type="price",
                amount=amount,
            )
            for quantity_min, quantity_max, amount in BULK_PRICING_TIERS
        ]
