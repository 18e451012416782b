"""Store seeding.

Generates demo catalog data and creates it in a store through the
catalog client.
"""

from bigcommerce_catalog.seeding.generator import CatalogDataGenerator
from bigcommerce_catalog.seeding.seeder import SeedConfig, SeedReport, StoreSeeder

__all__ = [
    "CatalogDataGenerator",
    "SeedConfig",
    "SeedReport",
    "StoreSeeder",
]
