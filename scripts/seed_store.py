#!/usr/bin/env python3
"""Seed a BigCommerce store with demo catalog data.

Reads credentials and defaults from BIGCOMMERCE_* environment variables
(or .env); command line flags override them.

Usage:
    python scripts/seed_store.py
    python scripts/seed_store.py --products 10 --seed 42
    python scripts/seed_store.py --store-hash abc123 --auth-token secret
"""

import argparse
import asyncio
import sys

from bigcommerce_catalog import (
    BigCommerceClient,
    SeedingError,
    Settings,
    configure_logging,
)
from bigcommerce_catalog.seeding import CatalogDataGenerator, SeedConfig, StoreSeeder


def parse_args(settings: Settings) -> argparse.Namespace:
    """Parse command line flags, defaulting to the loaded settings."""
    parser = argparse.ArgumentParser(
        description="Seed a BigCommerce store with demo catalog data",
    )
    parser.add_argument(
        "--store-hash",
        default=settings.store_hash,
        help="Store hash (default: BIGCOMMERCE_STORE_HASH)",
    )
    parser.add_argument(
        "--auth-token",
        default=settings.auth_token,
        help="API access token (default: BIGCOMMERCE_AUTH_TOKEN)",
    )
    parser.add_argument(
        "--categories",
        type=int,
        default=settings.num_categories,
        help=f"Categories to create (default: {settings.num_categories})",
    )
    parser.add_argument(
        "--brands",
        type=int,
        default=settings.num_brands,
        help=f"Brands to create (default: {settings.num_brands})",
    )
    parser.add_argument(
        "--products",
        type=int,
        default=settings.num_products,
        help=f"Products to create (default: {settings.num_products})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Random seed for reproducible data (default: clock)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    settings = Settings()
    args = parse_args(settings)
    configure_logging(args.log_level)

    if not args.store_hash or not args.auth_token:
        print("Store hash and auth token are required.", file=sys.stderr)
        return 2

    config = SeedConfig.from_settings(settings)
    config.num_categories = args.categories
    config.num_brands = args.brands
    config.num_products = args.products

    generator = CatalogDataGenerator(seed=args.seed)

    print("=" * 60)
    print("BigCommerce Store Seeder")
    print("=" * 60)
    print(f"Store: {args.store_hash}")
    print(f"Seed: {generator.seed}")
    print()

    async with BigCommerceClient(
        args.store_hash,
        args.auth_token,
        api_root=settings.api_root,
        timeout=settings.timeout,
    ) as client:
        try:
            report = await StoreSeeder(client, generator, config).run()
        except SeedingError as e:
            print(f"  ✗ Error: {e}")
            return 1

    for name, count in report.summary().items():
        print(f"  ✓ {name.replace('_', ' ').capitalize()}: {count}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
