"""BigCommerce v3 catalog client.

This package provides:
- BigCommerceClient, an async client over the catalog, channels and
  pricing endpoints of one store
- Typed request and response schemas for every catalog resource
- QueryParams for filtered, sorted and paginated list calls
- A store seeder that fills a store with generated demo data
"""

from bigcommerce_catalog.client import BigCommerceClient
from bigcommerce_catalog.config import Settings, configure_logging
from bigcommerce_catalog.exceptions import (
    APIError,
    CatalogClientError,
    DecodingError,
    EncodingError,
    SeedingError,
    TransportError,
    URLError,
)
from bigcommerce_catalog.query import QueryParams, encode_ids
from bigcommerce_catalog.transport import CatalogTransport, ClientConfig

__version__ = "0.1.0"

__all__ = [
    # Client
    "BigCommerceClient",
    "CatalogTransport",
    "ClientConfig",
    "QueryParams",
    "encode_ids",
    # Configuration
    "Settings",
    "configure_logging",
    # Errors
    "APIError",
    "CatalogClientError",
    "DecodingError",
    "EncodingError",
    "SeedingError",
    "TransportError",
    "URLError",
]
