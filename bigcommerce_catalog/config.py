"""Settings and logging setup.

Loads settings from BIGCOMMERCE_* environment variables and an optional
.env file.
"""

import logging
import sys

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bigcommerce_catalog.transport import DEFAULT_API_ROOT, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Client and seeder settings loaded from environment variables."""

    # API
    store_hash: str = Field(default="", description="Store hash from the API account")
    auth_token: str = Field(default="", description="API account access token")
    api_root: str = DEFAULT_API_ROOT
    timeout: float = DEFAULT_TIMEOUT

    # Logging
    log_level: str = "INFO"

    # Seeding
    num_categories: int = 10
    num_brands: int = 5
    num_products: int = 30
    num_custom_fields: int = 2
    max_variants: int = 3
    max_options: int = 2
    max_images: int = 3
    max_videos: int = 1
    max_reviews: int = 5
    seed: int | None = Field(
        default=None,
        description="Random seed for generated data; unset seeds from the clock",
    )

    model_config = SettingsConfigDict(
        env_prefix="BIGCOMMERCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through the standard library and render JSON lines.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO".
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
