"""Response envelope and base record schemas.

Every catalog response wraps its payload as {"data": ..., "meta": ...}.
Error responses carry {"status", "title", "type", "errors"}.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class CatalogModel(BaseModel):
    """Base class for catalog records.

    Unset fields are None and are left out of request payloads. Fields the
    API returns but the record does not declare are kept as extras.
    """

    model_config = ConfigDict(extra="allow")


# ============================================================================
# Pagination
# ============================================================================


class PaginationLinks(CatalogModel):
    """Relative links to neighbouring pages."""

    current: str | None = None
    previous: str | None = None
    next: str | None = None


class Pagination(CatalogModel):
    """Pagination metadata of a collection response."""

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: PaginationLinks = Field(default_factory=PaginationLinks)

    @property
    def has_more(self) -> bool:
        """Whether pages after the current one exist."""
        return self.current_page < self.total_pages


class Meta(CatalogModel):
    """Response metadata."""

    pagination: Pagination = Field(default_factory=Pagination)


class Envelope(CatalogModel, Generic[T]):
    """Response wrapper holding the payload and its metadata.

    Example usage:
        Envelope[list[Product]].model_validate_json(body)
    """

    data: T
    meta: Meta = Field(default_factory=Meta)

    @field_validator("meta", mode="before")
    @classmethod
    def _default_meta(cls, value: Any) -> Any:
        return {} if value is None else value


# ============================================================================
# Errors
# ============================================================================


class ErrorBody(BaseModel):
    """Error envelope returned with non-2xx responses."""

    status: int = 0
    title: str = ""
    type: str = ""
    errors: list[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("title", "type", mode="before")
    @classmethod
    def _default_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("errors", mode="before")
    @classmethod
    def _normalize_errors(cls, value: Any) -> Any:
        # Validation failures come back keyed by field name
        if value is None:
            return []
        if isinstance(value, dict):
            return [f"{key}: {message}" for key, message in value.items()]
        return value
