"""Query parameter encoding for catalog list endpoints.

QueryParams is a flat record of optional filters. Encoding is driven by
QUERY_FIELDS: every recognized field has exactly one wire name and one
formatter, and a field is emitted only when it holds a non-default value.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import httpx

Number = int | float | Decimal


# ============================================================================
# Formatters
# ============================================================================


def _format_int(value: int) -> str:
    return str(value)


def _format_str(value: str) -> str:
    return value


def _format_decimal(value: Number) -> str:
    """Render a number with exactly two fractional digits."""
    return f"{value:.2f}"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class QueryField:
    """Mapping of one QueryParams attribute onto its query parameter."""

    attribute: str
    name: str
    formatter: Callable[[Any], str]
    multi: bool = False
    tri_state: bool = False

    def is_set(self, value: Any) -> bool:
        """Check whether a value differs from the field default."""
        if self.tri_state:
            return value is not None
        return bool(value)

    def pairs(self, value: Any) -> list[tuple[str, str]]:
        """Expand a value into (name, rendered value) pairs."""
        if not self.is_set(value):
            return []
        if self.multi:
            return [(self.name, self.formatter(item)) for item in value]
        return [(self.name, self.formatter(value))]


# Declared order of recognized fields
QUERY_FIELDS: tuple[QueryField, ...] = (
    QueryField("page", "page", _format_int),
    QueryField("limit", "limit", _format_int),
    QueryField("direction", "direction", _format_str),
    QueryField("sort", "sort", _format_str),
    QueryField("include", "include", _format_str, multi=True),
    QueryField("id", "id", _format_int, multi=True),
    QueryField("id_in", "id:in", _format_int, multi=True),
    QueryField("id_not_in", "id:not_in", _format_int, multi=True),
    QueryField("id_min", "id:min", _format_int),
    QueryField("id_max", "id:max", _format_int),
    QueryField("id_greater", "id:greater", _format_int),
    QueryField("id_less", "id:less", _format_int),
    QueryField("name", "name", _format_str),
    QueryField("sku", "sku", _format_str),
    QueryField("price", "price", _format_decimal),
    QueryField("price_min", "price:min", _format_decimal),
    QueryField("price_max", "price:max", _format_decimal),
    QueryField("weight", "weight", _format_decimal),
    QueryField("weight_min", "weight:min", _format_decimal),
    QueryField("weight_max", "weight:max", _format_decimal),
    QueryField("condition", "condition", _format_str),
    QueryField("is_visible", "is_visible", _format_bool, tri_state=True),
    QueryField("is_featured", "is_featured", _format_bool, tri_state=True),
    QueryField("category_id", "categories", _format_int, multi=True),
    QueryField("brand_id", "brand_id", _format_int, multi=True),
    QueryField("keyword", "keyword", _format_str),
    QueryField("is_active", "is_active", _format_bool, tri_state=True),
    QueryField("date_created", "date_created", _format_str),
    QueryField("date_modified", "date_modified", _format_str),
)


# ============================================================================
# Query Parameters
# ============================================================================


@dataclass
class QueryParams:
    """Filter, sort and pagination options for list requests.

    Attributes left at their defaults are not sent. The three boolean
    filters are tri-state: None leaves the filter out, False filters on
    false.

    Example usage:
        params = QueryParams(page=2, limit=50, sort="name", direction="asc")
        params.encode()  # "direction=asc&limit=50&page=2&sort=name"
    """

    page: int = 0
    limit: int = 0
    direction: str = ""
    sort: str = ""
    include: list[str] = field(default_factory=list)
    id: list[int] = field(default_factory=list)
    id_in: list[int] = field(default_factory=list)
    id_not_in: list[int] = field(default_factory=list)
    id_min: int = 0
    id_max: int = 0
    id_greater: int = 0
    id_less: int = 0
    name: str = ""
    sku: str = ""
    price: Number = 0
    price_min: Number = 0
    price_max: Number = 0
    weight: Number = 0
    weight_min: Number = 0
    weight_max: Number = 0
    condition: str = ""
    is_visible: bool | None = None
    is_featured: bool | None = None
    category_id: list[int] = field(default_factory=list)
    brand_id: list[int] = field(default_factory=list)
    keyword: str = ""
    is_active: bool | None = None
    date_created: str = ""
    date_modified: str = ""

    def to_pairs(self) -> list[tuple[str, str]]:
        """Get query entries in declared field order.

        Returns:
            List of (parameter name, value) pairs.
        """
        pairs: list[tuple[str, str]] = []
        for query_field in QUERY_FIELDS:
            pairs.extend(query_field.pairs(getattr(self, query_field.attribute)))
        return pairs

    def encode(self) -> str:
        """Encode the parameters as a URL query string.

        Keys are sorted by name; repeated keys keep their list order.

        Returns:
            Percent-encoded query string without the leading "?".
        """
        return _encode_pairs(self.to_pairs())


def encode_ids(name: str, ids: Iterable[int]) -> str:
    """Encode a repeated integer parameter, one entry per id.

    Args:
        name: Query parameter name (e.g. "id:in").
        ids: Identifiers in the order they should be sent.

    Returns:
        Percent-encoded query string.
    """
    return _encode_pairs([(name, _format_int(i)) for i in ids])


def _encode_pairs(pairs: Sequence[tuple[str, str]]) -> str:
    ordered = sorted(pairs, key=lambda pair: pair[0])
    return str(httpx.QueryParams(ordered))
