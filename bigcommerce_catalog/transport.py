"""Transport core for the BigCommerce catalog API.

Builds authenticated requests against the store's versioned base URL,
performs one HTTP exchange per call and turns the response into either a
decoded value or a CatalogClientError subclass. Nothing is retried and
nothing is swallowed: every failure goes back to the caller.
"""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, BinaryIO, TypeVar, overload

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from bigcommerce_catalog.exceptions import (
    APIError,
    DecodingError,
    EncodingError,
    TransportError,
    URLError,
)
from bigcommerce_catalog.models.envelope import ErrorBody
from bigcommerce_catalog.query import QueryParams

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_API_ROOT = "https://api.bigcommerce.com"
API_VERSION = "v3"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "bigcommerce-catalog-python/0.1.0"
AUTH_HEADER = "X-Auth-Token"


# ============================================================================
# Client Configuration
# ============================================================================


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings shared by every service.

    Attributes:
        store_hash: Store identifier from the API account.
        auth_token: API account access token.
        api_root: Scheme and host of the API.
        api_version: Version path segment.
        user_agent: User-Agent sent with every request.
        timeout: Per-request timeout in seconds.
        base_url: <api_root>/stores/<store_hash>/<api_version>/, derived once.
    """

    store_hash: str
    auth_token: str = field(repr=False)
    api_root: str = DEFAULT_API_ROOT
    api_version: str = API_VERSION
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    base_url: httpx.URL = field(init=False, repr=False)

    def __post_init__(self) -> None:
        raw = f"{self.api_root.rstrip('/')}/stores/{self.store_hash}/{self.api_version}/"
        try:
            base_url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise URLError(raw, str(exc)) from exc
        object.__setattr__(self, "base_url", base_url)


# ============================================================================
# Body Encoding / Decoding
# ============================================================================


def _to_jsonable(value: Any) -> Any:
    """Convert models (and containers of models) to plain JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON.

    Args:
        body: Model, list of models, or JSON-compatible data.

    Returns:
        UTF-8 encoded JSON document.

    Raises:
        EncodingError: If the body cannot be represented as JSON.
    """
    try:
        return json.dumps(_to_jsonable(body), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc


@lru_cache(maxsize=None)
def _adapter(into: Any) -> TypeAdapter[Any]:
    return TypeAdapter(into)


# ============================================================================
# Transport
# ============================================================================


class CatalogTransport:
    """Executes authenticated exchanges with the catalog API.

    Holds no per-call state; one instance can serve concurrent tasks.

    Example usage:
        transport = CatalogTransport(ClientConfig("abc123", "token"))
        request = transport.build_request("GET", "catalog/brands")
        brands = await transport.send(request, Envelope[list[Brand]])
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Connection settings.
            transport: Optional httpx transport (used to fake the API in tests).
        """
        self.config = config
        self._client = httpx.AsyncClient(timeout=config.timeout, transport=transport)

    async def close(self) -> None:
        """Release pooled connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "CatalogTransport":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: QueryParams | str | None = None,
    ) -> httpx.Request:
        """Build an authenticated request.

        Args:
            method: HTTP method.
            path: Path relative to the versioned base URL.
            body: Optional JSON body.
            params: Optional query parameters or pre-encoded query string.

        Returns:
            Request ready to send.

        Raises:
            URLError: If the path cannot be resolved against the base URL.
            EncodingError: If the body cannot be serialized.
        """
        try:
            url = self.config.base_url.join(path)
        except httpx.InvalidURL as exc:
            raise URLError(path, str(exc)) from exc

        content = encode_body(body) if body is not None else None

        query = params.encode() if isinstance(params, QueryParams) else params

        return self._client.build_request(
            method,
            url,
            params=query or None,
            content=content,
            headers={
                AUTH_HEADER: self.config.auth_token,
                "User-Agent": self.config.user_agent,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    @overload
    async def send(self, request: httpx.Request, into: None = None) -> None: ...

    @overload
    async def send(self, request: httpx.Request, into: type[T]) -> T: ...

    async def send(self, request: httpx.Request, into: Any = None) -> Any:
        """Send a request and decode the JSON response.

        Args:
            request: Request from build_request.
            into: Type to validate the body into; None discards the body.

        Returns:
            Decoded value, or None when into is None.

        Raises:
            TransportError: If no response was received.
            APIError: If the status is outside 200-299.
            DecodingError: If the body does not match into.
        """
        async with self._exchange(request) as response:
            content = await response.aread()

        if into is None:
            return None

        try:
            return _adapter(into).validate_json(content)
        except ValidationError as exc:
            raise DecodingError(
                request.method, str(request.url), response.status_code, str(exc)
            ) from exc

    async def send_raw(self, request: httpx.Request, sink: BinaryIO) -> int:
        """Send a request and copy the response body verbatim into a sink.

        Args:
            request: Request from build_request.
            sink: Writable binary stream.

        Returns:
            Number of bytes written.

        Raises:
            TransportError: If no response was received.
            APIError: If the status is outside 200-299.
            DecodingError: If the body fails content decoding.
        """
        written = 0
        async with self._exchange(request) as response:
            async for chunk in response.aiter_bytes():
                sink.write(chunk)
                written += len(chunk)
        return written

    @asynccontextmanager
    async def _exchange(self, request: httpx.Request) -> AsyncIterator[httpx.Response]:
        """Send a request and yield a successful streaming response.

        The response is closed on every exit path.
        """
        logger.debug(
            "Sending catalog API request",
            method=request.method,
            url=str(request.url),
        )

        try:
            response = await self._client.send(request, stream=True)
        except httpx.TransportError as e:
            raise TransportError(request.method, str(request.url), _reason(e)) from e

        try:
            logger.debug(
                "Received catalog API response",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
            )
            if not response.is_success:
                await self._raise_api_error(request, response)
            yield response
        except httpx.TransportError as e:
            raise TransportError(request.method, str(request.url), _reason(e)) from e
        except httpx.DecodingError as e:
            raise DecodingError(
                request.method, str(request.url), response.status_code, str(e)
            ) from e
        finally:
            await response.aclose()

    async def _raise_api_error(
        self, request: httpx.Request, response: httpx.Response
    ) -> None:
        """Decode an error response and raise it as APIError."""
        body = await response.aread()

        error = ErrorBody()
        if body:
            try:
                error = ErrorBody.model_validate_json(body)
            except ValidationError as exc:
                raise DecodingError(
                    request.method, str(request.url), response.status_code, str(exc)
                ) from exc

        raise APIError(
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            title=error.title,
            error_type=error.type,
            errors=error.errors,
            status=error.status or None,
        )


def _reason(error: Exception) -> str:
    return str(error) or type(error).__name__
