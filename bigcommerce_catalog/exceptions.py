"""Catalog client exceptions.

Every failure of a catalog API call is raised as a subclass of
CatalogClientError so callers can decide, per error type, whether to
retry, log, or abort. The client itself never retries.
"""

from typing import Any


class CatalogClientError(Exception):
    """Base class for all catalog client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog client error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Request Construction Errors
# ============================================================================


class URLError(CatalogClientError):
    """Raised when a relative path cannot be resolved against the base URL."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Invalid request path {path!r}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path


class EncodingError(CatalogClientError):
    """Raised when a request body cannot be serialized to JSON."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Could not encode request body: {reason}",
            details={"reason": reason},
        )


# ============================================================================
# Exchange Errors
# ============================================================================


class TransportError(CatalogClientError):
    """Raised when the HTTP exchange fails before a response is received.

    Connection refused, timeouts and TLS failures end up here. The
    request may be reissued by the caller.
    """

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(
            f"{method} {url}: request failed: {reason}",
            details={"method": method, "url": url, "reason": reason},
        )
        self.method = method
        self.url = url


class APIError(CatalogClientError):
    """Raised when the API answers with a status outside 200-299.

    Carries the failed request's method and URL together with the
    decoded error envelope.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        title: str = "",
        error_type: str = "",
        errors: list[str] | None = None,
        status: int | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            method: HTTP method of the failed request.
            url: Absolute URL of the failed request.
            status_code: HTTP status code of the response.
            title: Error title from the response body.
            error_type: Error type URI from the response body.
            errors: Detail messages from the response body.
            status: Status reported inside the response body, if any.
        """
        self.method = method
        self.url = url
        self.status_code = status_code
        self.title = title
        self.error_type = error_type
        self.errors = list(errors or [])
        self.status = status if status is not None else status_code
        super().__init__(
            f"{method} {url}: {status_code} {title} - {self.errors}",
            details={
                "method": method,
                "url": url,
                "status_code": status_code,
                "title": title,
                "type": error_type,
                "errors": self.errors,
            },
        )

    @property
    def retryable(self) -> bool:
        """Whether the status usually indicates a transient failure."""
        return self.status_code == 429 or self.status_code >= 500


class DecodingError(CatalogClientError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(self, method: str, url: str, status_code: int, reason: str) -> None:
        super().__init__(
            f"{method} {url}: could not decode {status_code} response: {reason}",
            details={
                "method": method,
                "url": url,
                "status_code": status_code,
                "reason": reason,
            },
        )
        self.method = method
        self.url = url
        self.status_code = status_code


# ============================================================================
# Seeding Errors
# ============================================================================


class SeedingError(CatalogClientError):
    """Raised when a step the rest of a seeding run depends on fails."""

    def __init__(self, step: str, cause: CatalogClientError) -> None:
        super().__init__(
            f"Seeding aborted while creating {step}: {cause.message}",
            details={"step": step, **cause.details},
        )
        self.step = step
