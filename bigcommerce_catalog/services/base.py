"""Base classes for resource services.

A service binds one resource family to the transport: it knows the path
template, the HTTP method of each operation and the record type the
response envelope holds.
"""

from typing import Any, ClassVar, Generic, TypeVar

from bigcommerce_catalog.models.envelope import CatalogModel, Envelope
from bigcommerce_catalog.query import QueryParams
from bigcommerce_catalog.transport import CatalogTransport

RecordT = TypeVar("RecordT", bound=CatalogModel)


class CatalogService:
    """Shared plumbing for every resource service."""

    def __init__(self, transport: CatalogTransport) -> None:
        self._transport = transport

    async def _call(
        self,
        method: str,
        path: str,
        into: Any = None,
        body: Any = None,
        params: QueryParams | str | None = None,
    ) -> Any:
        request = self._transport.build_request(method, path, body=body, params=params)
        return await self._transport.send(request, into)


class CollectionService(CatalogService, Generic[RecordT]):
    """CRUD over a top-level collection such as catalog/brands."""

    path: ClassVar[str]
    model: ClassVar[type[CatalogModel]]

    async def list(self, params: QueryParams | None = None) -> Envelope[list[RecordT]]:
        """List records, one page at a time.

        Args:
            params: Optional filters, sorting and pagination.

        Returns:
            Envelope with the page of records and pagination metadata.
        """
        return await self._call(
            "GET", self.path, Envelope[list[self.model]], params=params
        )

    async def get(
        self, record_id: int, params: QueryParams | None = None
    ) -> Envelope[RecordT]:
        """Get one record by id."""
        return await self._call(
            "GET", f"{self.path}/{record_id}", Envelope[self.model], params=params
        )

    async def create(self, record: RecordT) -> Envelope[RecordT]:
        """Create a record. The returned record carries the assigned id."""
        return await self._call("POST", self.path, Envelope[self.model], body=record)

    async def update(self, record_id: int, record: RecordT) -> Envelope[RecordT]:
        """Update a record; unset fields are left untouched."""
        return await self._call(
            "PUT", f"{self.path}/{record_id}", Envelope[self.model], body=record
        )

    async def delete(self, record_id: int) -> None:
        await self._call("DELETE", f"{self.path}/{record_id}")


class ProductResourceService(CatalogService, Generic[RecordT]):
    """CRUD over a product sub-resource such as catalog/products/{id}/images."""

    resource: ClassVar[str]
    model: ClassVar[type[CatalogModel]]

    def _path(self, product_id: int, *ids: int) -> str:
        parts = [f"catalog/products/{product_id}/{self.resource}"]
        parts.extend(str(i) for i in ids)
        return "/".join(parts)

    async def list(
        self, product_id: int, params: QueryParams | None = None
    ) -> Envelope[list[RecordT]]:
        """List the product's records.

        Args:
            product_id: Parent product id.
            params: Optional filters, sorting and pagination.

        Returns:
            Envelope with the page of records and pagination metadata.
        """
        return await self._call(
            "GET", self._path(product_id), Envelope[list[self.model]], params=params
        )

    async def get(self, product_id: int, record_id: int) -> Envelope[RecordT]:
        return await self._call(
            "GET", self._path(product_id, record_id), Envelope[self.model]
        )

    async def create(self, product_id: int, record: RecordT) -> Envelope[RecordT]:
        return await self._call(
            "POST", self._path(product_id), Envelope[self.model], body=record
        )

    async def update(
        self, product_id: int, record_id: int, record: RecordT
    ) -> Envelope[RecordT]:
        return await self._call(
            "PUT", self._path(product_id, record_id), Envelope[self.model], body=record
        )

    async def delete(self, product_id: int, record_id: int) -> None:
        await self._call("DELETE", self._path(product_id, record_id))
