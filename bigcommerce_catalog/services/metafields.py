"""Metafields attached to any catalog resource."""

from bigcommerce_catalog.models import Envelope, Metafield
from bigcommerce_catalog.query import QueryParams
from bigcommerce_catalog.services.base import CatalogService


class MetafieldsService(CatalogService):
    """Metafields at catalog/{resource_type}/{resource_id}/metafields.

    resource_type is the plural collection name the metafields hang off,
    e.g. "products", "categories" or "brands".
    """

    def _path(self, resource_type: str, resource_id: int, *ids: int) -> str:
        parts = [f"catalog/{resource_type}/{resource_id}/metafields"]
        parts.extend(str(i) for i in ids)
        return "/".join(parts)

    async def get(
        self, resource_type: str, resource_id: int, metafield_id: int
    ) -> Envelope[Metafield]:
        return await self._call(
            "GET",
            self._path(resource_type, resource_id, metafield_id),
            Envelope[Metafield],
        )

    async def create(
        self, resource_type: str, resource_id: int, metafield: Metafield
    ) -> Envelope[Metafield]:
        """Attach a metafield to a resource.

        Args:
            resource_type: Collection name, e.g. "products".
            resource_id: Id of the owning record.
            metafield: Metafield to create; key, value, namespace and
                permission are required by the API.

        Returns:
            Envelope with the created metafield.
        """
        return await self._call(
            "POST",
            self._path(resource_type, resource_id),
            Envelope[Metafield],
            body=metafield,
        )

    async def update(
        self,
        resource_type: str,
        resource_id: int,
        metafield_id: int,
        metafield: Metafield,
    ) -> Envelope[Metafield]:
        return await self._call(
            "PUT",
            self._path(resource_type, resource_id, metafield_id),
            Envelope[Metafield],
            body=metafield,
        )

    async def delete(
        self, resource_type: str, resource_id: int, metafield_id: int
    ) -> None:
        await self._call(
            "DELETE", self._path(resource_type, resource_id, metafield_id)
        )

    async def list(
        self,
        resource_type: str,
        resource_id: int,
        params: QueryParams | None = None,
    ) -> Envelope[list[Metafield]]:
        """List the metafields of a resource."""
        return await self._call(
            "GET",
            self._path(resource_type, resource_id),
            Envelope[list[Metafield]],
            params=params,
        )
