"""Product options and modifiers, each with their own value collection."""

from bigcommerce_catalog.models import Envelope, Modifier, OptionValue, ProductOption
from bigcommerce_catalog.query import QueryParams
from bigcommerce_catalog.services.base import ProductResourceService, RecordT


class ValuesMixin(ProductResourceService[RecordT]):
    """Adds .../{parent_id}/values endpoints to an options-like resource."""

    async def list_values(
        self,
        product_id: int,
        parent_id: int,
        params: QueryParams | None = None,
    ) -> Envelope[list[OptionValue]]:
        """List the values of an option or modifier.

        Args:
            product_id: Product id.
            parent_id: Option or modifier id.
            params: Optional filters, sorting and pagination.

        Returns:
            Envelope with the page of values.
        """
        return await self._call(
            "GET",
            self._path(product_id, parent_id) + "/values",
            Envelope[list[OptionValue]],
            params=params,
        )

    async def get_value(
        self, product_id: int, parent_id: int, value_id: int
    ) -> Envelope[OptionValue]:
        return await self._call(
            "GET",
            self._path(product_id, parent_id) + f"/values/{value_id}",
            Envelope[OptionValue],
        )

    async def create_value(
        self, product_id: int, parent_id: int, value: OptionValue
    ) -> Envelope[OptionValue]:
        return await self._call(
            "POST",
            self._path(product_id, parent_id) + "/values",
            Envelope[OptionValue],
            body=value,
        )

    async def update_value(
        self, product_id: int, parent_id: int, value_id: int, value: OptionValue
    ) -> Envelope[OptionValue]:
        return await self._call(
            "PUT",
            self._path(product_id, parent_id) + f"/values/{value_id}",
            Envelope[OptionValue],
            body=value,
        )

    async def delete_value(self, product_id: int, parent_id: int, value_id: int) -> None:
        await self._call(
            "DELETE", self._path(product_id, parent_id) + f"/values/{value_id}"
        )


class OptionsService(ValuesMixin[ProductOption]):
    """Variant options; their values are what variants are built from."""

    resource = "options"
    model = ProductOption


class ModifiersService(ValuesMixin[Modifier]):
    resource = "modifiers"
    model = Modifier
