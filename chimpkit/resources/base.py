"""Base classes for endpoint groups and bound resources.

Architecture:
    An ``Endpoint`` groups the calls of one top-level collection (``lists``,
    ``campaigns``...) and holds the shared RESTTransport handle. A ``Resource``
    is one record of such a collection, bound to the same handle and to its
    own endpoint (``lists/{id}``), so it can issue further calls.

Design Decisions:
    - Shared handle: many resources reference one transport; none of them
      owns or closes it
    - Resources expose their model's fields as attributes and keep the model
      itself in ``data``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from ..pagination import (
    PaginatedIterator,
    ResourceBuilder,
    ResourceFilter,
    SimpleFilter,
    item_endpoint,
)
from ..pagination.collection import Collection

if TYPE_CHECKING:
    from ..runtime.rest.transport import RESTTransport

ModelT = TypeVar("ModelT", bound=BaseModel)
ItemT = TypeVar("ItemT")
ResourceT = TypeVar("ResourceT")
FilterT = TypeVar("FilterT", bound=ResourceFilter)


def field_params(
    fields: str | None = None, exclude_fields: str | None = None
) -> dict[str, str]:
    """Query params selecting which fields a single-record GET returns."""
    return SimpleFilter(
        fields=fields, exclude_fields=exclude_fields, count=None, offset=None
    ).build_payload()


class Resource(Generic[ModelT]):
    """A record bound to the API handle and its own endpoint."""

    def __init__(self, api: RESTTransport, data: ModelT, endpoint: str) -> None:
        self._api = api
        self._data = data
        self._endpoint = endpoint

    @property
    def api(self) -> RESTTransport:
        return self._api

    @property
    def data(self) -> ModelT:
        return self._data

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the resource itself
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._data, name)

    def _child_endpoint(
        self, path: str, child_id: str | int | None, id_field: str = "id"
    ) -> str:
        """Endpoint of one record of the nested collection ``path``."""
        return item_endpoint(f"{self._endpoint}/{path}", child_id, id_field=id_field)

    async def refresh(self) -> None:
        """Reload ``data`` from the resource's endpoint."""
        self._data = await self._api.get(self._endpoint, type(self._data))

    async def _iterate(
        self,
        path: str,
        builder: ResourceBuilder[ItemT, ResourceT],
        collection_model: type[Collection],
        filter: FilterT,
    ) -> PaginatedIterator[ItemT, ResourceT, FilterT]:
        return await PaginatedIterator.open(
            self._api, builder, f"{self._endpoint}/{path}", collection_model, filter
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._endpoint == other._endpoint and self._data == other._data

    def __hash__(self) -> int:
        return hash(self._endpoint)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._endpoint!r})"


class Endpoint:
    """Calls of one top-level collection of the API."""

    path: ClassVar[str] = ""

    def __init__(self, api: RESTTransport) -> None:
        self._api = api

    @property
    def api(self) -> RESTTransport:
        return self._api

    def _item_endpoint(self, item_id: str | int | None) -> str:
        return item_endpoint(self.path, item_id)

    async def _iterate(
        self,
        builder: ResourceBuilder[ItemT, ResourceT],
        collection_model: type[Collection],
        filter: FilterT,
    ) -> PaginatedIterator[ItemT, ResourceT, FilterT]:
        return await PaginatedIterator.open(
            self._api, builder, self.path, collection_model, filter
        )
