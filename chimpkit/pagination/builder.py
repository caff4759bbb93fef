"""Per-resource builders used by the paginating iterator.

A builder adapts one raw record of a page into the value handed to the
caller (usually a resource bound to the API handle) and knows how to move a
filter to the next page.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import is_dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..core.exceptions import ResourceIdentityError
from .filters import ResourceFilter

if TYPE_CHECKING:
    from ..runtime.rest.transport import RESTTransport
    from .collection import Collection

ItemT = TypeVar("ItemT")
ResourceT = TypeVar("ResourceT")
FilterT = TypeVar("FilterT", bound=ResourceFilter)


def item_endpoint(endpoint: str, item_id: Any, *, id_field: str = "id") -> str:
    """Join ``item_id`` onto ``endpoint``.

    Raises:
        ResourceIdentityError: If ``item_id`` is None or empty
    """
    if item_id is None or item_id == "":
        raise ResourceIdentityError(endpoint, id_field)
    return f"{endpoint}/{item_id}"


def _split_fields(value: str | None) -> list[str]:
    return [name.strip() for name in (value or "").split(",") if name.strip()]


class ResourceBuilder(ABC, Generic[ItemT, ResourceT]):
    """Adapts raw records into resource values."""

    @abstractmethod
    def build(self, item: ItemT, api: RESTTransport, endpoint: str) -> ResourceT:
        """Bind ``item`` to ``api``; ``endpoint`` is the collection it came from."""
        pass

    def prepare(self, filter: FilterT, collection_model: type[Collection]) -> FilterT:
        """Adjust the first filter before the listing call. Override if needed."""
        return filter

    def advance(self, filter: FilterT) -> FilterT:
        """Return the filter for the page after ``filter``. Override if needed."""
        return filter.advance()


class ModelBuilder(ResourceBuilder[ItemT, ItemT]):
    """Yields records unchanged, for resources with no further calls."""

    def build(self, item: ItemT, api: RESTTransport, endpoint: str) -> ItemT:
        return item


class ResourceClassBuilder(ResourceBuilder[Any, ResourceT]):
    """Wraps each record in ``resource_cls(api, item, item_endpoint)``.

    The item endpoint defaults to the collection endpoint joined with the
    record's ``id_field``; pass ``endpoint_for`` to compute it differently.
    A record without that field raises :class:`ResourceIdentityError`, so
    field selections are widened to always return it.
    """

    def __init__(
        self,
        resource_cls: Callable[[RESTTransport, Any, str], ResourceT],
        *,
        id_field: str = "id",
        endpoint_for: Callable[[str, Any], str] | None = None,
    ) -> None:
        self.resource_cls = resource_cls
        self.id_field = id_field
        self.endpoint_for = endpoint_for

    def prepare(self, filter: FilterT, collection_model: type[Collection]) -> FilterT:
        items_field = getattr(collection_model, "items_field", None)
        if self.endpoint_for is not None or not items_field or not is_dataclass(filter):
            return filter

        id_path = f"{items_field}.{self.id_field}"
        changes: dict[str, str | None] = {}
        fields = _split_fields(getattr(filter, "fields", None))
        if fields and id_path not in fields and items_field not in fields:
            changes["fields"] = ",".join([*fields, id_path])
        excluded = _split_fields(getattr(filter, "exclude_fields", None))
        if id_path in excluded:
            changes["exclude_fields"] = ",".join(f for f in excluded if f != id_path) or None
        return replace(filter, **changes) if changes else filter

    def build(self, item: Any, api: RESTTransport, endpoint: str) -> ResourceT:
        if self.endpoint_for is not None:
            endpoint = self.endpoint_for(endpoint, item)
        else:
            endpoint = item_endpoint(
                endpoint, getattr(item, self.id_field, None), id_field=self.id_field
            )
        return self.resource_cls(api, item, endpoint)
