"""Lazy, auto-paginating iterator over offset-paginated collections.

Architecture:
    PaginatedIterator holds the records fetched so far, a cursor into them,
    the filter of the last requested page and the server-reported total. Each
    pull hands the next buffered record to a ResourceBuilder, and fetches the
    next page first when the buffer is about to run dry while more records are
    known to exist on the server.

Design Decisions:
    - Pull-based: one ``__anext__`` performs at most one page request; there
      are no background tasks, so abandoning the iterator stops all fetching
    - Immutable filters: every page request uses a new filter produced by the
      builder, so offsets only ever grow
    - Failures are swallowed: a failed or empty page fetch is logged and ends
      the iteration early instead of raising into the caller's loop

Prefetch trigger:
    The next page is requested once ``cursor + 2 >= len(buffer)``. This is a
    saturating form of "cursor reached the second to last record", which stays
    correct for pages of zero or one record. The request is also skipped when
    the buffer already holds ``total_items`` records.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Generic, TypeVar

from ..core.exceptions import MailchimpAPIError
from ..runtime.rest.telemetry import (
    log_listing_failed,
    log_page_fetch_failed,
    log_page_fetched,
)
from .builder import ResourceBuilder
from .collection import Collection
from .filters import ResourceFilter

if TYPE_CHECKING:
    from ..runtime.rest.transport import RESTTransport

ItemT = TypeVar("ItemT")
ResourceT = TypeVar("ResourceT")
FilterT = TypeVar("FilterT", bound=ResourceFilter)

# Records left in the buffer when the next page gets requested
PREFETCH_MARGIN = 2


class PaginatedIterator(AsyncIterator[ResourceT], Generic[ItemT, ResourceT, FilterT]):
    """Async iterator yielding built resources across every page of a collection.

    Not restartable: once exhausted, issue a new listing call to iterate again.
    An instance must not be shared between tasks without external locking.
    """

    def __init__(
        self,
        *,
        api: RESTTransport,
        builder: ResourceBuilder[ItemT, ResourceT],
        endpoint: str,
        collection_model: type[Collection],
        filter: FilterT,
        items: list[ItemT] | None = None,
        total_items: int = 0,
    ) -> None:
        self._api = api
        self._builder = builder
        self._endpoint = endpoint
        self._collection_model = collection_model
        self._filter = filter
        self._buffer: list[ItemT] = list(items or [])
        self._cursor = 0
        self._total_items = total_items
        self._exhausted = False
        self._pages_fetched = 0

    @classmethod
    async def open(
        cls,
        api: RESTTransport,
        builder: ResourceBuilder[ItemT, ResourceT],
        endpoint: str,
        collection_model: type[Collection],
        filter: FilterT,
    ) -> PaginatedIterator[ItemT, ResourceT, FilterT]:
        """Fetch the first page and return an iterator positioned on it.

        The builder may widen ``filter`` first (to keep record identifiers in
        a field selection). A failed first request is logged and yields an
        empty iterator.
        """
        filter = builder.prepare(filter, collection_model)
        try:
            page = await api.get(endpoint, collection_model, filter.build_payload())
        except MailchimpAPIError as e:
            log_listing_failed(endpoint=endpoint, error_message=str(e))
            return cls(
                api=api,
                builder=builder,
                endpoint=endpoint,
                collection_model=collection_model,
                filter=filter,
            )
        return cls(
            api=api,
            builder=builder,
            endpoint=endpoint,
            collection_model=collection_model,
            filter=filter,
            items=page.values(),
            total_items=page.total_items,
        )

    @property
    def api(self) -> RESTTransport:
        return self._api

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def filter(self) -> FilterT:
        """Filter of the most recently fetched page."""
        return self._filter

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    @property
    def pages_fetched(self) -> int:
        """Pages fetched after the initial listing call."""
        return self._pages_fetched

    @property
    def exhausted(self) -> bool:
        """True once a page fetch failed or came back empty."""
        return self._exhausted

    def __aiter__(self) -> PaginatedIterator[ItemT, ResourceT, FilterT]:
        return self

    async def __anext__(self) -> ResourceT:
        if self._should_prefetch():
            await self._fetch_next_page()

        if self._cursor < len(self._buffer):
            item = self._buffer[self._cursor]
            self._cursor += 1
            return self._builder.build(item, self._api, self._endpoint)

        raise StopAsyncIteration

    async def collect(self) -> list[ResourceT]:
        """Consume the remaining records into a list."""
        result: list[ResourceT] = []
        async for resource in self:
            result.append(resource)
        return result

    def _should_prefetch(self) -> bool:
        return (
            not self._exhausted
            and self._cursor + PREFETCH_MARGIN >= len(self._buffer)
            and self._cursor < self._total_items
            and len(self._buffer) < self._total_items
        )

    async def _fetch_next_page(self) -> None:
        next_filter = self._builder.advance(self._filter)
        offset = getattr(next_filter, "offset", None)
        try:
            page = await self._api.get(
                self._endpoint, self._collection_model, next_filter.build_payload()
            )
        except MailchimpAPIError as e:
            log_page_fetch_failed(endpoint=self._endpoint, offset=offset, error_message=str(e))
            self._exhausted = True
            return

        self._filter = next_filter
        self._pages_fetched += 1
        self._total_items = page.total_items
        items = page.values()
        log_page_fetched(
            endpoint=self._endpoint,
            offset=offset,
            items=len(items),
            total_items=self._total_items,
        )
        if not items:
            # Server holds fewer records than it advertised
            self._exhausted = True
            return
        self._buffer.extend(items)

    def __repr__(self) -> str:
        return (
            f"PaginatedIterator(endpoint={self._endpoint!r}, cursor={self._cursor}, "
            f"buffered={len(self._buffer)}, total_items={self._total_items})"
        )
