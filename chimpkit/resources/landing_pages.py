"""Landing pages endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import EmptyResponse, LandingPage, LandingPageParams, LandingPagesCollection
from ..pagination import PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Endpoint, Resource, field_params


@dataclass(frozen=True, kw_only=True)
class LandingPagesFilter(SimpleFilter):
    sort_field: str | None = None
    sort_dir: str | None = None


class LandingPageResource(Resource[LandingPage]):
    """A landing page bound to ``landing-pages/{id}``."""

    async def update(self, params: LandingPageParams) -> LandingPageResource:
        data = await self.api.patch(self.endpoint, LandingPage, params)
        return LandingPageResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)

    async def publish(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/publish", EmptyResponse)

    async def unpublish(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/unpublish", EmptyResponse)


class LandingPages(Endpoint):
    path = "landing-pages"

    async def iter(
        self, filter: LandingPagesFilter | None = None
    ) -> PaginatedIterator[LandingPage, LandingPageResource, LandingPagesFilter]:
        return await self._iterate(
            ResourceClassBuilder(LandingPageResource),
            LandingPagesCollection,
            filter or LandingPagesFilter(),
        )

    async def get(
        self, page_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> LandingPageResource:
        endpoint = self._item_endpoint(page_id)
        data = await self.api.get(endpoint, LandingPage, field_params(fields, exclude_fields))
        return LandingPageResource(self.api, data, endpoint)

    async def create(self, params: LandingPageParams) -> LandingPageResource:
        data = await self.api.post(self.path, LandingPage, params)
        return LandingPageResource(self.api, data, self._item_endpoint(data.id))
