"""Segments and interest categories of a list."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    EmptyResponse,
    Interest,
    InterestCategory,
    InterestCategoryParams,
    InterestParams,
    InterestsCollection,
    ListMember,
    Segment,
    SegmentBatchParams,
    SegmentBatchResult,
    SegmentMembersCollection,
    SegmentParams,
)
from ..pagination import ModelBuilder, PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Resource
from .list_members import member_id


@dataclass(frozen=True, kw_only=True)
class SegmentsFilter(SimpleFilter):
    """Filter for ``GET /lists/{list_id}/segments``."""

    type: str | None = None
    since_created_at: str | None = None
    before_created_at: str | None = None
    include_cleaned: bool | None = None
    include_transactional: bool | None = None
    include_unsubscribed: bool | None = None
    since_updated_at: str | None = None
    before_updated_at: str | None = None


@dataclass(frozen=True, kw_only=True)
class InterestCategoriesFilter(SimpleFilter):
    type: str | None = None


class SegmentResource(Resource[Segment]):
    """A saved or static segment bound to ``lists/{list_id}/segments/{id}``."""

    async def update(self, params: SegmentParams) -> SegmentResource:
        data = await self.api.patch(self.endpoint, Segment, params)
        return SegmentResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)

    async def iter_members(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[ListMember, ListMember, SimpleFilter]:
        return await self._iterate(
            "members", ModelBuilder(), SegmentMembersCollection, filter or SimpleFilter()
        )

    async def add_member(self, email_address: str) -> ListMember:
        """Add a list member to a static segment."""
        return await self.api.post(
            f"{self.endpoint}/members", ListMember, {"email_address": email_address}
        )

    async def remove_member(self, email_or_hash: str) -> None:
        await self.api.delete(self._child_endpoint("members", member_id(email_or_hash)))

    async def batch_members(
        self, add: list[str] | None = None, remove: list[str] | None = None
    ) -> SegmentBatchResult:
        """Add and remove up to 500 addresses of a static segment in one call."""
        params = SegmentBatchParams(members_to_add=add or [], members_to_remove=remove or [])
        return await self.api.post(self.endpoint, SegmentBatchResult, params)


class InterestResource(Resource[Interest]):
    """One interest (group name) of an interest category."""

    async def update(self, params: InterestParams) -> InterestResource:
        data = await self.api.patch(self.endpoint, Interest, params)
        return InterestResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)


class InterestCategoryResource(Resource[InterestCategory]):
    """An interest category bound to ``lists/{list_id}/interest-categories/{id}``."""

    async def update(self, params: InterestCategoryParams) -> InterestCategoryResource:
        data = await self.api.patch(self.endpoint, InterestCategory, params)
        return InterestCategoryResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)

    async def iter_interests(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[Interest, InterestResource, SimpleFilter]:
        return await self._iterate(
            "interests",
            ResourceClassBuilder(InterestResource),
            InterestsCollection,
            filter or SimpleFilter(),
        )

    async def get_interest(self, interest_id: str) -> InterestResource:
        endpoint = self._child_endpoint("interests", interest_id)
        data = await self.api.get(endpoint, Interest)
        return InterestResource(self.api, data, endpoint)

    async def create_interest(self, params: InterestParams) -> InterestResource:
        data = await self.api.post(f"{self.endpoint}/interests", Interest, params)
        return InterestResource(self.api, data, self._child_endpoint("interests", data.id))
