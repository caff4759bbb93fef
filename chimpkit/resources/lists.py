"""Lists (audiences) endpoint and the calls nested under one list."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    AbuseReport,
    AbuseReportsCollection,
    BatchMembersParams,
    BatchMembersResult,
    EmptyResponse,
    GrowthHistory,
    GrowthHistoryCollection,
    InterestCategoriesCollection,
    InterestCategory,
    InterestCategoryParams,
    ListActivity,
    ListActivityCollection,
    ListClientsCollection,
    ListLocationsCollection,
    ListMember,
    ListMemberParams,
    ListMembersCollection,
    ListParams,
    ListsCollection,
    ListWebhook,
    ListWebhookParams,
    ListWebhooksCollection,
    MailingList,
    MergeField,
    MergeFieldParams,
    MergeFieldsCollection,
    Segment,
    SegmentParams,
    SegmentsCollection,
    SignupForm,
    SignupFormParams,
    SignupFormsCollection,
)
from ..pagination import ModelBuilder, PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Endpoint, Resource, field_params
from .list_members import ListMemberResource, member_id
from .list_segments import (
    InterestCategoriesFilter,
    InterestCategoryResource,
    SegmentResource,
    SegmentsFilter,
)


@dataclass(frozen=True, kw_only=True)
class ListFilter(SimpleFilter):
    """Filter for ``GET /lists``. Dates use ISO 8601."""

    before_date_created: str | None = None
    since_date_created: str | None = None
    before_campaign_last_sent: str | None = None
    since_campaign_last_sent: str | None = None
    email: str | None = None
    sort_field: str | None = None
    sort_dir: str | None = None
    has_ecommerce_store: bool | None = None


@dataclass(frozen=True, kw_only=True)
class MembersFilter(SimpleFilter):
    """Filter for ``GET /lists/{list_id}/members``."""

    email_type: str | None = None
    status: str | None = None
    since_timestamp_opt: str | None = None
    before_timestamp_opt: str | None = None
    since_last_changed: str | None = None
    before_last_changed: str | None = None
    unique_email_id: str | None = None
    vip_only: bool | None = None
    interest_category_id: str | None = None
    interest_ids: tuple[str, ...] | None = None
    interest_match: str | None = None
    sort_field: str | None = None
    sort_dir: str | None = None


@dataclass(frozen=True, kw_only=True)
class GrowthHistoryFilter(SimpleFilter):
    sort_field: str | None = None
    sort_dir: str | None = None


class ListWebhookResource(Resource[ListWebhook]):
    async def update(self, params: ListWebhookParams) -> ListWebhookResource:
        data = await self.api.patch(self.endpoint, ListWebhook, params)
        return ListWebhookResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)


class MergeFieldResource(Resource[MergeField]):
    """A merge field bound to ``lists/{list_id}/merge-fields/{merge_id}``."""

    async def update(self, params: MergeFieldParams) -> MergeFieldResource:
        data = await self.api.patch(self.endpoint, MergeField, params)
        return MergeFieldResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)


class ListResource(Resource[MailingList]):
    """A list bound to the API."""

    async def update(self, params: ListParams) -> ListResource:
        data = await self.api.patch(self.endpoint, MailingList, params)
        return ListResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        """Delete the list, including its history and subscribers."""
        await self.api.delete(self.endpoint, EmptyResponse)

    # Members

    async def iter_members(
        self, filter: MembersFilter | None = None
    ) -> PaginatedIterator[ListMember, ListMemberResource, MembersFilter]:
        return await self._iterate(
            "members",
            ResourceClassBuilder(ListMemberResource),
            ListMembersCollection,
            filter or MembersFilter(),
        )

    async def get_member(self, email_or_hash: str) -> ListMemberResource:
        """Get a member by address or by subscriber hash."""
        endpoint = self._member_endpoint(email_or_hash)
        data = await self.api.get(endpoint, ListMember)
        return ListMemberResource(self.api, data, endpoint)

    async def add_member(self, params: ListMemberParams) -> ListMemberResource:
        data = await self.api.post(f"{self.endpoint}/members", ListMember, params)
        return ListMemberResource(self.api, data, self._child_endpoint("members", data.id))

    async def set_member(
        self, email_or_hash: str, params: ListMemberParams
    ) -> ListMemberResource:
        """Add the member, or update it if it already exists."""
        endpoint = self._member_endpoint(email_or_hash)
        data = await self.api.put(endpoint, ListMember, params)
        return ListMemberResource(self.api, data, endpoint)

    async def archive_member(self, email_or_hash: str) -> None:
        await self.api.delete(self._member_endpoint(email_or_hash), EmptyResponse)

    async def batch_members(
        self, members: list[ListMemberParams], update_existing: bool = False
    ) -> BatchMembersResult:
        """Subscribe or update up to 500 members in one call."""
        params = BatchMembersParams(members=members, update_existing=update_existing)
        return await self.api.post(self.endpoint, BatchMembersResult, params)

    # Webhooks

    async def iter_webhooks(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[ListWebhook, ListWebhookResource, SimpleFilter]:
        return await self._iterate(
            "webhooks",
            ResourceClassBuilder(ListWebhookResource),
            ListWebhooksCollection,
            filter or SimpleFilter(),
        )

    async def get_webhook(self, webhook_id: str) -> ListWebhookResource:
        endpoint = self._child_endpoint("webhooks", webhook_id)
        data = await self.api.get(endpoint, ListWebhook)
        return ListWebhookResource(self.api, data, endpoint)

    async def create_webhook(self, params: ListWebhookParams) -> ListWebhookResource:
        data = await self.api.post(f"{self.endpoint}/webhooks", ListWebhook, params)
        return ListWebhookResource(self.api, data, self._child_endpoint("webhooks", data.id))

    async def delete_webhook(self, webhook_id: str) -> None:
        await self.api.delete(self._child_endpoint("webhooks", webhook_id), EmptyResponse)

    # Merge fields

    async def iter_merge_fields(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[MergeField, MergeFieldResource, SimpleFilter]:
        return await self._iterate(
            "merge-fields",
            ResourceClassBuilder(MergeFieldResource, id_field="merge_id"),
            MergeFieldsCollection,
            filter or SimpleFilter(),
        )

    async def get_merge_field(self, merge_id: int) -> MergeFieldResource:
        endpoint = self._child_endpoint("merge-fields", merge_id, "merge_id")
        data = await self.api.get(endpoint, MergeField)
        return MergeFieldResource(self.api, data, endpoint)

    async def create_merge_field(self, params: MergeFieldParams) -> MergeFieldResource:
        data = await self.api.post(f"{self.endpoint}/merge-fields", MergeField, params)
        endpoint = self._child_endpoint("merge-fields", data.merge_id, "merge_id")
        return MergeFieldResource(self.api, data, endpoint)

    # Segments

    async def iter_segments(
        self, filter: SegmentsFilter | None = None
    ) -> PaginatedIterator[Segment, SegmentResource, SegmentsFilter]:
        return await self._iterate(
            "segments",
            ResourceClassBuilder(SegmentResource),
            SegmentsCollection,
            filter or SegmentsFilter(),
        )

    async def get_segment(self, segment_id: int) -> SegmentResource:
        endpoint = self._child_endpoint("segments", segment_id)
        data = await self.api.get(endpoint, Segment)
        return SegmentResource(self.api, data, endpoint)

    async def create_segment(self, params: SegmentParams) -> SegmentResource:
        data = await self.api.post(f"{self.endpoint}/segments", Segment, params)
        return SegmentResource(self.api, data, self._child_endpoint("segments", data.id))

    # Interest categories

    async def iter_interest_categories(
        self, filter: InterestCategoriesFilter | None = None
    ) -> PaginatedIterator[InterestCategory, InterestCategoryResource, InterestCategoriesFilter]:
        return await self._iterate(
            "interest-categories",
            ResourceClassBuilder(InterestCategoryResource),
            InterestCategoriesCollection,
            filter or InterestCategoriesFilter(),
        )

    async def get_interest_category(self, category_id: str) -> InterestCategoryResource:
        endpoint = self._child_endpoint("interest-categories", category_id)
        data = await self.api.get(endpoint, InterestCategory)
        return InterestCategoryResource(self.api, data, endpoint)

    async def create_interest_category(
        self, params: InterestCategoryParams
    ) -> InterestCategoryResource:
        data = await self.api.post(
            f"{self.endpoint}/interest-categories", InterestCategory, params
        )
        endpoint = self._child_endpoint("interest-categories", data.id)
        return InterestCategoryResource(self.api, data, endpoint)

    # Signup forms

    async def iter_signup_forms(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[SignupForm, SignupForm, SimpleFilter]:
        return await self._iterate(
            "signup-forms", ModelBuilder(), SignupFormsCollection, filter or SimpleFilter()
        )

    async def customize_signup_form(self, params: SignupFormParams) -> SignupForm:
        return await self.api.post(f"{self.endpoint}/signup-forms", SignupForm, params)

    # Reports

    async def iter_activity(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[ListActivity, ListActivity, SimpleFilter]:
        """Daily activity of the list, most recent day first."""
        return await self._iterate(
            "activity", ModelBuilder(), ListActivityCollection, filter or SimpleFilter()
        )

    async def get_clients(self) -> ListClientsCollection:
        """Top email clients of the list's members; not paginated."""
        return await self.api.get(f"{self.endpoint}/clients", ListClientsCollection)

    async def get_locations(self) -> ListLocationsCollection:
        """Member counts per country; not paginated."""
        return await self.api.get(f"{self.endpoint}/locations", ListLocationsCollection)

    async def iter_abuse_reports(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[AbuseReport, AbuseReport, SimpleFilter]:
        return await self._iterate(
            "abuse-reports", ModelBuilder(), AbuseReportsCollection, filter or SimpleFilter()
        )

    async def get_abuse_report(self, report_id: int) -> AbuseReport:
        return await self.api.get(self._child_endpoint("abuse-reports", report_id), AbuseReport)

    async def iter_growth_history(
        self, filter: GrowthHistoryFilter | None = None
    ) -> PaginatedIterator[GrowthHistory, GrowthHistory, GrowthHistoryFilter]:
        return await self._iterate(
            "growth-history",
            ModelBuilder(),
            GrowthHistoryCollection,
            filter or GrowthHistoryFilter(),
        )

    async def get_growth_history(self, month: str) -> GrowthHistory:
        """Growth summary of one month, given as ``YYYY-MM``."""
        return await self.api.get(self._child_endpoint("growth-history", month), GrowthHistory)

    def _member_endpoint(self, email_or_hash: str) -> str:
        return self._child_endpoint("members", member_id(email_or_hash))


class Lists(Endpoint):
    """Manage lists and their contacts.

    Example:
        >>> lists = Lists(api)
        >>> async for audience in await lists.iter(ListFilter(count=100)):
        ...     print(audience.id, audience.name)
    """

    path = "lists"

    async def iter(
        self, filter: ListFilter | None = None
    ) -> PaginatedIterator[MailingList, ListResource, ListFilter]:
        return await self._iterate(
            ResourceClassBuilder(ListResource), ListsCollection, filter or ListFilter()
        )

    async def get(
        self, list_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> ListResource:
        endpoint = self._item_endpoint(list_id)
        data = await self.api.get(endpoint, MailingList, field_params(fields, exclude_fields))
        return ListResource(self.api, data, endpoint)

    async def create(self, params: ListParams) -> ListResource:
        data = await self.api.post(self.path, MailingList, params)
        return ListResource(self.api, data, self._item_endpoint(data.id))

