"""Campaigns endpoint: listing, actions, content and feedback."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    Campaign,
    CampaignContent,
    CampaignContentParams,
    CampaignFeedback,
    CampaignFeedbackCollection,
    CampaignFeedbackParams,
    CampaignParams,
    CampaignsCollection,
    EmptyResponse,
    ScheduleParams,
    SendChecklist,
    SendTestParams,
)
from ..pagination import PaginatedIterator, ResourceClassBuilder, SimpleFilter, item_endpoint
from .base import Endpoint, Resource, field_params


@dataclass(frozen=True, kw_only=True)
class CampaignFilter(SimpleFilter):
    """Filter for ``GET /campaigns``. Times use ISO 8601."""

    type: str | None = None
    status: str | None = None
    before_send_time: str | None = None
    since_send_time: str | None = None
    before_create_time: str | None = None
    since_create_time: str | None = None
    list_id: str | None = None
    folder_id: str | None = None
    member_id: str | None = None
    sort_field: str | None = None
    sort_dir: str | None = None


class CampaignFeedbackResource(Resource[CampaignFeedback]):
    """A feedback comment bound to ``campaigns/{id}/feedback/{feedback_id}``."""

    async def update(self, params: CampaignFeedbackParams) -> CampaignFeedbackResource:
        data = await self.api.patch(self.endpoint, CampaignFeedback, params)
        return CampaignFeedbackResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)


class CampaignResource(Resource[Campaign]):
    """A campaign bound to the API."""

    # Actions

    async def cancel_send(self) -> None:
        """Cancel a regular or plain-text campaign after sending started."""
        await self._action("cancel-send")

    async def create_resend(self) -> CampaignResource:
        """Create a resend to non-openers of this campaign."""
        return await self._copy("create-resend")

    async def pause(self) -> None:
        """Pause an RSS-driven campaign."""
        await self._action("pause")

    async def resume(self) -> None:
        """Resume an RSS-driven campaign."""
        await self._action("resume")

    async def replicate(self) -> CampaignResource:
        return await self._copy("replicate")

    async def schedule(self, params: ScheduleParams) -> None:
        await self._action("schedule", params)

    async def unschedule(self) -> None:
        await self._action("unschedule")

    async def send(self) -> None:
        """Send now; RSS campaigns follow their schedule instead."""
        await self._action("send")

    async def send_test_email(self, params: SendTestParams) -> None:
        await self._action("test", params)

    # CRUD

    async def update(self, params: CampaignParams) -> CampaignResource:
        data = await self.api.patch(self.endpoint, Campaign, params)
        return CampaignResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)

    # Content

    async def get_content(
        self, fields: str | None = None, exclude_fields: str | None = None
    ) -> CampaignContent:
        return await self.api.get(
            f"{self.endpoint}/content", CampaignContent, field_params(fields, exclude_fields)
        )

    async def set_content(self, params: CampaignContentParams) -> CampaignContent:
        return await self.api.put(f"{self.endpoint}/content", CampaignContent, params)

    async def get_send_checklist(self) -> SendChecklist:
        return await self.api.get(f"{self.endpoint}/send-checklist", SendChecklist)

    # Feedback

    async def iter_feedback(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[CampaignFeedback, CampaignFeedbackResource, SimpleFilter]:
        return await self._iterate(
            "feedback",
            ResourceClassBuilder(CampaignFeedbackResource, id_field="feedback_id"),
            CampaignFeedbackCollection,
            filter or SimpleFilter(),
        )

    async def get_feedback(self, feedback_id: int) -> CampaignFeedbackResource:
        endpoint = self._child_endpoint("feedback", feedback_id, "feedback_id")
        data = await self.api.get(endpoint, CampaignFeedback)
        return CampaignFeedbackResource(self.api, data, endpoint)

    async def create_feedback(self, params: CampaignFeedbackParams) -> CampaignFeedbackResource:
        data = await self.api.post(f"{self.endpoint}/feedback", CampaignFeedback, params)
        endpoint = self._child_endpoint("feedback", data.feedback_id, "feedback_id")
        return CampaignFeedbackResource(self.api, data, endpoint)

    async def _action(self, name: str, payload: object = None) -> None:
        await self.api.post(f"{self.endpoint}/actions/{name}", EmptyResponse, payload)

    async def _copy(self, name: str) -> CampaignResource:
        data = await self.api.post(f"{self.endpoint}/actions/{name}", Campaign)
        return CampaignResource(self.api, data, item_endpoint(Campaigns.path, data.id))


class Campaigns(Endpoint):
    """Create, list and manage campaigns."""

    path = "campaigns"

    async def iter(
        self, filter: CampaignFilter | None = None
    ) -> PaginatedIterator[Campaign, CampaignResource, CampaignFilter]:
        return await self._iterate(
            ResourceClassBuilder(CampaignResource), CampaignsCollection, filter or CampaignFilter()
        )

    async def get(
        self, campaign_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> CampaignResource:
        endpoint = self._item_endpoint(campaign_id)
        data = await self.api.get(endpoint, Campaign, field_params(fields, exclude_fields))
        return CampaignResource(self.api, data, endpoint)

    async def create(self, params: CampaignParams) -> CampaignResource:
        data = await self.api.post(self.path, Campaign, params)
        return CampaignResource(self.api, data, self._item_endpoint(data.id))
