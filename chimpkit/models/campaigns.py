"""Campaign models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class Campaign(ApiModel):
    id: str | None = None
    web_id: int | None = None
    type: str | None = None
    create_time: str | None = None
    archive_url: str | None = None
    status: str | None = None
    emails_sent: int | None = None
    send_time: str | None = None
    content_type: str | None = None
    recipients: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None


class CampaignsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "campaigns"

    campaigns: list[Campaign] = Field(default_factory=list)


class CampaignParams(ApiModel):
    """Body for creating or updating a campaign."""

    type: str | None = None
    recipients: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None
    variate_settings: dict[str, Any] | None = None
    tracking: dict[str, Any] | None = None
    rss_opts: dict[str, Any] | None = None
    social_card: dict[str, Any] | None = None


class CampaignContent(ApiModel):
    plain_text: str | None = None
    html: str | None = None
    archive_html: str | None = None
    variate_contents: list[dict[str, Any]] | None = None


class CampaignContentParams(ApiModel):
    """Body for setting campaign content."""

    plain_text: str | None = None
    html: str | None = None
    url: str | None = None
    template: dict[str, Any] | None = None
    archive: dict[str, Any] | None = None


class SendChecklist(ApiModel):
    """Readiness review for a campaign."""

    is_ready: bool | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)


class ScheduleParams(ApiModel):
    schedule_time: str
    timewarp: bool | None = None
    batch_delivery: dict[str, int] | None = None


class SendTestParams(ApiModel):
    test_emails: list[str]
    send_type: str = "html"


class CampaignFeedback(ApiModel):
    feedback_id: int | None = None
    parent_id: int | None = None
    block_id: int | None = None
    message: str | None = None
    is_complete: bool | None = None
    created_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    source: str | None = None
    campaign_id: str | None = None


class CampaignFeedbackCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "feedback"

    campaign_id: str | None = None
    feedback: list[CampaignFeedback] = Field(default_factory=list)


class CampaignFeedbackParams(ApiModel):
    message: str | None = None
    block_id: int | None = None
    is_complete: bool | None = None
