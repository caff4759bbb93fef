"""Campaign report models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class Report(ApiModel):
    """Sending statistics of a campaign. ``id`` is the campaign id."""

    id: str | None = None
    campaign_title: str | None = None
    type: str | None = None
    list_id: str | None = None
    list_name: str | None = None
    subject_line: str | None = None
    emails_sent: int | None = None
    abuse_reports: int | None = None
    unsubscribed: int | None = None
    send_time: str | None = None
    bounces: dict[str, Any] | None = None
    opens: dict[str, Any] | None = None
    clicks: dict[str, Any] | None = None


class ReportsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "reports"

    reports: list[Report] = Field(default_factory=list)
