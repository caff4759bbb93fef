"""Read-only list statistics: activity, clients, locations, abuse and growth."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class ListActivity(ApiModel):
    """One day of list activity."""

    day: str | None = None
    emails_sent: int | None = None
    unique_opens: int | None = None
    recipient_clicks: int | None = None
    hard_bounce: int | None = None
    soft_bounce: int | None = None
    subs: int | None = None
    unsubs: int | None = None
    other_adds: int | None = None
    other_removes: int | None = None


class ListActivityCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "activity"

    list_id: str | None = None
    activity: list[ListActivity] = Field(default_factory=list)


class ListClient(ApiModel):
    """An email client and the members that use it."""

    client: str | None = None
    members: int | None = None


class ListClientsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "clients"

    list_id: str | None = None
    clients: list[ListClient] = Field(default_factory=list)


class ListLocation(ApiModel):
    country: str | None = None
    cc: str | None = None
    percent: float | None = None
    total: int | None = None


class ListLocationsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "locations"

    list_id: str | None = None
    locations: list[ListLocation] = Field(default_factory=list)


class AbuseReport(ApiModel):
    id: int | None = None
    campaign_id: str | None = None
    list_id: str | None = None
    email_id: str | None = None
    email_address: str | None = None
    merge_fields: dict[str, Any] | None = None
    vip: bool | None = None
    date: str | None = None


class AbuseReportsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "abuse_reports"

    list_id: str | None = None
    abuse_reports: list[AbuseReport] = Field(default_factory=list)


class GrowthHistory(ApiModel):
    """Subscriber counts for one month; ``month`` is ``YYYY-MM``."""

    list_id: str | None = None
    month: str | None = None
    existing: int | None = None
    imports: int | None = None
    optins: int | None = None


class GrowthHistoryCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "history"

    list_id: str | None = None
    history: list[GrowthHistory] = Field(default_factory=list)
