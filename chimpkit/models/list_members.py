"""Per-member sub-resources: notes, tags, goals and activity."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class MemberNote(ApiModel):
    id: int | None = None
    note: str | None = None
    created_at: str | None = None
    created_by: str | None = None
    updated_at: str | None = None
    list_id: str | None = None
    email_id: str | None = None


class MemberNotesCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "notes"

    email_id: str | None = None
    list_id: str | None = None
    notes: list[MemberNote] = Field(default_factory=list)


class MemberNoteParams(ApiModel):
    note: str


class MemberTag(ApiModel):
    id: int | None = None
    name: str | None = None
    date_added: str | None = None


class MemberTagsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "tags"

    tags: list[MemberTag] = Field(default_factory=list)


class MemberTagUpdate(ApiModel):
    """``status`` is ``active`` to add the tag or ``inactive`` to remove it."""

    name: str
    status: str = "active"


class MemberTagsParams(ApiModel):
    tags: list[MemberTagUpdate]
    is_syncing: bool | None = None


class MemberGoal(ApiModel):
    goal_id: int | None = None
    event: str | None = None
    last_visited_at: str | None = None
    data: str | None = None


class MemberGoalsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "goals"

    email_id: str | None = None
    list_id: str | None = None
    goals: list[MemberGoal] = Field(default_factory=list)


class MemberActivity(ApiModel):
    action: str | None = None
    timestamp: str | None = None
    url: str | None = None
    type: str | None = None
    campaign_id: str | None = None
    title: str | None = None
    parent_campaign: str | None = None


class MemberActivityCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "activity"

    email_id: str | None = None
    list_id: str | None = None
    activity: list[MemberActivity] = Field(default_factory=list)
