"""Segment and interest-category models of a list."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope
from .lists import ListMember


class Segment(ApiModel):
    """A saved or static segment (tag) of a list."""

    id: int | None = None
    name: str | None = None
    member_count: int | None = None
    type: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    options: dict[str, Any] | None = None
    list_id: str | None = None


class SegmentsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "segments"

    list_id: str | None = None
    segments: list[Segment] = Field(default_factory=list)


class SegmentParams(ApiModel):
    """Body for creating or updating a segment.

    Pass ``static_segment`` (addresses) for a static segment or ``options``
    (match conditions) for a saved one.
    """

    name: str | None = None
    static_segment: list[str] | None = None
    options: dict[str, Any] | None = None


class SegmentMembersCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "members"

    members: list[ListMember] = Field(default_factory=list)


class SegmentBatchParams(ApiModel):
    members_to_add: list[str] = Field(default_factory=list)
    members_to_remove: list[str] = Field(default_factory=list)


class SegmentBatchResult(ApiModel):
    members_added: list[ListMember] = Field(default_factory=list)
    members_removed: list[ListMember] = Field(default_factory=list)
    errors: list[dict[str, Any]] = Field(default_factory=list)
    total_added: int = 0
    total_removed: int = 0
    error_count: int = 0


class InterestCategory(ApiModel):
    """A group of interests shown on the signup form."""

    id: str | None = None
    list_id: str | None = None
    title: str | None = None
    display_order: int | None = None
    type: str | None = None


class InterestCategoriesCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "categories"

    list_id: str | None = None
    categories: list[InterestCategory] = Field(default_factory=list)


class InterestCategoryParams(ApiModel):
    title: str | None = None
    display_order: int | None = None
    type: str | None = None


class Interest(ApiModel):
    id: str | None = None
    category_id: str | None = None
    list_id: str | None = None
    name: str | None = None
    subscriber_count: str | None = None
    display_order: int | None = None


class InterestsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "interests"

    category_id: str | None = None
    list_id: str | None = None
    interests: list[Interest] = Field(default_factory=list)


class InterestParams(ApiModel):
    name: str | None = None
    display_order: int | None = None
