"""Landing page models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class LandingPage(ApiModel):
    id: str | None = None
    web_id: int | None = None
    name: str | None = None
    title: str | None = None
    description: str | None = None
    template_id: int | None = None
    status: str | None = None
    list_id: str | None = None
    store_id: str | None = None
    published_at: str | None = None
    unpublished_at: str | None = None
    url: str | None = None


class LandingPagesCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "landing_pages"

    landing_pages: list[LandingPage] = Field(default_factory=list)


class LandingPageParams(ApiModel):
    """Body for creating or updating a landing page."""

    name: str | None = None
    title: str | None = None
    description: str | None = None
    store_id: str | None = None
    list_id: str | None = None
    type: str | None = None
    template_id: int | None = None
    tracking: dict[str, Any] | None = None
