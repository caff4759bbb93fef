"""Authorized application models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class AuthorizedApp(ApiModel):
    """A registered, connected application."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    users: list[str] = Field(default_factory=list)


class AuthorizedAppsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "apps"

    apps: list[AuthorizedApp] = Field(default_factory=list)


class CreatedAuthorizedApp(ApiModel):
    """OAuth2 credentials issued when linking an application."""

    access_token: str | None = None
    viewer_token: str | None = None
