"""Authorized apps endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import AuthorizedApp, AuthorizedAppsCollection, CreatedAuthorizedApp
from ..pagination import ModelBuilder, PaginatedIterator, SimpleFilter
from .base import Endpoint, field_params


@dataclass(frozen=True, kw_only=True)
class AuthorizedAppsFilter(SimpleFilter):
    """Paging and field selection only; the endpoint has no other filters."""

    pass


class AuthorizedApps(Endpoint):
    """Applications connected to the account."""

    path = "authorized-apps"

    async def iter(
        self, filter: AuthorizedAppsFilter | None = None
    ) -> PaginatedIterator[AuthorizedApp, AuthorizedApp, AuthorizedAppsFilter]:
        return await self._iterate(
            ModelBuilder(), AuthorizedAppsCollection, filter or AuthorizedAppsFilter()
        )

    async def get(
        self, app_id: int, fields: str | None = None, exclude_fields: str | None = None
    ) -> AuthorizedApp:
        return await self.api.get(
            self._item_endpoint(app_id), AuthorizedApp, field_params(fields, exclude_fields)
        )

    async def link(self, client_id: str, client_secret: str) -> CreatedAuthorizedApp:
        """Retrieve OAuth2 tokens for a registered application."""
        return await self.api.post(
            self.path,
            CreatedAuthorizedApp,
            {"client_id": client_id, "client_secret": client_secret},
        )
