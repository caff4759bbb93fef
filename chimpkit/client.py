"""Mailchimp Marketing API client.

MailchimpClient bundles one RESTTransport with every endpoint group, so all
groups (and the resources they return) share a single session.
"""

from __future__ import annotations

from .core.config import API_VERSION
from .resources import (
    ApiRoot,
    AuthorizedApps,
    Automations,
    Campaigns,
    Conversations,
    LandingPages,
    Lists,
    Reports,
)
from .runtime.rest.requester import HttpRequester
from .runtime.rest.transport import RESTTransport


class MailchimpClient:
    """Entry point for the Marketing API.

    Example:
        >>> async with MailchimpClient("0123456789abcdef-us6") as client:
        ...     info = await client.api_root.get_info()
        ...     async for campaign in await client.campaigns.iter():
        ...         print(campaign.id)
    """

    def __init__(
        self,
        api_key: str,
        requester: HttpRequester | None = None,
        *,
        version: str = API_VERSION,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key in ``{token}-{datacenter}`` form
            requester: HTTP requester; defaults to an aiohttp-backed one
            version: API version segment of the base URL
        """
        self._api = RESTTransport.configure(api_key, requester, version=version)
        self.api_root = ApiRoot(self._api)
        self.authorized_apps = AuthorizedApps(self._api)
        self.lists = Lists(self._api)
        self.campaigns = Campaigns(self._api)
        self.automations = Automations(self._api)
        self.conversations = Conversations(self._api)
        self.reports = Reports(self._api)
        self.landing_pages = LandingPages(self._api)

    @property
    def api(self) -> RESTTransport:
        return self._api

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._api.close()

    async def __aenter__(self) -> MailchimpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"MailchimpClient(datacenter={self._api.datacenter!r})"
