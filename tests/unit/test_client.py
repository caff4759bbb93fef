"""Unit tests for MailchimpClient."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from chimpkit import MailchimpClient, StubRequester


class TestMailchimpClient:
    """Test client wiring and lifecycle."""

    def test_endpoints_share_transport(self):
        """Test every endpoint group uses the client's transport."""
        client = MailchimpClient("abc-us6", StubRequester())

        groups = [
            client.api_root,
            client.authorized_apps,
            client.lists,
            client.campaigns,
            client.automations,
            client.conversations,
            client.reports,
            client.landing_pages,
        ]
        assert all(group.api is client.api for group in groups)
        assert client.api.base_url == "https://us6.api.mailchimp.com/3.0/"

    def test_malformed_key_uses_default_datacenter(self):
        """Test a key without datacenter does not raise."""
        client = MailchimpClient("abc", StubRequester())
        assert client.api.datacenter == "usX"

    @pytest.mark.asyncio
    async def test_context_manager_closes_requester(self):
        """Test leaving the context closes the requester."""
        stub = StubRequester()
        stub.close = AsyncMock()

        async with MailchimpClient("abc-us6", stub) as client:
            assert isinstance(client, MailchimpClient)

        stub.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_calls_use_key_token(self):
        """Test requests carry the token part of the key."""
        stub = StubRequester(default_body="{}")
        client = MailchimpClient("secret-us6", stub)

        await client.api_root.get_info()

        # base64 of ":secret"
        assert stub.calls[0].headers["Authorization"] == "Basic OnNlY3JldA=="
