"""Integration tests against a live Mailchimp account (read-only calls)."""

import os

import pytest

from chimpkit import CampaignFilter, ListFilter, MailchimpAPIError, MailchimpClient

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CHIMPKIT_NETWORK_TESTS") != "1",
    reason="Requires network access and MAILCHIMP_API_KEY",
)


class TestLiveAccount:
    """Exercise read-only endpoints with a real key."""

    @pytest.mark.asyncio
    async def test_api_root(self, api_key):
        """Test the root endpoint returns account details."""
        async with MailchimpClient(api_key) as client:
            info = await client.api_root.get_info()

        assert info.account_id
        assert info.links

    @pytest.mark.asyncio
    async def test_iterate_lists(self, api_key):
        """Test paging lists with a small page size stays consistent."""
        async with MailchimpClient(api_key) as client:
            iterator = await client.lists.iter(ListFilter(count=2))
            audiences = await iterator.collect()

        assert len(audiences) == iterator.total_items
        assert len({a.id for a in audiences}) == len(audiences)

    @pytest.mark.asyncio
    async def test_iterate_campaigns(self, api_key):
        """Test paging campaigns with field selection."""
        async with MailchimpClient(api_key) as client:
            iterator = await client.campaigns.iter(
                CampaignFilter(count=5, fields="campaigns.id,campaigns.status,total_items")
            )
            campaigns = await iterator.collect()

        assert all(c.id for c in campaigns)

    @pytest.mark.asyncio
    async def test_invalid_key_is_rejected(self):
        """Test a bogus key surfaces an API error, not an aiohttp one."""
        async with MailchimpClient("0000000000000000-us1") as client:
            with pytest.raises(MailchimpAPIError) as exc_info:
                await client.api_root.get_info()

        assert exc_info.value.status in (401, 403, 404)
