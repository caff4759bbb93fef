"""Unit tests for the API root, reports, landing pages and authorized apps."""

from __future__ import annotations

import pytest

from chimpkit.models import LandingPageParams
from chimpkit.resources import (
    ApiRoot,
    AuthorizedApps,
    LandingPageResource,
    LandingPages,
    Reports,
    ReportsFilter,
)

BASE = "https://us6.api.mailchimp.com/3.0"


class TestApiRoot:
    @pytest.mark.asyncio
    async def test_get_info(self, api, stub):
        """Test the root endpoint decodes account details and links."""
        stub.bodies["GET"] = (
            '{"account_id": "acc", "account_name": "Freddie", '
            '"_links": [{"rel": "lists", "href": "https://us6.api.mailchimp.com/3.0/lists"}]}'
        )

        info = await ApiRoot(api).get_info()

        assert info.account_name == "Freddie"
        assert info.links[0].rel == "lists"
        assert stub.calls[0].url == f"{BASE}/"


class TestReports:
    @pytest.mark.asyncio
    async def test_iter_yields_models(self, api, stub):
        """Test reports are yielded as plain models."""
        stub.bodies["GET"] = '{"reports": [{"id": "c1", "emails_sent": 10}], "total_items": 1}'

        reports = await (await Reports(api).iter(ReportsFilter(type="regular"))).collect()

        assert reports[0].emails_sent == 10
        assert "type=regular" in stub.calls[0].url

    @pytest.mark.asyncio
    async def test_get(self, api, stub):
        """Test one report is fetched by campaign id."""
        stub.bodies["GET"] = '{"id": "c1", "campaign_title": "Launch"}'

        report = await Reports(api).get("c1")

        assert report.campaign_title == "Launch"
        assert stub.calls[0].url == f"{BASE}/reports/c1"


class TestLandingPages:
    @pytest.mark.asyncio
    async def test_iter_and_get(self, api, stub):
        """Test landing pages are listed and fetched."""
        stub.bodies["GET"] = '{"landing_pages": [{"id": "p1", "name": "Promo"}], "total_items": 1}'
        pages = await (await LandingPages(api).iter()).collect()

        stub.bodies["GET"] = '{"id": "p1", "name": "Promo"}'
        page = await LandingPages(api).get("p1")

        assert [p.name for p in pages] == ["Promo"]
        assert page.id == "p1"
        assert stub.calls[1].url == f"{BASE}/landing-pages/p1"

    @pytest.mark.asyncio
    async def test_create_update_publish_delete(self, api, stub):
        """Test a created page is edited, published, unpublished and deleted."""
        stub.bodies["POST"] = '{"id": "p2", "name": "Promo"}'
        stub.bodies["PATCH"] = '{"id": "p2", "name": "Sale"}'
        stub.bodies["DELETE"] = ""

        page = await LandingPages(api).create(LandingPageParams(name="Promo", list_id="abc"))
        stub.bodies["POST"] = ""
        renamed = await page.update(LandingPageParams(name="Sale"))
        await renamed.publish()
        await renamed.unpublish()
        await renamed.delete()

        endpoint = f"{BASE}/landing-pages/p2"
        assert isinstance(page, LandingPageResource)
        assert stub.calls[0].payload == {"name": "Promo", "list_id": "abc"}
        assert renamed.name == "Sale"
        assert [(c.method, c.url) for c in stub.calls[1:]] == [
            ("PATCH", endpoint),
            ("POST", f"{endpoint}/actions/publish"),
            ("POST", f"{endpoint}/actions/unpublish"),
            ("DELETE", endpoint),
        ]


class TestAuthorizedApps:
    @pytest.mark.asyncio
    async def test_iter(self, api, stub):
        """Test apps are read from the ``apps`` array."""
        stub.bodies["GET"] = '{"apps": [{"id": 42, "name": "Sync"}], "total_items": 1}'

        apps = await (await AuthorizedApps(api).iter()).collect()

        assert apps[0].id == 42

    @pytest.mark.asyncio
    async def test_link(self, api, stub):
        """Test linking posts the client credentials."""
        stub.bodies["POST"] = '{"access_token": "at", "viewer_token": "vt"}'

        created = await AuthorizedApps(api).link("cid", "secret")

        assert created.access_token == "at"
        assert stub.calls[0].url == f"{BASE}/authorized-apps"
        assert stub.calls[0].payload == {"client_id": "cid", "client_secret": "secret"}
