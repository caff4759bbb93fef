"""Unit tests for the campaigns endpoint and CampaignResource."""

from __future__ import annotations

import pytest

from chimpkit.models import (
    Campaign,
    CampaignContentParams,
    CampaignFeedbackParams,
    CampaignParams,
    ScheduleParams,
    SendTestParams,
)
from chimpkit.resources import (
    CampaignFeedbackResource,
    CampaignFilter,
    CampaignResource,
    Campaigns,
)

BASE = "https://us6.api.mailchimp.com/3.0"


@pytest.fixture
def campaign(api):
    return CampaignResource(api, Campaign(id="c1", status="save"), "campaigns/c1")


class TestCampaigns:
    """Test top-level campaign calls."""

    @pytest.mark.asyncio
    async def test_iter_renders_filter(self, api, stub):
        """Test campaign filters reach the query string."""
        stub.bodies["GET"] = '{"campaigns": [{"id": "c1"}], "total_items": 1}'

        iterator = await Campaigns(api).iter(CampaignFilter(status="sent", count=5))
        result = await iterator.collect()

        assert [c.endpoint for c in result] == ["campaigns/c1"]
        assert stub.calls[0].url == f"{BASE}/campaigns?count=5&offset=0&status=sent"

    @pytest.mark.asyncio
    async def test_create_and_get(self, api, stub):
        """Test create() posts params and get() binds the campaign."""
        stub.bodies["POST"] = '{"id": "c9", "type": "regular"}'
        stub.bodies["GET"] = '{"id": "c9", "type": "regular", "status": "save"}'

        created = await Campaigns(api).create(CampaignParams(type="regular"))
        fetched = await Campaigns(api).get("c9")

        assert created.endpoint == fetched.endpoint == "campaigns/c9"
        assert stub.calls[0].payload == {"type": "regular"}
        assert fetched.status == "save"


class TestCampaignActions:
    """Test campaign action endpoints."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,action",
        [
            ("cancel_send", "cancel-send"),
            ("pause", "pause"),
            ("resume", "resume"),
            ("send", "send"),
            ("unschedule", "unschedule"),
        ],
    )
    async def test_simple_actions(self, campaign, stub, method, action):
        """Test body-less actions POST to their action endpoint."""
        stub.default_body = ""

        await getattr(campaign, method)()

        assert stub.calls[0].method == "POST"
        assert stub.calls[0].url == f"{BASE}/campaigns/c1/actions/{action}"
        assert stub.calls[0].payload == {}

    @pytest.mark.asyncio
    async def test_schedule(self, campaign, stub):
        """Test schedule() posts the schedule time."""
        await campaign.schedule(ScheduleParams(schedule_time="2030-01-01T10:00:00+00:00"))

        assert stub.calls[0].url == f"{BASE}/campaigns/c1/actions/schedule"
        assert stub.calls[0].payload == {"schedule_time": "2030-01-01T10:00:00+00:00"}

    @pytest.mark.asyncio
    async def test_send_test_email(self, campaign, stub):
        """Test send_test_email() posts recipients and send type."""
        await campaign.send_test_email(SendTestParams(test_emails=["qa@example.com"]))

        assert stub.calls[0].url == f"{BASE}/campaigns/c1/actions/test"
        assert stub.calls[0].payload == {"test_emails": ["qa@example.com"], "send_type": "html"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,action", [("replicate", "replicate"), ("create_resend", "create-resend")]
    )
    async def test_copy_actions_bind_new_campaign(self, campaign, stub, method, action):
        """Test copying actions return the new campaign."""
        stub.bodies["POST"] = '{"id": "c2", "status": "save"}'

        copy = await getattr(campaign, method)()

        assert stub.calls[0].url == f"{BASE}/campaigns/c1/actions/{action}"
        assert copy.endpoint == "campaigns/c2"
        assert copy.id == "c2"


class TestCampaignContent:
    """Test content, checklist and feedback calls."""

    @pytest.mark.asyncio
    async def test_get_and_set_content(self, campaign, stub):
        """Test content is read with GET and replaced with PUT."""
        stub.bodies["GET"] = '{"html": "<p>hi</p>"}'
        stub.bodies["PUT"] = '{"html": "<p>bye</p>"}'

        content = await campaign.get_content()
        updated = await campaign.set_content(CampaignContentParams(html="<p>bye</p>"))

        assert content.html == "<p>hi</p>"
        assert updated.html == "<p>bye</p>"
        assert stub.calls[1].method == "PUT"
        assert stub.calls[1].url == f"{BASE}/campaigns/c1/content"

    @pytest.mark.asyncio
    async def test_send_checklist(self, campaign, stub):
        """Test the checklist is decoded."""
        stub.bodies["GET"] = '{"is_ready": false, "items": [{"type": "error"}]}'

        checklist = await campaign.get_send_checklist()

        assert checklist.is_ready is False
        assert len(checklist.items) == 1
        assert stub.calls[0].url == f"{BASE}/campaigns/c1/send-checklist"

    @pytest.mark.asyncio
    async def test_iter_feedback(self, campaign, stub):
        """Test feedback is listed from the nested collection."""
        stub.bodies["GET"] = '{"feedback": [{"feedback_id": 7, "message": "ok"}], "total_items": 1}'

        feedback = await (await campaign.iter_feedback()).collect()

        assert [f.feedback_id for f in feedback] == [7]
        assert isinstance(feedback[0], CampaignFeedbackResource)
        assert feedback[0].endpoint == "campaigns/c1/feedback/7"

    @pytest.mark.asyncio
    async def test_feedback_lifecycle(self, campaign, stub):
        """Test feedback is created, fetched, edited and removed at its own endpoint."""
        stub.bodies["POST"] = '{"feedback_id": 7, "message": "ok"}'
        stub.bodies["GET"] = '{"feedback_id": 7, "message": "ok"}'
        stub.bodies["PATCH"] = '{"feedback_id": 7, "message": "ok", "is_complete": true}'
        stub.bodies["DELETE"] = ""

        created = await campaign.create_feedback(CampaignFeedbackParams(message="ok"))
        fetched = await campaign.get_feedback(7)
        updated = await fetched.update(CampaignFeedbackParams(is_complete=True))
        await updated.delete()

        feedback = f"{BASE}/campaigns/c1/feedback/7"
        assert stub.calls[0].payload == {"message": "ok"}
        assert created.endpoint == fetched.endpoint == "campaigns/c1/feedback/7"
        assert updated.is_complete is True
        assert [(c.method, c.url) for c in stub.calls[1:]] == [
            ("GET", feedback),
            ("PATCH", feedback),
            ("DELETE", feedback),
        ]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, campaign, stub):
        """Test update() patches and delete() removes the campaign."""
        stub.bodies["PATCH"] = '{"id": "c1", "status": "save"}'
        stub.bodies["DELETE"] = ""

        await campaign.update(CampaignParams(settings={"title": "New"}))
        await campaign.delete()

        assert [c.method for c in stub.calls] == ["PATCH", "DELETE"]
        assert stub.calls[0].payload == {"settings": {"title": "New"}}
