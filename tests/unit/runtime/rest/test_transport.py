"""Unit tests for RESTTransport.

Tests focus on URL building, authentication, decoding and error fallback.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import BaseModel

from chimpkit.core import MailchimpAPIError
from chimpkit.models import EmptyResponse, ListParams, MailingList
from chimpkit.runtime.rest import RESTTransport, StubRequester, basic_authorization


class Item(BaseModel):
    id: str
    count: int


class TestRESTTransportConfiguration:
    """Test base URL, headers and auth."""

    def test_configure_parses_key(self):
        """Test configure() routes to the key's datacenter."""
        api = RESTTransport.configure("abc123-us6", StubRequester())
        assert api.datacenter == "us6"
        assert api.base_url == "https://us6.api.mailchimp.com/3.0/"
        assert api.domain == "https://us6.api.mailchimp.com/"
        assert api.version == "3.0"

    def test_configure_malformed_key_uses_default_datacenter(self):
        """Test a key without suffix does not raise."""
        api = RESTTransport.configure("abc123", StubRequester())
        assert api.base_url == "https://usX.api.mailchimp.com/3.0/"

    def test_build_url_joins_endpoint(self, api):
        """Test endpoints are joined onto the versioned base URL."""
        assert str(api.build_url("lists/abc")) == "https://us6.api.mailchimp.com/3.0/lists/abc"

    def test_build_url_adds_query(self, api):
        """Test query params are appended."""
        url = api.build_url("lists", {"count": "50", "offset": "0"})
        assert url.path == "/3.0/lists"
        assert dict(url.query) == {"count": "50", "offset": "0"}

    def test_build_url_empty_endpoint_is_root(self, api):
        """Test the empty endpoint addresses the API root."""
        assert str(api.build_url("")) == "https://us6.api.mailchimp.com/3.0/"

    def test_build_url_rejects_leading_separator(self, api):
        """Test an absolute endpoint is a programming error."""
        with pytest.raises(ValueError):
            api.build_url("/lists")

    def test_headers(self, api):
        """Test requests declare a JSON body and carry the credential."""
        assert api.build_headers() == {
            "Content-Type": "application/json",
            "Authorization": basic_authorization("token"),
        }

    def test_basic_authorization_encodes_empty_user(self):
        """Test the header value is Basic auth of an empty user and the token."""
        # base64 of ":token"
        assert basic_authorization("token") == "Basic OnRva2Vu"

    @pytest.mark.asyncio
    async def test_basic_auth_carries_token(self, api, stub):
        """Test every call carries Basic auth with the token as password."""
        await api.get("lists", EmptyResponse)

        assert stub.calls[0].headers["Authorization"] == "Basic OnRva2Vu"


class TestRESTTransportCalls:
    """Test verb calls and decoding."""

    @pytest.mark.asyncio
    async def test_get_decodes_model(self):
        """Test a success body is decoded into the requested model."""
        stub = StubRequester(bodies={"GET": '{"id": "a1", "count": 3}'})
        api = RESTTransport("us6", "token", stub)

        item = await api.get("items/a1", Item, {"fields": "id"})

        assert item == Item(id="a1", count=3)
        assert stub.calls[0].url == "https://us6.api.mailchimp.com/3.0/items/a1?fields=id"

    @pytest.mark.asyncio
    async def test_empty_body_decodes_as_empty_object(self):
        """Test zero-length success bodies are treated as ``{}``."""
        api = RESTTransport("us6", "token", StubRequester(default_body=""))

        result = await api.delete("lists/abc")

        assert isinstance(result, EmptyResponse)

    @pytest.mark.asyncio
    async def test_get_undecodable_body_raises_default_error(self):
        """Test a body that does not fit the model raises the default error."""
        api = RESTTransport("us6", "token", StubRequester(bodies={"GET": "not json"}))

        with pytest.raises(MailchimpAPIError) as exc_info:
            await api.get("items/a1", Item)

        assert exc_info.value.status == 404
        assert exc_info.value.title == "Resource Not Found"

    @pytest.mark.asyncio
    async def test_post_undecodable_body_raises_default_error(self):
        """Test POST decode failures fall back the same way."""
        api = RESTTransport("us6", "token", StubRequester(bodies={"POST": '{"id": 1}'}))

        with pytest.raises(MailchimpAPIError) as exc_info:
            await api.post("items", Item, {"id": "a1"})

        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_requester_error_propagates(self):
        """Test errors raised by the requester reach the caller unchanged."""
        error = MailchimpAPIError("API Key Invalid", 401)
        api = RESTTransport("us6", "token", StubRequester(error=error))

        with pytest.raises(MailchimpAPIError) as exc_info:
            await api.get("", EmptyResponse)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_model_payload_dumped_without_none(self, api, stub):
        """Test model payloads are serialized by alias, skipping unset fields."""
        await api.post("lists", MailingList, ListParams(name="News"))

        assert stub.calls[0].payload == {"name": "News"}

    @pytest.mark.asyncio
    async def test_mapping_payload_passed_through(self, api, stub):
        """Test mapping payloads are sent as-is."""
        await api.patch("lists/abc", MailingList, {"name": "Renamed"})
        await api.put("lists/abc", MailingList)

        assert stub.calls[0].method == "PATCH"
        assert stub.calls[0].payload == {"name": "Renamed"}
        assert stub.calls[1].payload == {}

    @pytest.mark.asyncio
    async def test_mapping_payload_values_made_json_safe(self, api, stub):
        """Test datetimes, decimals and sets inside a mapping are rendered as JSON values."""
        sent_at = datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc)

        await api.post(
            "lists/abc/members",
            MailingList,
            {
                "timestamp_opt": sent_at,
                "score": Decimal("1.5"),
                "tags": {"vip"},
                "params": ListParams(name="News"),
            },
        )

        payload = stub.calls[0].payload
        assert payload["timestamp_opt"] == "2030-01-01T10:00:00Z"
        assert payload["score"] == "1.5"
        assert payload["tags"] == ["vip"]
        assert payload["params"]["name"] == "News"

    @pytest.mark.asyncio
    async def test_unencodable_payload_raises_default_error(self, api, stub):
        """Test a payload with no JSON form raises the API error and sends nothing."""
        with pytest.raises(MailchimpAPIError) as exc_info:
            await api.patch("lists/abc", MailingList, {"name": object()})

        assert exc_info.value.status == 404
        assert exc_info.value.__cause__ is not None
        assert stub.calls == []

    @pytest.mark.asyncio
    async def test_rejects_absolute_endpoint_before_sending(self, api, stub):
        """Test no request is issued for an absolute endpoint."""
        with pytest.raises(ValueError):
            await api.get("/lists", EmptyResponse)
        assert stub.calls == []

    @pytest.mark.asyncio
    async def test_context_manager_closes_requester(self, stub):
        """Test leaving the context closes the requester."""
        async with RESTTransport("us6", "token", stub) as api:
            assert api.requester is stub
