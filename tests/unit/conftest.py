"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pytest
from yarl import URL

from chimpkit.core import MailchimpAPIError
from chimpkit.runtime.rest import HttpRequester, RESTTransport, StubRequester


class PagingRequester(HttpRequester):
    """Serves offset-paginated collection pages from an in-memory record list.

    Each GET answers with the slice ``records[offset:offset + count]`` wrapped
    under ``key``, next to ``total_items``. Offsets listed in ``fail_offsets``
    raise the default API error instead.
    """

    def __init__(
        self,
        records: list[dict[str, Any]],
        *,
        key: str = "lists",
        total_items: int | None = None,
        fail_offsets: tuple[int, ...] = (),
    ) -> None:
        self.records = records
        self.key = key
        self.total_items = len(records) if total_items is None else total_items
        self.fail_offsets = fail_offsets
        self.urls: list[URL] = []

    @property
    def offsets(self) -> list[int]:
        return [int(url.query.get("offset", "0")) for url in self.urls]

    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        parsed = URL(url)
        self.urls.append(parsed)
        offset = int(parsed.query.get("offset", "0"))
        count = int(parsed.query.get("count", "10"))
        if offset in self.fail_offsets:
            raise MailchimpAPIError.default()
        page = self.records[offset : offset + count]
        return json.dumps({self.key: page, "total_items": self.total_items})

    async def post(self, url, headers, payload=None) -> str:
        raise NotImplementedError

    async def put(self, url, headers, payload=None) -> str:
        raise NotImplementedError

    async def patch(self, url, headers, payload=None) -> str:
        raise NotImplementedError

    async def delete(self, url, headers) -> str:
        raise NotImplementedError


@pytest.fixture
def stub():
    """Stub requester answering ``{}`` to every call."""
    return StubRequester(default_body="{}")


@pytest.fixture
def api(stub):
    """Transport for datacenter us6 backed by the stub requester."""
    return RESTTransport("us6", "token", stub)


@pytest.fixture
def paging_requester():
    """Factory for PagingRequester instances."""
    return PagingRequester
