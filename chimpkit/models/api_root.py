"""Account information returned by the API root."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .common import ApiModel, Link


class ApiRootInfo(ApiModel):
    """Details about the account that owns the API key."""

    account_id: str | None = None
    login_id: str | None = None
    account_name: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    role: str | None = None
    member_since: str | None = None
    pricing_plan_type: str | None = None
    account_timezone: str | None = None
    total_subscribers: int | None = None
    contact: dict[str, Any] | None = None
    links: list[Link] | None = Field(None, alias="_links")
