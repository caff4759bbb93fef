"""Shared Mailchimp API constants and credential parsing.

This module centralizes hosts, versions and defaults used by the transport
and the resource endpoints so the client itself can stay small and focused.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

API_HOST = "api.mailchimp.com"
API_VERSION = "3.0"

# Datacenter used when the API key carries no "-dc" suffix
DEFAULT_DATACENTER = "usX"

DEFAULT_PAGE_SIZE = 50
# Page size the API applies when a request carries no "count"
API_DEFAULT_COUNT = 10
DEFAULT_TIMEOUT = 30.0

ERROR_GLOSSARY_URL = (
    "http://developer.mailchimp.com/documentation/mailchimp/guides/error-glossary/"
)


class Credentials(BaseModel):
    """API token plus the datacenter it routes to."""

    api_token: str
    datacenter: str = DEFAULT_DATACENTER

    model_config = ConfigDict(frozen=True)


def parse_api_key(api_key: str) -> Credentials:
    """Split an API key of the form ``{token}-{datacenter}``.

    Malformed keys never raise: a key without a suffix routes to
    ``DEFAULT_DATACENTER``.

    Examples:
        >>> parse_api_key("abc123-us6").datacenter
        'us6'
        >>> parse_api_key("abc123").datacenter
        'usX'
    """
    parts = (api_key or "").split("-")
    datacenter = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_DATACENTER
    return Credentials(api_token=parts[0], datacenter=datacenter)


def get_base_url(datacenter: str, version: str = API_VERSION) -> str:
    """Get the versioned REST base URL for a datacenter.

    Examples:
        >>> get_base_url("us6")
        'https://us6.api.mailchimp.com/3.0/'
    """
    return f"https://{datacenter}.{API_HOST}/{version}/"
