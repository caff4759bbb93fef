"""Core components."""

from .config import (
    API_DEFAULT_COUNT,
    API_HOST,
    API_VERSION,
    DEFAULT_DATACENTER,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    ERROR_GLOSSARY_URL,
    Credentials,
    get_base_url,
    parse_api_key,
)
from .exceptions import ChimpkitError, ErrorEnvelope, MailchimpAPIError, ResourceIdentityError

__all__ = [
    "API_DEFAULT_COUNT",
    "API_HOST",
    "API_VERSION",
    "DEFAULT_DATACENTER",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "ERROR_GLOSSARY_URL",
    "Credentials",
    "get_base_url",
    "parse_api_key",
    "ChimpkitError",
    "ErrorEnvelope",
    "MailchimpAPIError",
    "ResourceIdentityError",
]
