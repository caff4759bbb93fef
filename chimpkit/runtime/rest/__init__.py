"""REST runtime abstractions."""

from .requester import (
    AiohttpRequester,
    HttpRequester,
    RecordedCall,
    StubRequester,
    error_from_body,
)
from .transport import RESTTransport, basic_authorization

__all__ = [
    "AiohttpRequester",
    "HttpRequester",
    "RecordedCall",
    "RESTTransport",
    "StubRequester",
    "basic_authorization",
    "error_from_body",
]
