"""Runtime layer: HTTP requesters and the typed REST transport."""

from .rest import AiohttpRequester, HttpRequester, RESTTransport, StubRequester

__all__ = ["AiohttpRequester", "HttpRequester", "RESTTransport", "StubRequester"]
