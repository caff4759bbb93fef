"""HTTP requesters: the raw verb layer under RESTTransport.

A requester performs exactly one HTTP call against a fully built URL and
returns the raw response text. Every failure is raised as
:class:`MailchimpAPIError`; nothing from aiohttp leaks past this layer.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp
from pydantic import ValidationError

from ...core.config import DEFAULT_TIMEOUT
from ...core.exceptions import ErrorEnvelope, MailchimpAPIError
from .telemetry import log_request_failed, log_request_sent


def error_from_body(body: str, status: int | None = None) -> MailchimpAPIError:
    """Decode an error body, falling back to the default error.

    A decodable body that omits ``status`` takes the HTTP status instead.
    """
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        return MailchimpAPIError.default()
    if status is not None and "status" not in envelope.model_fields_set:
        envelope = envelope.model_copy(update={"status": status})
    return MailchimpAPIError.from_envelope(envelope)


class HttpRequester(ABC):
    """Capability set for the five HTTP verbs used by the API."""

    @abstractmethod
    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        pass

    @abstractmethod
    async def post(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        pass

    @abstractmethod
    async def put(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        pass

    @abstractmethod
    async def patch(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        pass

    @abstractmethod
    async def delete(self, url: str, headers: Mapping[str, str]) -> str:
        pass

    async def close(self) -> None:
        """Release any held connections. Override if needed."""
        pass


class AiohttpRequester(HttpRequester):
    """Production requester backed by an aiohttp session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        return await self._request("GET", url, headers)

    async def post(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return await self._request("POST", url, headers, payload=payload)

    async def put(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return await self._request("PUT", url, headers, payload=payload)

    async def patch(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return await self._request("PATCH", url, headers, payload=payload)

    async def delete(self, url: str, headers: Mapping[str, str]) -> str:
        return await self._request("DELETE", url, headers)

    async def _request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        *,
        payload: Any = None,
    ) -> str:
        log_request_sent(method=method, url=url)
        try:
            async with self.session.request(
                method, url, headers=dict(headers), json=payload
            ) as response:
                status = response.status
                body = await response.text()
        # TypeError: payload json.dumps cannot encode; ValueError covers undecodable text
        except (aiohttp.ClientError, asyncio.TimeoutError, TypeError, ValueError) as e:
            log_request_failed(
                method=method, url=url, error_type=type(e).__name__, error_message=str(e)
            )
            raise MailchimpAPIError.default() from e

        if 200 <= status < 300:
            return body

        error = error_from_body(body, status)
        log_request_failed(method=method, url=url, status=status, error_message=error.title)
        raise error

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpRequester:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    payload: Any = None


@dataclass
class StubRequester(HttpRequester):
    """Requester returning pre-canned bodies regardless of the request.

    ``bodies`` maps an upper-case verb to the body returned for it; verbs
    without an entry return ``default_body``. When ``error`` is set every call
    raises it instead. All calls are recorded in ``calls``.
    """

    bodies: dict[str, str] = field(default_factory=dict)
    default_body: str = ""
    error: MailchimpAPIError | None = None
    calls: list[RecordedCall] = field(default_factory=list)

    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        return self._respond("GET", url, headers, None)

    async def post(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return self._respond("POST", url, headers, payload)

    async def put(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return self._respond("PUT", url, headers, payload)

    async def patch(self, url: str, headers: Mapping[str, str], payload: Any = None) -> str:
        return self._respond("PATCH", url, headers, payload)

    async def delete(self, url: str, headers: Mapping[str, str]) -> str:
        return self._respond("DELETE", url, headers, None)

    def _respond(self, method: str, url: str, headers: Mapping[str, str], payload: Any) -> str:
        self.calls.append(RecordedCall(method, url, dict(headers), payload))
        if self.error is not None:
            raise self.error
        return self.bodies.get(method, self.default_body)
