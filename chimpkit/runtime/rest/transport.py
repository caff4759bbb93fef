"""Typed REST transport for the Mailchimp API.

RESTTransport owns the versioned base URL and the credential. It builds the
request URL, attaches the Basic Authorization header, delegates the verb to an injected
:class:`HttpRequester` and decodes the body into the requested pydantic model.

Every call returns the decoded model or raises :class:`MailchimpAPIError`;
aiohttp, JSON and pydantic exceptions never escape.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python
from yarl import URL

from ...core.config import API_VERSION, get_base_url, parse_api_key
from ...core.exceptions import MailchimpAPIError
from ...models.common import EmptyResponse
from .requester import AiohttpRequester, HttpRequester
from .telemetry import log_decode_failed, log_encode_failed

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = BaseModel | Mapping[str, Any] | None


class RESTTransport:
    """Authenticated, typed access to the API's REST endpoints."""

    def __init__(
        self,
        datacenter: str,
        api_token: str,
        requester: HttpRequester | None = None,
        *,
        version: str = API_VERSION,
    ) -> None:
        self._datacenter = datacenter
        self._version = version
        self._base_url = get_base_url(datacenter, version)
        self._authorization = basic_authorization(api_token)
        self._requester = requester or AiohttpRequester()

    @classmethod
    def configure(
        cls,
        api_key: str,
        requester: HttpRequester | None = None,
        *,
        version: str = API_VERSION,
    ) -> RESTTransport:
        """Build a transport from an ``{token}-{datacenter}`` API key.

        Malformed keys do not raise; they route to the default datacenter.
        """
        credentials = parse_api_key(api_key)
        return cls(credentials.datacenter, credentials.api_token, requester, version=version)

    @property
    def datacenter(self) -> str:
        return self._datacenter

    @property
    def domain(self) -> str:
        return self._base_url.rsplit(f"{self._version}/", 1)[0]

    @property
    def version(self) -> str:
        return self._version

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def requester(self) -> HttpRequester:
        return self._requester

    def build_url(self, endpoint: str, params: Mapping[str, str] | None = None) -> URL:
        """Join ``endpoint`` onto the versioned base URL and add query pairs.

        Raises:
            ValueError: If ``endpoint`` starts with a path separator
        """
        if endpoint.startswith("/"):
            raise ValueError(f"Endpoint must be relative, got {endpoint!r}")
        url = URL(self._base_url + endpoint)
        if params:
            url = url.with_query({str(k): str(v) for k, v in params.items()})
        return url

    def build_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "Authorization": self._authorization}

    async def get(
        self,
        endpoint: str,
        model: type[ModelT],
        params: Mapping[str, str] | None = None,
    ) -> ModelT:
        """GET ``endpoint`` with query ``params`` and decode into ``model``."""
        url = str(self.build_url(endpoint, params))
        body = await self._requester.get(url, self.build_headers())
        return self._decode(endpoint, body, model)

    async def post(self, endpoint: str, model: type[ModelT], payload: Payload = None) -> ModelT:
        """POST ``payload`` as JSON and decode the response into ``model``."""
        url = str(self.build_url(endpoint))
        payload_json = self._encode(endpoint, payload)
        body = await self._requester.post(url, self.build_headers(), payload_json)
        return self._decode(endpoint, body, model)

    async def put(self, endpoint: str, model: type[ModelT], payload: Payload = None) -> ModelT:
        """PUT ``payload`` as JSON and decode the response into ``model``."""
        url = str(self.build_url(endpoint))
        payload_json = self._encode(endpoint, payload)
        body = await self._requester.put(url, self.build_headers(), payload_json)
        return self._decode(endpoint, body, model)

    async def patch(self, endpoint: str, model: type[ModelT], payload: Payload = None) -> ModelT:
        """PATCH ``payload`` as JSON and decode the response into ``model``."""
        url = str(self.build_url(endpoint))
        payload_json = self._encode(endpoint, payload)
        body = await self._requester.patch(url, self.build_headers(), payload_json)
        return self._decode(endpoint, body, model)

    async def delete(
        self,
        endpoint: str,
        model: type[ModelT] = EmptyResponse,  # type: ignore[assignment]
        params: Mapping[str, str] | None = None,
    ) -> ModelT:
        """DELETE ``endpoint``; the API usually answers with an empty body."""
        url = str(self.build_url(endpoint, params))
        body = await self._requester.delete(url, self.build_headers())
        return self._decode(endpoint, body, model)

    def _encode(self, endpoint: str, payload: Payload) -> Any:
        """Render ``payload`` into JSON-compatible values for the request body.

        Mappings may hold datetimes, decimals, sets or models; anything that
        has no JSON form raises the default error instead of reaching aiohttp.
        """
        if payload is None:
            return {}
        try:
            if isinstance(payload, BaseModel):
                return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
            return to_jsonable_python(dict(payload), by_alias=True)
        except (TypeError, ValueError) as e:
            log_encode_failed(endpoint=endpoint, error_message=str(e))
            raise MailchimpAPIError.default() from e

    def _decode(self, endpoint: str, body: str, model: type[ModelT]) -> ModelT:
        # 2xx responses sometimes carry a zero-length body
        if not body:
            body = "{}"
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            log_decode_failed(endpoint=endpoint, model=model.__name__, error_message=str(e))
            raise MailchimpAPIError.default() from e

    async def close(self) -> None:
        await self._requester.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"RESTTransport(base_url={self._base_url!r})"


def basic_authorization(api_token: str) -> str:
    """Authorization header value for Basic auth with an empty user name."""
    credentials = base64.b64encode(f":{api_token}".encode()).decode("ascii")
    return f"Basic {credentials}"
