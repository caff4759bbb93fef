"""Query filters for collection endpoints.

A filter is an immutable value: rendering it to a query payload never mutates
it, and moving to the next page returns a new filter via :meth:`advance`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from dataclasses import fields as dataclass_fields
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, Self, runtime_checkable

from ..core.config import API_DEFAULT_COUNT, DEFAULT_PAGE_SIZE


@runtime_checkable
class ResourceFilter(Protocol):
    """Capability the paginating iterator needs from a filter."""

    def build_payload(self) -> dict[str, str]: ...

    def advance(self) -> Self: ...


def render_value(value: Any) -> str:
    """Render a filter value the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(render_value(v) for v in value)
    return str(value)


@dataclass(frozen=True, kw_only=True)
class SimpleFilter:
    """Fields shared by every collection endpoint.

    Attributes:
        fields: Comma-separated fields to return (dot notation for sub-objects)
        exclude_fields: Comma-separated fields to exclude
        count: Number of records per page
        offset: Number of records to skip
    """

    fields: str | None = None
    exclude_fields: str | None = None
    count: int | None = DEFAULT_PAGE_SIZE
    offset: int | None = 0

    def build_payload(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if value is not None:
                payload[f.name] = render_value(value)
        return payload

    def advance(self) -> Self:
        """Return a copy positioned on the next page."""
        count = self.count if self.count is not None else API_DEFAULT_COUNT
        return replace(self, offset=(self.offset or 0) + count)
