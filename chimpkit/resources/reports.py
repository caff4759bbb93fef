"""Reports endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Report, ReportsCollection
from ..pagination import ModelBuilder, PaginatedIterator, SimpleFilter
from .base import Endpoint, field_params


@dataclass(frozen=True, kw_only=True)
class ReportsFilter(SimpleFilter):
    type: str | None = None
    before_send_time: str | None = None
    since_send_time: str | None = None


class Reports(Endpoint):
    """Read-only campaign reports."""

    path = "reports"

    async def iter(
        self, filter: ReportsFilter | None = None
    ) -> PaginatedIterator[Report, Report, ReportsFilter]:
        return await self._iterate(ModelBuilder(), ReportsCollection, filter or ReportsFilter())

    async def get(
        self, campaign_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> Report:
        return await self.api.get(
            self._item_endpoint(campaign_id), Report, field_params(fields, exclude_fields)
        )
