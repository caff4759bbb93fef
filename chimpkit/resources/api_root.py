"""API root endpoint."""

from __future__ import annotations

from ..models import ApiRootInfo
from .base import Endpoint, field_params


class ApiRoot(Endpoint):
    """Account details plus links to every other resource."""

    path = ""

    async def get_info(
        self, fields: str | None = None, exclude_fields: str | None = None
    ) -> ApiRootInfo:
        return await self.api.get(self.path, ApiRootInfo, field_params(fields, exclude_fields))
