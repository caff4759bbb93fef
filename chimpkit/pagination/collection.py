"""Collection envelopes returned by paginated endpoints."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models.common import CollectionEnvelope


@runtime_checkable
class Collection(Protocol):
    """Capability the paginating iterator needs from a decoded page."""

    total_items: int

    def values(self) -> list[Any]: ...


__all__ = ["Collection", "CollectionEnvelope"]
