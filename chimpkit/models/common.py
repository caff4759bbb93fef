"""Shared building blocks for API data models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Lenient base for API payloads.

    Only identifying fields are declared on subclasses; every other field the
    API returns is kept as an extra attribute and survives a round trip.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Link(ApiModel):
    """HATEOAS link attached to most responses."""

    rel: str | None = None
    href: str | None = None
    method: str | None = None
    target_schema: str | None = Field(None, alias="targetSchema")
    schema_: str | None = Field(None, alias="schema")


class EmptyResponse(ApiModel):
    """Body of calls that answer with nothing (or ``{}``)."""

    pass


class CollectionEnvelope(ApiModel):
    """Base for decoded collection pages.

    Every collection response wraps one page of records in an array whose name
    varies per resource (``lists``, ``campaigns``...), next to ``total_items``,
    the size of the whole result set. Subclasses declare the records array and
    name it in ``items_field``.
    """

    items_field: ClassVar[str] = "items"

    total_items: int = 0
    links: list[Link] = Field(default_factory=list, alias="_links")

    def values(self) -> list[Any]:
        return list(getattr(self, self.items_field, None) or [])
