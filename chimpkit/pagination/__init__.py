"""Generic pagination layer shared by every collection endpoint.

Architecture:
    - filters.py: immutable query filters that render to a flat payload
    - collection.py: decoded page envelopes (records + total_items)
    - builder.py: per-resource adapters from raw records to resource values
    - iterator.py: the lazy async iterator tying the three together
"""

from __future__ import annotations

from .builder import ModelBuilder, ResourceBuilder, ResourceClassBuilder, item_endpoint
from .collection import Collection, CollectionEnvelope
from .filters import ResourceFilter, SimpleFilter, render_value
from .iterator import PaginatedIterator

__all__ = [
    "Collection",
    "CollectionEnvelope",
    "ModelBuilder",
    "PaginatedIterator",
    "ResourceBuilder",
    "ResourceClassBuilder",
    "ResourceFilter",
    "SimpleFilter",
    "item_endpoint",
    "render_value",
]
