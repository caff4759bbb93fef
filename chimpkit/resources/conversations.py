"""Conversations endpoint: campaign replies and their messages."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    Conversation,
    ConversationMessage,
    ConversationMessagesCollection,
    ConversationsCollection,
    MessageParams,
)
from ..pagination import ModelBuilder, PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Endpoint, Resource, field_params


@dataclass(frozen=True, kw_only=True)
class ConversationsFilter(SimpleFilter):
    """Filter for ``GET /conversations``."""

    has_unread_messages: bool | None = None
    list_id: str | None = None
    campaign_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class MessagesFilter(SimpleFilter):
    """Filter for ``GET /conversations/{id}/messages``."""

    is_read: bool | None = None
    before_timestamp: str | None = None
    since_timestamp: str | None = None


class ConversationResource(Resource[Conversation]):
    """A conversation thread bound to the API."""

    async def iter_messages(
        self, filter: MessagesFilter | None = None
    ) -> PaginatedIterator[ConversationMessage, ConversationMessage, MessagesFilter]:
        return await self._iterate(
            "messages", ModelBuilder(), ConversationMessagesCollection, filter or MessagesFilter()
        )

    async def get_message(self, message_id: str) -> ConversationMessage:
        return await self.api.get(self._child_endpoint("messages", message_id), ConversationMessage)

    async def create_message(self, params: MessageParams) -> ConversationMessage:
        return await self.api.post(f"{self.endpoint}/messages", ConversationMessage, params)


class Conversations(Endpoint):
    path = "conversations"

    async def iter(
        self, filter: ConversationsFilter | None = None
    ) -> PaginatedIterator[Conversation, ConversationResource, ConversationsFilter]:
        return await self._iterate(
            ResourceClassBuilder(ConversationResource),
            ConversationsCollection,
            filter or ConversationsFilter(),
        )

    async def get(
        self, conversation_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> ConversationResource:
        endpoint = self._item_endpoint(conversation_id)
        data = await self.api.get(endpoint, Conversation, field_params(fields, exclude_fields))
        return ConversationResource(self.api, data, endpoint)
