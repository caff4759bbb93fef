"""Campaign conversation models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class Conversation(ApiModel):
    id: str | None = None
    message_count: int | None = None
    campaign_id: str | None = None
    list_id: str | None = None
    unread_messages: int | None = None
    from_label: str | None = None
    from_email: str | None = None
    subject: str | None = None
    last_message: dict[str, Any] | None = None


class ConversationsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "conversations"

    conversations: list[Conversation] = Field(default_factory=list)


class ConversationMessage(ApiModel):
    id: str | None = None
    conversation_id: str | None = None
    list_id: int | None = None
    from_label: str | None = None
    from_email: str | None = None
    subject: str | None = None
    message: str | None = None
    read: bool | None = None
    timestamp: str | None = None


class ConversationMessagesCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "conversation_messages"

    conversation_id: str | None = None
    conversation_messages: list[ConversationMessage] = Field(default_factory=list)


class MessageParams(ApiModel):
    """Body for posting a message to a conversation."""

    from_email: str
    read: bool = False
    subject: str | None = None
    message: str | None = None
