"""Classic automation workflow models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class AutomationWorkflow(ApiModel):
    id: str | None = None
    create_time: str | None = None
    start_time: str | None = None
    status: str | None = None
    emails_sent: int | None = None
    recipients: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None
    trigger_settings: dict[str, Any] | None = None
    tracking: dict[str, Any] | None = None


class AutomationsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "automations"

    automations: list[AutomationWorkflow] = Field(default_factory=list)


class AutomationParams(ApiModel):
    """Body for creating or updating an automation."""

    recipients: dict[str, Any] | None = None
    trigger_settings: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None
    delay: dict[str, Any] | None = None


class WorkflowEmail(ApiModel):
    id: str | None = None
    web_id: int | None = None
    workflow_id: str | None = None
    position: int | None = None
    status: str | None = None
    emails_sent: int | None = None
    send_time: str | None = None
    delay: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None


class WorkflowEmailsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "emails"

    emails: list[WorkflowEmail] = Field(default_factory=list)


class AutomationSubscriber(ApiModel):
    id: str | None = None
    workflow_id: str | None = None
    list_id: str | None = None
    email_address: str | None = None


class RemovedSubscribersCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "subscribers"

    workflow_id: str | None = None
    subscribers: list[AutomationSubscriber] = Field(default_factory=list)


class WorkflowEmailParams(ApiModel):
    """Body for updating one email of a workflow."""

    settings: dict[str, Any] | None = None
    delay: dict[str, Any] | None = None


class QueuedSubscriber(ApiModel):
    """A subscriber waiting in an automation email's send queue."""

    id: str | None = None
    workflow_id: str | None = None
    email_id: str | None = None
    list_id: str | None = None
    list_is_active: bool | None = None
    email_address: str | None = None
    next_send: str | None = None


class EmailQueueCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "queue"

    workflow_id: str | None = None
    email_id: str | None = None
    queue: list[QueuedSubscriber] = Field(default_factory=list)
