"""Classic automations endpoint: workflows and their emails."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    AutomationParams,
    AutomationsCollection,
    AutomationSubscriber,
    AutomationWorkflow,
    EmailQueueCollection,
    EmptyResponse,
    QueuedSubscriber,
    RemovedSubscribersCollection,
    WorkflowEmail,
    WorkflowEmailParams,
    WorkflowEmailsCollection,
)
from ..pagination import ModelBuilder, PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Endpoint, Resource, field_params


@dataclass(frozen=True, kw_only=True)
class AutomationsFilter(SimpleFilter):
    """Filter for ``GET /automations``."""

    before_create_time: str | None = None
    since_create_time: str | None = None
    before_start_time: str | None = None
    since_start_time: str | None = None
    status: str | None = None


class WorkflowEmailResource(Resource[WorkflowEmail]):
    """One email of an automation workflow."""

    async def update(self, params: WorkflowEmailParams) -> WorkflowEmailResource:
        """Change the email's settings or delay; the workflow must be paused."""
        data = await self.api.patch(self.endpoint, WorkflowEmail, params)
        return WorkflowEmailResource(self.api, data, self.endpoint)

    async def pause(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/pause", EmptyResponse)

    async def start(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/start", EmptyResponse)

    async def delete(self) -> None:
        """Remove the email; only possible while the workflow is paused."""
        await self.api.delete(self.endpoint, EmptyResponse)

    async def iter_queue(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[QueuedSubscriber, QueuedSubscriber, SimpleFilter]:
        """Subscribers waiting for this email to be sent."""
        return await self._iterate(
            "queue", ModelBuilder(), EmailQueueCollection, filter or SimpleFilter()
        )

    async def add_subscriber(self, email_address: str) -> QueuedSubscriber:
        """Queue a list member for this email, starting the workflow for them."""
        return await self.api.post(
            f"{self.endpoint}/queue", QueuedSubscriber, {"email_address": email_address}
        )


class AutomationWorkflowResource(Resource[AutomationWorkflow]):
    """An automation workflow bound to the API."""

    async def pause_all_emails(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/pause-all-emails", EmptyResponse)

    async def start_all_emails(self) -> None:
        await self.api.post(f"{self.endpoint}/actions/start-all-emails", EmptyResponse)

    async def get_emails(self) -> list[WorkflowEmailResource]:
        """All emails of the workflow; this call is not paginated."""
        collection = await self.api.get(f"{self.endpoint}/emails", WorkflowEmailsCollection)
        return [
            WorkflowEmailResource(self.api, email, self._child_endpoint("emails", email.id))
            for email in collection.emails
        ]

    async def get_email(self, email_id: str) -> WorkflowEmailResource:
        endpoint = self._child_endpoint("emails", email_id)
        data = await self.api.get(endpoint, WorkflowEmail)
        return WorkflowEmailResource(self.api, data, endpoint)

    async def update_workflow_email(
        self, email_id: str, params: WorkflowEmailParams
    ) -> WorkflowEmailResource:
        endpoint = self._child_endpoint("emails", email_id)
        data = await self.api.patch(endpoint, WorkflowEmail, params)
        return WorkflowEmailResource(self.api, data, endpoint)

    async def add_subscriber_to_workflow(
        self, email_id: str, email_address: str
    ) -> QueuedSubscriber:
        """Queue ``email_address`` for the workflow email ``email_id``."""
        return await self.api.post(
            f"{self._child_endpoint('emails', email_id)}/queue",
            QueuedSubscriber,
            {"email_address": email_address},
        )

    async def iter_removed_subscribers(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[AutomationSubscriber, AutomationSubscriber, SimpleFilter]:
        return await self._iterate(
            "removed-subscribers",
            ModelBuilder(),
            RemovedSubscribersCollection,
            filter or SimpleFilter(),
        )


class Automations(Endpoint):
    """Manage classic automation workflows."""

    path = "automations"

    async def iter(
        self, filter: AutomationsFilter | None = None
    ) -> PaginatedIterator[AutomationWorkflow, AutomationWorkflowResource, AutomationsFilter]:
        return await self._iterate(
            ResourceClassBuilder(AutomationWorkflowResource),
            AutomationsCollection,
            filter or AutomationsFilter(),
        )

    async def get(
        self, workflow_id: str, fields: str | None = None, exclude_fields: str | None = None
    ) -> AutomationWorkflowResource:
        endpoint = self._item_endpoint(workflow_id)
        params = field_params(fields, exclude_fields)
        data = await self.api.get(endpoint, AutomationWorkflow, params)
        return AutomationWorkflowResource(self.api, data, endpoint)

    async def create(self, params: AutomationParams) -> AutomationWorkflowResource:
        data = await self.api.post(self.path, AutomationWorkflow, params)
        return AutomationWorkflowResource(self.api, data, self._item_endpoint(data.id))
