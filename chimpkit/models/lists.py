"""Audience (list) models and their sub-resources."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .common import ApiModel, CollectionEnvelope


class MailingList(ApiModel):
    """A list (audience) of contacts."""

    id: str | None = None
    web_id: int | None = None
    name: str | None = None
    permission_reminder: str | None = None
    date_created: str | None = None
    visibility: str | None = None
    double_optin: bool | None = None
    email_type_option: bool | None = None
    stats: dict[str, Any] | None = None


class ListsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "lists"

    lists: list[MailingList] = Field(default_factory=list)


class ListParams(ApiModel):
    """Body for creating or updating a list."""

    name: str | None = None
    permission_reminder: str | None = None
    email_type_option: bool | None = None
    use_archive_bar: bool | None = None
    notify_on_subscribe: str | None = None
    notify_on_unsubscribe: str | None = None
    double_optin: bool | None = None
    contact: dict[str, Any] | None = None
    campaign_defaults: dict[str, Any] | None = None


class ListMember(ApiModel):
    """A contact subscribed to a list. ``id`` is the subscriber hash."""

    id: str | None = None
    email_address: str | None = None
    unique_email_id: str | None = None
    status: str | None = None
    list_id: str | None = None
    merge_fields: dict[str, Any] | None = None
    tags: list[dict[str, Any]] | None = None


class ListMembersCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "members"

    list_id: str | None = None
    members: list[ListMember] = Field(default_factory=list)


class ListMemberParams(ApiModel):
    """Body for adding or updating a list member."""

    email_address: str | None = None
    status: str | None = None
    status_if_new: str | None = None
    email_type: str | None = None
    merge_fields: dict[str, Any] | None = None
    interests: dict[str, bool] | None = None
    language: str | None = None
    vip: bool | None = None
    tags: list[str] | None = None


class ListWebhook(ApiModel):
    id: str | None = None
    url: str | None = None
    list_id: str | None = None
    events: dict[str, bool] | None = None
    sources: dict[str, bool] | None = None


class ListWebhooksCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "webhooks"

    list_id: str | None = None
    webhooks: list[ListWebhook] = Field(default_factory=list)


class ListWebhookParams(ApiModel):
    url: str | None = None
    events: dict[str, bool] | None = None
    sources: dict[str, bool] | None = None


class MergeField(ApiModel):
    merge_id: int | None = None
    tag: str | None = None
    name: str | None = None
    type: str | None = None
    required: bool | None = None
    default_value: str | None = None
    list_id: str | None = None


class MergeFieldsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "merge_fields"

    list_id: str | None = None
    merge_fields: list[MergeField] = Field(default_factory=list)


class MergeFieldParams(ApiModel):
    """Body for creating or updating a merge field."""

    tag: str | None = None
    name: str | None = None
    type: str | None = None
    required: bool | None = None
    default_value: str | None = None
    public: bool | None = None
    display_order: int | None = None
    options: dict[str, Any] | None = None
    help_text: str | None = None


class BatchMembersParams(ApiModel):
    """Body for subscribing or updating many members in one call."""

    members: list[ListMemberParams]
    update_existing: bool = False


class BatchMemberError(ApiModel):
    email_address: str | None = None
    error: str | None = None


class BatchMembersResult(ApiModel):
    new_members: list[ListMember] = Field(default_factory=list)
    updated_members: list[ListMember] = Field(default_factory=list)
    errors: list[BatchMemberError] = Field(default_factory=list)
    total_created: int = 0
    total_updated: int = 0
    error_count: int = 0


class SignupForm(ApiModel):
    header: dict[str, Any] | None = None
    contents: list[dict[str, Any]] | None = None
    styles: list[dict[str, Any]] | None = None
    signup_form_url: str | None = None
    list_id: str | None = None


class SignupFormsCollection(CollectionEnvelope):
    items_field: ClassVar[str] = "signup_forms"

    signup_forms: list[SignupForm] = Field(default_factory=list)


class SignupFormParams(ApiModel):
    """Body for customizing the list's default signup form."""

    header: dict[str, Any] | None = None
    contents: list[dict[str, Any]] | None = None
    styles: list[dict[str, Any]] | None = None
