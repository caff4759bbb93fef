"""Data models for Mailchimp API payloads.

Architecture:
    This module exports the Pydantic v2 models used to decode responses and
    encode request bodies. Models declare the identifying fields of each
    resource only; any other field returned by the API is preserved as an
    extra attribute rather than modelled.

Design Decisions:
    - Lenient models: ``extra="allow"`` and optional fields, so schema drift on
      the server never turns into a decode failure
    - One ``CollectionEnvelope`` subclass per paginated endpoint, naming its
      records array through ``items_field``
    - ``*Params`` models for request bodies; ``None`` fields are not sent
"""

from .api_root import ApiRootInfo
from .authorized_apps import AuthorizedApp, AuthorizedAppsCollection, CreatedAuthorizedApp
from .automations import (
    AutomationParams,
    AutomationsCollection,
    AutomationSubscriber,
    AutomationWorkflow,
    EmailQueueCollection,
    QueuedSubscriber,
    RemovedSubscribersCollection,
    WorkflowEmail,
    WorkflowEmailParams,
    WorkflowEmailsCollection,
)
from .campaigns import (
    Campaign,
    CampaignContent,
    CampaignContentParams,
    CampaignFeedback,
    CampaignFeedbackCollection,
    CampaignFeedbackParams,
    CampaignParams,
    CampaignsCollection,
    ScheduleParams,
    SendChecklist,
    SendTestParams,
)
from .common import ApiModel, CollectionEnvelope, EmptyResponse, Link
from .conversations import (
    Conversation,
    ConversationMessage,
    ConversationMessagesCollection,
    ConversationsCollection,
    MessageParams,
)
from .landing_pages import LandingPage, LandingPageParams, LandingPagesCollection
from .list_members import (
    MemberActivity,
    MemberActivityCollection,
    MemberGoal,
    MemberGoalsCollection,
    MemberNote,
    MemberNoteParams,
    MemberNotesCollection,
    MemberTag,
    MemberTagsCollection,
    MemberTagsParams,
    MemberTagUpdate,
)
from .list_reports import (
    AbuseReport,
    AbuseReportsCollection,
    GrowthHistory,
    GrowthHistoryCollection,
    ListActivity,
    ListActivityCollection,
    ListClient,
    ListClientsCollection,
    ListLocation,
    ListLocationsCollection,
)
from .list_segments import (
    Interest,
    InterestCategoriesCollection,
    InterestCategory,
    InterestCategoryParams,
    InterestParams,
    InterestsCollection,
    Segment,
    SegmentBatchParams,
    SegmentBatchResult,
    SegmentMembersCollection,
    SegmentParams,
    SegmentsCollection,
)
from .lists import (
    BatchMemberError,
    BatchMembersParams,
    BatchMembersResult,
    ListMember,
    ListMemberParams,
    ListMembersCollection,
    ListParams,
    ListsCollection,
    ListWebhook,
    ListWebhookParams,
    ListWebhooksCollection,
    MailingList,
    MergeField,
    MergeFieldParams,
    MergeFieldsCollection,
    SignupForm,
    SignupFormParams,
    SignupFormsCollection,
)
from .reports import Report, ReportsCollection

__all__ = [
    "AbuseReport",
    "AbuseReportsCollection",
    "ApiModel",
    "ApiRootInfo",
    "AuthorizedApp",
    "AuthorizedAppsCollection",
    "AutomationParams",
    "AutomationSubscriber",
    "AutomationWorkflow",
    "AutomationsCollection",
    "BatchMemberError",
    "BatchMembersParams",
    "BatchMembersResult",
    "Campaign",
    "CampaignContent",
    "CampaignContentParams",
    "CampaignFeedback",
    "CampaignFeedbackCollection",
    "CampaignFeedbackParams",
    "CampaignParams",
    "CampaignsCollection",
    "CollectionEnvelope",
    "Conversation",
    "ConversationMessage",
    "ConversationMessagesCollection",
    "ConversationsCollection",
    "CreatedAuthorizedApp",
    "EmailQueueCollection",
    "EmptyResponse",
    "GrowthHistory",
    "GrowthHistoryCollection",
    "Interest",
    "InterestCategoriesCollection",
    "InterestCategory",
    "InterestCategoryParams",
    "InterestParams",
    "InterestsCollection",
    "LandingPage",
    "LandingPageParams",
    "LandingPagesCollection",
    "Link",
    "ListActivity",
    "ListActivityCollection",
    "ListClient",
    "ListClientsCollection",
    "ListLocation",
    "ListLocationsCollection",
    "ListMember",
    "ListMemberParams",
    "ListMembersCollection",
    "ListParams",
    "ListWebhook",
    "ListWebhookParams",
    "ListWebhooksCollection",
    "ListsCollection",
    "MailingList",
    "MemberActivity",
    "MemberActivityCollection",
    "MemberGoal",
    "MemberGoalsCollection",
    "MemberNote",
    "MemberNoteParams",
    "MemberNotesCollection",
    "MemberTag",
    "MemberTagUpdate",
    "MemberTagsCollection",
    "MemberTagsParams",
    "MergeField",
    "MergeFieldParams",
    "MergeFieldsCollection",
    "MessageParams",
    "QueuedSubscriber",
    "RemovedSubscribersCollection",
    "Report",
    "ReportsCollection",
    "ScheduleParams",
    "Segment",
    "SegmentBatchParams",
    "SegmentBatchResult",
    "SegmentMembersCollection",
    "SegmentParams",
    "SegmentsCollection",
    "SendChecklist",
    "SendTestParams",
    "SignupForm",
    "SignupFormParams",
    "SignupFormsCollection",
    "WorkflowEmail",
    "WorkflowEmailParams",
    "WorkflowEmailsCollection",
]
