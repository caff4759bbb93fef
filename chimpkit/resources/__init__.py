"""Endpoint groups and bound resources of the Marketing API."""

from .api_root import ApiRoot
from .authorized_apps import AuthorizedApps, AuthorizedAppsFilter
from .automations import (
    Automations,
    AutomationsFilter,
    AutomationWorkflowResource,
    WorkflowEmailResource,
)
from .base import Endpoint, Resource, field_params
from .campaigns import CampaignFeedbackResource, CampaignFilter, CampaignResource, Campaigns
from .conversations import (
    ConversationResource,
    Conversations,
    ConversationsFilter,
    MessagesFilter,
)
from .landing_pages import LandingPageResource, LandingPages, LandingPagesFilter
from .list_members import ListMemberResource, MemberNoteResource, subscriber_hash
from .list_segments import (
    InterestCategoriesFilter,
    InterestCategoryResource,
    InterestResource,
    SegmentResource,
    SegmentsFilter,
)
from .lists import (
    GrowthHistoryFilter,
    ListFilter,
    ListResource,
    Lists,
    ListWebhookResource,
    MembersFilter,
    MergeFieldResource,
)
from .reports import Reports, ReportsFilter

__all__ = [
    "ApiRoot",
    "AuthorizedApps",
    "AuthorizedAppsFilter",
    "AutomationWorkflowResource",
    "Automations",
    "AutomationsFilter",
    "CampaignFeedbackResource",
    "CampaignFilter",
    "CampaignResource",
    "Campaigns",
    "ConversationResource",
    "Conversations",
    "ConversationsFilter",
    "Endpoint",
    "GrowthHistoryFilter",
    "InterestCategoriesFilter",
    "InterestCategoryResource",
    "InterestResource",
    "LandingPageResource",
    "LandingPages",
    "LandingPagesFilter",
    "ListFilter",
    "ListMemberResource",
    "ListResource",
    "ListWebhookResource",
    "Lists",
    "MemberNoteResource",
    "MembersFilter",
    "MergeFieldResource",
    "MessagesFilter",
    "Reports",
    "ReportsFilter",
    "Resource",
    "SegmentResource",
    "SegmentsFilter",
    "WorkflowEmailResource",
    "field_params",
    "subscriber_hash",
]
