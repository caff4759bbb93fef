"""Chimpkit - Typed async client for the Mailchimp Marketing API."""

from .client import MailchimpClient
from .core import (
    API_VERSION,
    DEFAULT_DATACENTER,
    ChimpkitError,
    Credentials,
    ErrorEnvelope,
    MailchimpAPIError,
    ResourceIdentityError,
    get_base_url,
    parse_api_key,
)
from .pagination import (
    ModelBuilder,
    PaginatedIterator,
    ResourceBuilder,
    ResourceClassBuilder,
    ResourceFilter,
    SimpleFilter,
)
from .resources import (
    ApiRoot,
    AuthorizedApps,
    AuthorizedAppsFilter,
    Automations,
    AutomationsFilter,
    AutomationWorkflowResource,
    CampaignFeedbackResource,
    CampaignFilter,
    CampaignResource,
    Campaigns,
    ConversationResource,
    Conversations,
    ConversationsFilter,
    GrowthHistoryFilter,
    InterestCategoriesFilter,
    InterestCategoryResource,
    InterestResource,
    LandingPageResource,
    LandingPages,
    LandingPagesFilter,
    ListFilter,
    ListMemberResource,
    ListResource,
    Lists,
    ListWebhookResource,
    MemberNoteResource,
    MembersFilter,
    MergeFieldResource,
    MessagesFilter,
    Reports,
    ReportsFilter,
    SegmentResource,
    SegmentsFilter,
    WorkflowEmailResource,
)
from .runtime import AiohttpRequester, HttpRequester, RESTTransport, StubRequester

__version__ = "0.1.0"

__all__ = [
    # Client
    "MailchimpClient",
    # Core
    "API_VERSION",
    "DEFAULT_DATACENTER",
    "ChimpkitError",
    "Credentials",
    "ErrorEnvelope",
    "MailchimpAPIError",
    "ResourceIdentityError",
    "get_base_url",
    "parse_api_key",
    # Runtime
    "AiohttpRequester",
    "HttpRequester",
    "RESTTransport",
    "StubRequester",
    # Pagination
    "ModelBuilder",
    "PaginatedIterator",
    "ResourceBuilder",
    "ResourceClassBuilder",
    "ResourceFilter",
    "SimpleFilter",
    # Resources
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
    "SegmentResource",
    "SegmentsFilter",
    "WorkflowEmailResource",
]
