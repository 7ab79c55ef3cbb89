"""View models: the only shapes handed to the presentation layer."""

from fusiondash.views.account import (
    Account,
    ActivityItem,
    CompanySettings,
    CurrentUser,
    NotificationCategory,
    Profile,
)
from fusiondash.views.edges import EdgeCompletion, EdgeData, EdgeListItem, EdgeSummary
from fusiondash.views.ideas import (
    ApprovalIdea,
    ConversionIdea,
    EdgeIdea,
    IdeaScoreView,
    IdeaView,
    ReviewIdea,
)
from fusiondash.views.projects import (
    Clarification,
    EngineeringProject,
    ProjectDetail,
    ProjectView,
)
from fusiondash.views.team import ManagedUser, TeamMember
from fusiondash.views.tools import CrunchColumn, DashboardStat, Flow, GaugeCard

__all__ = [
    "Account",
    "ActivityItem",
    "ApprovalIdea",
    "Clarification",
    "CompanySettings",
    "ConversionIdea",
    "CrunchColumn",
    "CurrentUser",
    "DashboardStat",
    "EdgeCompletion",
    "EdgeData",
    "EdgeIdea",
    "EdgeListItem",
    "EdgeSummary",
    "EngineeringProject",
    "Flow",
    "GaugeCard",
    "IdeaScoreView",
    "IdeaView",
    "ManagedUser",
    "NotificationCategory",
    "Profile",
    "ProjectDetail",
    "ProjectView",
    "ReviewIdea",
]
