"""Fusion dashboard entity models."""

from fusiondash.models.edge import Edge, EdgeMetric, EdgeOutcome
from fusiondash.models.idea import Idea, IdeaScore
from fusiondash.models.project import (
    Clarification,
    Discussion,
    Milestone,
    Project,
    ProjectTask,
    ProjectTeamMember,
    ProjectVersion,
)
from fusiondash.models.user import CURRENT_USER_ID, User
from fusiondash.models.workspace import (
    Account,
    Activity,
    CompanySettings,
    CrunchColumn,
    NotificationCategory,
    NotificationPreference,
    Process,
    ProcessStep,
)

__all__ = [
    "CURRENT_USER_ID",
    "Account",
    "Activity",
    "Clarification",
    "CompanySettings",
    "CrunchColumn",
    "Discussion",
    "Edge",
    "EdgeMetric",
    "EdgeOutcome",
    "Idea",
    "IdeaScore",
    "Milestone",
    "NotificationCategory",
    "NotificationPreference",
    "Process",
    "ProcessStep",
    "Project",
    "ProjectTask",
    "ProjectTeamMember",
    "ProjectVersion",
    "User",
]
