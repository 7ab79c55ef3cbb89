"""Composers that turn entity rows into view models."""

from fusiondash.core.account import AccountComposer
from fusiondash.core.dashboard import DashboardComposer
from fusiondash.core.directory import UserDirectory
from fusiondash.core.edges import EdgeComposer
from fusiondash.core.ideas import IdeaComposer
from fusiondash.core.joins import group_by, index_by, parse_json
from fusiondash.core.policies import edge_completion, edge_status_label, priority_tier
from fusiondash.core.projects import ProjectComposer
from fusiondash.core.team import TeamComposer
from fusiondash.core.tools import ToolsComposer

__all__ = [
    "AccountComposer",
    "DashboardComposer",
    "EdgeComposer",
    "IdeaComposer",
    "ProjectComposer",
    "TeamComposer",
    "ToolsComposer",
    "UserDirectory",
    "edge_completion",
    "edge_status_label",
    "group_by",
    "index_by",
    "parse_json",
    "priority_tier",
]
