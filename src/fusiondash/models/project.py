"""Project entity and its child records."""

from __future__ import annotations

from typing import Any

from fusiondash.models.base import Entity

VALID_STATUSES = {"approved", "under_review", "sent_back"}
VALID_CLARIFICATION_STATUSES = {"pending", "answered"}


class Project(Entity):
    """A project, optionally converted from an idea."""

    title: str = ""
    description: str = ""
    status: str = ""
    progress: float = 0
    start_date: str = ""
    target_end_date: str = ""
    lead_id: str = ""
    estimated_time: float = 0
    actual_time: float = 0
    estimated_cost: float = 0
    actual_cost: float = 0
    estimated_impact: float = 0
    actual_impact: float = 0
    priority: int = 0
    priority_score: float = 0
    linked_idea_id: str | None = None
    business_context: str | dict[str, Any] = ""  # JSON object when stored as text
    timeline_label: str = ""
    budget_label: str = ""


class ProjectTeamMember(Entity):
    project_id: str
    user_id: str = ""
    role: str = ""
    type: str = ""


class Milestone(Entity):
    project_id: str
    title: str = ""
    status: str = ""
    date: str = ""
    sort_order: int = 0


class ProjectTask(Entity):
    project_id: str
    name: str = ""
    priority: str = ""
    description: str = ""
    skills: str | list[Any] = ""
    hours: float = 0
    assigned_to_id: str = ""


class Discussion(Entity):
    project_id: str
    author_id: str = ""
    date: str = ""
    message: str = ""


class ProjectVersion(Entity):
    project_id: str
    version: str = ""
    date: str = ""
    changes: str = ""
    author_id: str = ""


class Clarification(Entity):
    """A question raised by engineering about a project."""

    project_id: str
    question: str = ""
    asked_by_id: str = ""
    asked_at: str = ""
    status: str = "pending"
    answer: str | None = None
    answered_by_id: str | None = None
    answered_at: str | None = None
