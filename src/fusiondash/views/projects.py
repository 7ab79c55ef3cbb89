"""Project view models."""

from __future__ import annotations

from typing import ClassVar

from fusiondash.views.base import ViewModel
from fusiondash.views.edges import EdgeData


class ProjectView(ViewModel):
    id: str
    title: str
    status: str
    priority_score: float
    estimated_time: float
    actual_time: float
    estimated_cost: float
    actual_cost: float
    estimated_impact: float
    actual_impact: float
    progress: float
    priority: int


class BaselineCurrent(ViewModel):
    baseline: float
    current: float


class ProjectMetrics(ViewModel):
    time: BaselineCurrent
    cost: BaselineCurrent
    impact: BaselineCurrent


class TeamSeat(ViewModel):
    id: str
    name: str
    role: str
    type: str = ""


class MilestoneView(ViewModel):
    id: str
    title: str
    status: str
    date: str


class VersionView(ViewModel):
    id: str
    version: str
    date: str
    changes: str
    author: str


class DiscussionView(ViewModel):
    id: str
    author: str
    date: str
    message: str


class TaskView(ViewModel):
    name: str
    priority: str
    desc: str
    skills: list[str]
    hours: float
    assigned: str


class ProjectDetail(ViewModel):
    id: str
    title: str
    description: str
    status: str
    progress: float
    start_date: str
    target_end_date: str
    project_lead: str
    metrics: ProjectMetrics
    edge: EdgeData
    team: list[TeamSeat]
    milestones: list[MilestoneView]
    versions: list[VersionView]
    discussions: list[DiscussionView]
    tasks: list[TaskView]


class BusinessContext(ViewModel):
    problem: str = ""
    expected_outcome: str = ""
    success_metrics: list[str] = []
    constraints: list[str] = []


class LinkedIdea(ViewModel):
    id: str = ""
    title: str = ""
    score: float = 0


class EngineeringProject(ViewModel):
    id: str
    title: str
    description: str
    business_context: BusinessContext
    team: list[TeamSeat]
    linked_idea: LinkedIdea
    timeline: str
    budget: str


class Clarification(ViewModel):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset(
        {"answer", "answered_by", "answered_at"}
    )

    id: str
    question: str
    asked_by: str
    asked_at: str
    status: str
    answer: str | None = None
    answered_by: str | None = None
    answered_at: str | None = None
