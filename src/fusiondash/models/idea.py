"""Idea and idea score entities."""

from __future__ import annotations

from typing import Any

from fusiondash.models.base import Entity

VALID_STATUSES = {"draft", "scored", "pending_review", "approved", "rejected"}
VALID_READINESS = {"ready", "needs-info", "incomplete"}


class Idea(Entity):
    """A submitted idea."""

    title: str = ""
    score: float = 0
    estimated_impact: float = 0
    estimated_time: float = 0
    estimated_cost: float = 0
    priority: int = 0
    status: str = ""
    submitted_by_id: str = ""
    edge_status: str = ""
    problem_statement: str = ""
    proposed_solution: str = ""
    expected_outcome: str = ""
    category: str = ""
    readiness: str = ""
    waiting_days: int = 0
    impact_label: str = ""
    effort_label: str = ""
    description: str = ""
    submitted_at: str = ""
    risks: str | list[Any] = ""
    assumptions: str | list[Any] = ""
    alignments: str | list[Any] = ""
    effort_time_estimate: str = ""
    effort_team_size: str = ""
    cost_estimate: str = ""
    cost_breakdown: str = ""


class IdeaScore(Entity):
    """The computed score of an idea (at most one per idea)."""

    idea_id: str
    overall: float = 0
    impact_score: float = 0
    impact_breakdown: str | list[Any] = ""
    feasibility_score: float = 0
    feasibility_breakdown: str | list[Any] = ""
    efficiency_score: float = 0
    efficiency_breakdown: str | list[Any] = ""
    estimated_time: str = ""
    estimated_cost: str = ""
    recommendation: str = ""
