"""Idea view models."""

from __future__ import annotations

from fusiondash.views.base import ViewModel


class IdeaView(ViewModel):
    id: str
    title: str
    score: float
    estimated_impact: float
    estimated_time: float
    estimated_cost: float
    priority: int
    status: str
    submitted_by: str
    edge_status: str


class ReviewIdea(ViewModel):
    id: str
    title: str
    submitted_by: str
    priority: str
    readiness: str
    edge_status: str
    score: float
    impact: str
    effort: str
    waiting_days: int
    category: str


class ConversionIdea(ViewModel):
    id: str
    title: str
    problem_statement: str
    proposed_solution: str
    expected_outcome: str
    score: float
    estimated_time: str
    estimated_cost: str


class ImpactSummary(ViewModel):
    level: str
    description: str


class EffortSummary(ViewModel):
    level: str
    time_estimate: str
    team_size: str


class CostSummary(ViewModel):
    estimate: str
    breakdown: str


class Risk(ViewModel):
    title: str = ""
    severity: str = "medium"
    mitigation: str = ""


class ApprovalIdea(ViewModel):
    id: str
    title: str
    description: str
    submitted_by: str
    submitted_at: str
    priority: str
    score: float
    category: str
    impact: ImpactSummary
    effort: EffortSummary
    cost: CostSummary
    risks: list[Risk]
    assumptions: list[str]
    alignments: list[str]


class ScoreBreakdown(ViewModel):
    label: str = ""
    score: float = 0
    max_score: float = 0
    reason: str = ""


class ScoreSection(ViewModel):
    score: float = 0
    breakdown: list[ScoreBreakdown] = []


class IdeaScoreView(ViewModel):
    overall: float = 0
    impact: ScoreSection = ScoreSection()
    feasibility: ScoreSection = ScoreSection()
    efficiency: ScoreSection = ScoreSection()
    estimated_time: str = ""
    estimated_cost: str = ""
    recommendation: str = ""


class EdgeIdea(ViewModel):
    """Idea header shown above the edge editor."""

    title: str
    problem: str
    solution: str
    submitted_by: str
    score: float
