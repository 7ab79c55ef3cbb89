"""Edge view models."""

from __future__ import annotations

from fusiondash.views.base import ViewModel


class MetricView(ViewModel):
    id: str
    name: str
    target: str
    unit: str
    current: str


class OutcomeView(ViewModel):
    id: str
    description: str
    metrics: list[MetricView] = []


class ImpactHorizons(ViewModel):
    short_term: str = ""
    mid_term: str = ""
    long_term: str = ""


class EdgeData(ViewModel):
    """An edge with its outcomes and their metrics nested underneath."""

    outcomes: list[OutcomeView] = []
    impact: ImpactHorizons = ImpactHorizons()
    confidence: str | None = None
    owner: str = ""


class EdgeListItem(ViewModel):
    id: str
    idea_id: str
    idea_title: str
    status: str
    outcomes_count: int
    metrics_count: int
    confidence: str | None
    owner: str
    updated_at: str


class EdgeCompletion(ViewModel):
    has_outcomes: bool
    all_outcomes_have_metrics: bool
    has_impact: bool
    has_owner: bool
    has_confidence: bool
    completion_percent: int
    is_complete: bool

    def missing_requirements(self) -> list[str]:
        """Human-readable gaps that keep the edge from being complete."""
        missing = []
        if not self.has_outcomes:
            missing.append("Add at least one business outcome")
        elif not self.all_outcomes_have_metrics:
            missing.append("Add at least one metric to each outcome")
        if not self.has_impact:
            missing.append("Describe expected impact")
        if not self.has_owner:
            missing.append("Assign an owner")
        return missing


class EdgeSummary(ViewModel):
    """Edge data plus its derived completion, as shown by the edge editor."""

    idea_id: str
    edge: EdgeData
    completion: EdgeCompletion
    status: str
    missing: list[str]
