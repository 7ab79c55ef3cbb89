"""Edge (business case) entities: edge, outcome, metric."""

from __future__ import annotations

from fusiondash.models.base import Entity

VALID_CONFIDENCES = {"high", "medium", "low"}
VALID_EDGE_STATUSES = {"complete", "draft", "missing"}


class Edge(Entity):
    """The business case attached 1:1 to an idea."""

    idea_id: str
    owner_id: str = ""
    status: str = ""
    confidence: str | None = None
    impact_short_term: str = ""
    impact_mid_term: str = ""
    impact_long_term: str = ""
    updated_at: str = ""


class EdgeOutcome(Entity):
    """An expected business outcome of an edge."""

    edge_id: str
    description: str = ""


class EdgeMetric(Entity):
    """A measurable target attached to an outcome."""

    outcome_id: str
    name: str = ""
    target: str = ""
    unit: str = ""
    current: str = ""
