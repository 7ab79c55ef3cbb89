"""Derived-field policies.

Each default or derived value is defined once here and reused by every
composer, so thresholds and fallbacks cannot drift between views.
"""

from __future__ import annotations

from fusiondash.views.edges import EdgeCompletion, EdgeData

UNKNOWN_USER = "Unknown"
DEFAULT_CONFIDENCE = "medium"
MISSING_EDGE_STATUS = "missing"
INCOMPLETE_READINESS = "incomplete"

PRIORITY_HIGH_THRESHOLD = 80.0
PRIORITY_MEDIUM_THRESHOLD = 60.0

COMPLETION_STEP = 20


def priority_tier(
    score: float,
    *,
    high: float = PRIORITY_HIGH_THRESHOLD,
    medium: float = PRIORITY_MEDIUM_THRESHOLD,
) -> str:
    """Map a 0-100 score to ``high`` / ``medium`` / ``low``."""
    if score >= high:
        return "high"
    if score >= medium:
        return "medium"
    return "low"


def resolve_confidence(value: str | None, default: str | None = None) -> str | None:
    """Stored confidence, or ``default`` when it is unset."""
    return value or default


def resolve_edge_status(value: str | None) -> str:
    return value or MISSING_EDGE_STATUS


def resolve_readiness(value: str | None) -> str:
    return value or INCOMPLETE_READINESS


def edge_completion(data: EdgeData) -> EdgeCompletion:
    """Compute completion signals from the current edge data.

    Confidence counts toward the percentage but is not required for the edge
    to be complete.
    """
    has_outcomes = len(data.outcomes) > 0
    all_outcomes_have_metrics = has_outcomes and all(o.metrics for o in data.outcomes)
    has_impact = any(
        text.strip()
        for text in (data.impact.short_term, data.impact.mid_term, data.impact.long_term)
    )
    has_owner = bool(data.owner.strip())
    has_confidence = bool(data.confidence)

    signals = [has_outcomes, all_outcomes_have_metrics, has_impact, has_owner, has_confidence]
    return EdgeCompletion(
        has_outcomes=has_outcomes,
        all_outcomes_have_metrics=all_outcomes_have_metrics,
        has_impact=has_impact,
        has_owner=has_owner,
        has_confidence=has_confidence,
        completion_percent=COMPLETION_STEP * sum(signals),
        is_complete=has_outcomes and all_outcomes_have_metrics and has_impact and has_owner,
    )


def edge_status_label(completion: EdgeCompletion) -> str:
    """``complete``, ``draft`` if any signal is present, else ``missing``."""
    if completion.is_complete:
        return "complete"
    if completion.completion_percent > 0:
        return "draft"
    return MISSING_EDGE_STATUS
