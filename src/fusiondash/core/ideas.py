"""Idea view composer.

Builds the idea list, the review queue, and the single-idea views used by the
conversion, approval, scoring and edge pages.
"""

import asyncio
import logging

from fusiondash.core.base import Composer
from fusiondash.core.joins import parse_json
from fusiondash.core.policies import priority_tier, resolve_edge_status, resolve_readiness
from fusiondash.errors import NotFoundError
from fusiondash.models.idea import Idea
from fusiondash.views.ideas import (
    ApprovalIdea,
    ConversionIdea,
    CostSummary,
    EdgeIdea,
    EffortSummary,
    IdeaScoreView,
    IdeaView,
    ImpactSummary,
    ReviewIdea,
    Risk,
    ScoreBreakdown,
    ScoreSection,
)

logger = logging.getLogger(__name__)


class IdeaComposer(Composer):
    """Composes idea-centric view models."""

    def _priority(self, score: float) -> str:
        return priority_tier(
            score,
            high=self._config.priority_high_threshold,
            medium=self._config.priority_medium_threshold,
        )

    async def list_ideas(self, raw_ideas: list[Idea] | None = None) -> list[IdeaView]:
        """Map every idea to a list row, preserving length and order.

        Args:
            raw_ideas: Already-fetched ideas; read from the store when omitted

        Returns:
            One IdeaView per input idea
        """
        directory = self._user_directory()
        if raw_ideas is None:
            _, ideas = await asyncio.gather(directory.load(), self._store.ideas())
        else:
            await directory.load()
            ideas = raw_ideas

        return [
            IdeaView(
                id=idea.id,
                title=idea.title,
                score=idea.score,
                estimated_impact=idea.estimated_impact,
                estimated_time=idea.estimated_time,
                estimated_cost=idea.estimated_cost,
                priority=idea.priority,
                status=idea.status,
                submitted_by=directory.display_name(idea.submitted_by_id),
                edge_status=idea.edge_status,
            )
            for idea in ideas
        ]

    async def review_queue(self) -> list[ReviewIdea]:
        """Ideas that declare a readiness, with their priority tier attached."""
        directory = self._user_directory()
        _, ideas = await asyncio.gather(directory.load(), self._store.ideas())

        queue = [
            ReviewIdea(
                id=idea.id,
                title=idea.title,
                submitted_by=directory.display_name(idea.submitted_by_id),
                priority=self._priority(idea.score),
                readiness=resolve_readiness(idea.readiness),
                edge_status=resolve_edge_status(idea.edge_status),
                score=idea.score,
                impact=idea.impact_label,
                effort=idea.effort_label,
                waiting_days=idea.waiting_days,
                category=idea.category,
            )
            for idea in ideas
            if idea.readiness
        ]
        logger.debug("Review queue: %d of %d ideas", len(queue), len(ideas))
        return queue

    async def idea_for_conversion(self, idea_id: str) -> ConversionIdea:
        """Join an idea with its score row; the score row wins when present.

        Raises:
            NotFoundError: If the idea does not exist
        """
        idea, score = await asyncio.gather(
            self._store.idea(idea_id),
            self._store.idea_score(idea_id),
        )
        if idea is None:
            raise NotFoundError("Idea", idea_id)

        return ConversionIdea(
            id=idea.id,
            title=idea.title,
            problem_statement=idea.problem_statement,
            proposed_solution=idea.proposed_solution,
            expected_outcome=idea.expected_outcome,
            score=score.overall if score else idea.score,
            estimated_time=score.estimated_time if score else "",
            estimated_cost=score.estimated_cost if score else "",
        )

    async def idea_for_approval(self, idea_id: str) -> ApprovalIdea:
        """Idea, submitter and parsed risk/assumption/alignment lists.

        Raises:
            NotFoundError: If the idea does not exist
        """
        directory = self._user_directory()
        _, idea = await asyncio.gather(directory.load(), self._store.idea(idea_id))
        if idea is None:
            raise NotFoundError("Idea", idea_id)

        risks = [
            Risk.model_validate(risk)
            for risk in parse_json(idea.risks, [])
            if isinstance(risk, dict)
        ]

        return ApprovalIdea(
            id=idea.id,
            title=idea.title,
            description=idea.description,
            submitted_by=directory.display_name(idea.submitted_by_id),
            submitted_at=idea.submitted_at,
            priority=self._priority(idea.score),
            score=idea.score,
            category=idea.category,
            impact=ImpactSummary(level=idea.impact_label, description=idea.description),
            effort=EffortSummary(
                level=idea.effort_label,
                time_estimate=idea.effort_time_estimate,
                team_size=idea.effort_team_size,
            ),
            cost=CostSummary(estimate=idea.cost_estimate, breakdown=idea.cost_breakdown),
            risks=risks,
            assumptions=[str(a) for a in parse_json(idea.assumptions, [])],
            alignments=[str(a) for a in parse_json(idea.alignments, [])],
        )

    async def idea_score(self, idea_id: str) -> IdeaScoreView:
        """Score breakdown for an idea; zeroed when it has not been scored yet.

        Raises:
            NotFoundError: If the idea does not exist
        """
        idea, score = await asyncio.gather(
            self._store.idea(idea_id),
            self._store.idea_score(idea_id),
        )
        if idea is None:
            raise NotFoundError("Idea", idea_id)
        if score is None:
            return IdeaScoreView()

        return IdeaScoreView(
            overall=score.overall,
            impact=_section(score.impact_score, score.impact_breakdown),
            feasibility=_section(score.feasibility_score, score.feasibility_breakdown),
            efficiency=_section(score.efficiency_score, score.efficiency_breakdown),
            estimated_time=score.estimated_time,
            estimated_cost=score.estimated_cost,
            recommendation=score.recommendation,
        )

    async def idea_for_edge(self, idea_id: str) -> EdgeIdea:
        """Idea header for the edge editor.

        Raises:
            NotFoundError: If the idea does not exist
        """
        directory = self._user_directory()
        _, idea = await asyncio.gather(directory.load(), self._store.idea(idea_id))
        if idea is None:
            raise NotFoundError("Idea", idea_id)

        return EdgeIdea(
            title=idea.title,
            problem=idea.problem_statement,
            solution=idea.proposed_solution,
            submitted_by=directory.display_name(idea.submitted_by_id),
            score=idea.score,
        )


def _section(score: float, breakdown: str | list) -> ScoreSection:
    items = [
        ScoreBreakdown.model_validate(item)
        for item in parse_json(breakdown, [])
        if isinstance(item, dict)
    ]
    return ScoreSection(score=score, breakdown=items)
