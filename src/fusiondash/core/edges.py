"""Edge view composer."""

import asyncio
import logging

from fusiondash.core.base import Composer
from fusiondash.core.directory import UserDirectory
from fusiondash.core.joins import group_by, index_by
from fusiondash.core.policies import (
    DEFAULT_CONFIDENCE,
    edge_completion,
    edge_status_label,
    resolve_confidence,
    resolve_edge_status,
)
from fusiondash.models.edge import Edge
from fusiondash.views.edges import (
    EdgeData,
    EdgeListItem,
    EdgeSummary,
    ImpactHorizons,
    MetricView,
    OutcomeView,
)

logger = logging.getLogger(__name__)


class EdgeComposer(Composer):
    """Composes edge inventory and single-edge views."""

    async def edge_list(self) -> list[EdgeListItem]:
        """Every edge with its idea title and outcome/metric counts.

        Status falls back to ``missing``; an unset confidence stays ``None``
        here (the inventory shows it as unset rather than pre-filled).
        """
        directory = self._user_directory()
        _, edges, ideas, outcomes, metrics = await asyncio.gather(
            directory.load(),
            self._store.edges(),
            self._store.ideas(),
            self._store.edge_outcomes(),
            self._store.edge_metrics(),
        )

        ideas_by_id = index_by(ideas, lambda i: i.id)
        outcomes_by_edge = group_by(outcomes, lambda o: o.edge_id)
        metric_counts = {
            outcome_id: len(group)
            for outcome_id, group in group_by(metrics, lambda m: m.outcome_id).items()
        }

        items = []
        for edge in edges:
            edge_outcomes = outcomes_by_edge.get(edge.id, [])
            outcome_ids = {o.id for o in edge_outcomes}
            idea = ideas_by_id.get(edge.idea_id)
            if idea is None:
                logger.warning("Edge %s references missing idea %s", edge.id, edge.idea_id)
            items.append(
                EdgeListItem(
                    id=edge.id,
                    idea_id=edge.idea_id,
                    idea_title=idea.title if idea else "",
                    status=resolve_edge_status(edge.status),
                    outcomes_count=len(edge_outcomes),
                    metrics_count=sum(metric_counts.get(oid, 0) for oid in outcome_ids),
                    confidence=resolve_confidence(edge.confidence),
                    owner=directory.owner_name(edge.owner_id),
                    updated_at=edge.updated_at,
                )
            )
        return items

    async def edge_data_for_idea(self, idea_id: str) -> EdgeData | None:
        """Edge of an idea with outcomes and nested metrics, or None if it has none."""
        edge = await self._store.edge_for_idea(idea_id)
        if edge is None:
            return None
        return await self._compose_edge(edge, self._user_directory())

    async def edge_data_with_confidence(self, idea_id: str) -> EdgeData:
        """Edge data for form pre-fill: confidence defaults to ``medium``.

        An idea without an edge yields the empty structure instead of None.
        """
        data = await self.edge_data_for_idea(idea_id)
        return with_default_confidence(data)

    async def edge_summary(self, idea_id: str) -> EdgeSummary:
        """Edge data plus completion signals and the derived status label."""
        data = await self.edge_data_for_idea(idea_id)
        if data is None:
            data = EdgeData()
        completion = edge_completion(data)
        return EdgeSummary(
            idea_id=idea_id,
            edge=data,
            completion=completion,
            status=edge_status_label(completion),
            missing=completion.missing_requirements(),
        )

    async def _compose_edge(self, edge: Edge, directory: UserDirectory) -> EdgeData:
        _, outcomes, metrics = await asyncio.gather(
            directory.load(),
            self._store.outcomes_for_edge(edge.id),
            self._store.edge_metrics(),
        )
        metrics_by_outcome = group_by(metrics, lambda m: m.outcome_id)

        return EdgeData(
            outcomes=[
                OutcomeView(
                    id=outcome.id,
                    description=outcome.description,
                    metrics=[
                        MetricView(
                            id=m.id, name=m.name, target=m.target, unit=m.unit, current=m.current
                        )
                        for m in metrics_by_outcome.get(outcome.id, [])
                    ],
                )
                for outcome in outcomes
            ],
            impact=ImpactHorizons(
                short_term=edge.impact_short_term,
                mid_term=edge.impact_mid_term,
                long_term=edge.impact_long_term,
            ),
            confidence=resolve_confidence(edge.confidence),
            owner=directory.owner_name(edge.owner_id),
        )


def with_default_confidence(data: EdgeData | None) -> EdgeData:
    """Canonical pre-fill shape: empty edge when absent, confidence never unset."""
    if data is None:
        return EdgeData(confidence=DEFAULT_CONFIDENCE)
    return data.model_copy(
        update={"confidence": resolve_confidence(data.confidence, DEFAULT_CONFIDENCE)}
    )
