"""Dashboard summary composer: headline counts and gauge aggregates."""

import asyncio

from fusiondash.core.base import Composer
from fusiondash.models.idea import Idea
from fusiondash.models.project import Project
from fusiondash.views.tools import DashboardStat, GaugeCard, GaugeReading

DONE_PROGRESS = 90
PENDING_REVIEW = "pending_review"


class DashboardComposer(Composer):
    async def stats(
        self,
        ideas: list[Idea] | None = None,
        projects: list[Project] | None = None,
    ) -> list[DashboardStat]:
        """Idea/project counts, done projects and ideas awaiting review.

        Pass already-fetched rows to avoid re-reading them on the same page.
        """
        if ideas is None and projects is None:
            ideas, projects = await asyncio.gather(self._store.ideas(), self._store.projects())
        elif ideas is None:
            ideas = await self._store.ideas()
        elif projects is None:
            projects = await self._store.projects()

        done = sum(1 for p in projects if p.progress >= DONE_PROGRESS)
        review = sum(1 for i in ideas if i.status == PENDING_REVIEW)
        return [
            DashboardStat(label="Ideas", value=len(ideas), trend=f"+{min(3, len(ideas))}"),
            DashboardStat(
                label="Projects", value=len(projects), trend=f"+{min(1, len(projects))}"
            ),
            DashboardStat(label="Done", value=done, trend=""),
            DashboardStat(label="Review", value=review, trend=""),
        ]

    async def gauges(self, projects: list[Project] | None = None) -> list[GaugeCard]:
        """Time, cost and impact totals across all projects."""
        if projects is None:
            projects = await self._store.projects()

        est_time = sum(p.estimated_time for p in projects)
        act_time = sum(p.actual_time for p in projects)
        est_cost = sum(p.estimated_cost for p in projects)
        act_cost = sum(p.actual_cost for p in projects)
        avg_est_impact = (
            round(sum(p.estimated_impact for p in projects) / len(projects)) if projects else 0
        )
        with_impact = [p for p in projects if p.actual_impact > 0]
        avg_act_impact = (
            round(sum(p.actual_impact for p in with_impact) / len(with_impact)) if with_impact else 0
        )

        total_days = round(est_time / 24)
        elapsed_days = round(act_time / 48)
        roi = round(act_cost * 0.6)
        return [
            GaugeCard(
                title="Time Tracking",
                theme="green",
                outer=GaugeReading(
                    value=round(act_time / 24),
                    max=total_days,
                    label="Total Duration",
                    display=f"{total_days}d",
                ),
                inner=GaugeReading(
                    value=elapsed_days,
                    max=total_days,
                    label="Days Elapsed",
                    display=f"{elapsed_days}d",
                ),
            ),
            GaugeCard(
                title="Cost Overview",
                theme="blue",
                outer=GaugeReading(
                    value=act_cost,
                    max=est_cost,
                    label="Budget Spent",
                    display=f"${act_cost / 1000:.1f}K",
                ),
                inner=GaugeReading(
                    value=roi, max=est_cost, label="ROI Generated", display=f"${roi / 1000:.0f}K"
                ),
            ),
            GaugeCard(
                title="Project Impact",
                theme="amber",
                outer=GaugeReading(
                    value=avg_est_impact,
                    max=100,
                    label="Target Score",
                    display=f"{avg_est_impact}%",
                ),
                inner=GaugeReading(
                    value=avg_act_impact,
                    max=100,
                    label="Current Score",
                    display=f"{avg_act_impact}%",
                ),
            ),
        ]
