"""Project view composer."""

import asyncio
import logging

from fusiondash.core.base import Composer
from fusiondash.core.edges import EdgeComposer, with_default_confidence
from fusiondash.core.joins import parse_json
from fusiondash.errors import NotFoundError
from fusiondash.models.project import Project
from fusiondash.views.projects import (
    BaselineCurrent,
    BusinessContext,
    Clarification,
    DiscussionView,
    EngineeringProject,
    LinkedIdea,
    MilestoneView,
    ProjectDetail,
    ProjectMetrics,
    ProjectView,
    TaskView,
    TeamSeat,
    VersionView,
)

logger = logging.getLogger(__name__)


class ProjectComposer(Composer):
    """Composes project list, detail, engineering and clarification views."""

    async def list_projects(self, raw_projects: list[Project] | None = None) -> list[ProjectView]:
        """Flat mapping of projects, no joins."""
        projects = raw_projects if raw_projects is not None else await self._store.projects()
        return [
            ProjectView(
                id=p.id,
                title=p.title,
                status=p.status,
                priority_score=p.priority_score,
                estimated_time=p.estimated_time,
                actual_time=p.actual_time,
                estimated_cost=p.estimated_cost,
                actual_cost=p.actual_cost,
                estimated_impact=p.estimated_impact,
                actual_impact=p.actual_impact,
                progress=p.progress,
                priority=p.priority,
            )
            for p in projects
        ]

    async def project_detail(self, project_id: str) -> ProjectDetail:
        """Full project page: team, milestones, tasks, discussions, versions, edge.

        All name lookups share one user directory built for this call. The
        edge is looked up by the linked idea, falling back to the project id.
        Any failed read aborts the whole composition.

        Raises:
            NotFoundError: If the project does not exist
        """
        directory = self._user_directory()
        project, team, milestones, tasks, discussions, versions, _ = await asyncio.gather(
            self._store.project(project_id),
            self._store.project_team(project_id),
            self._store.milestones(project_id),
            self._store.project_tasks(project_id),
            self._store.discussions(project_id),
            self._store.project_versions(project_id),
            directory.load(),
        )
        if project is None:
            raise NotFoundError("Project", project_id)

        edges = EdgeComposer(self._store, directory, config=self._config)
        edge = await edges.edge_data_for_idea(project.linked_idea_id or project_id)
        name = directory.display_name

        return ProjectDetail(
            id=project.id,
            title=project.title,
            description=project.description,
            status=project.status,
            progress=project.progress,
            start_date=project.start_date,
            target_end_date=project.target_end_date,
            project_lead=name(project.lead_id),
            metrics=ProjectMetrics(
                time=BaselineCurrent(baseline=project.estimated_time, current=project.actual_time),
                cost=BaselineCurrent(baseline=project.estimated_cost, current=project.actual_cost),
                impact=BaselineCurrent(
                    baseline=project.estimated_impact, current=project.actual_impact
                ),
            ),
            edge=with_default_confidence(edge),
            team=[TeamSeat(id=m.user_id, name=name(m.user_id), role=m.role) for m in team],
            milestones=[
                MilestoneView(id=m.id, title=m.title, status=m.status, date=m.date)
                for m in milestones
            ],
            versions=[
                VersionView(
                    id=v.id,
                    version=v.version,
                    date=v.date,
                    changes=v.changes,
                    author=name(v.author_id),
                )
                for v in versions
            ],
            discussions=[
                DiscussionView(id=d.id, author=name(d.author_id), date=d.date, message=d.message)
                for d in discussions
            ],
            tasks=[
                TaskView(
                    name=t.name,
                    priority=t.priority,
                    desc=t.description,
                    skills=[str(s) for s in parse_json(t.skills, [])],
                    hours=t.hours,
                    assigned=name(t.assigned_to_id),
                )
                for t in tasks
            ],
        )

    async def project_for_engineering(self, project_id: str) -> EngineeringProject:
        """Engineering requirements view with parsed business context.

        Raises:
            NotFoundError: If the project does not exist
        """
        directory = self._user_directory()
        _, project, team = await asyncio.gather(
            directory.load(),
            self._store.project(project_id),
            self._store.project_team(project_id),
        )
        if project is None:
            raise NotFoundError("Project", project_id)

        linked = None
        if project.linked_idea_id:
            linked = await self._store.idea(project.linked_idea_id)
            if linked is None:
                logger.warning(
                    "Project %s links missing idea %s", project.id, project.linked_idea_id
                )

        context = parse_json(project.business_context, {})
        return EngineeringProject(
            id=project.id,
            title=project.title,
            description=project.description,
            business_context=BusinessContext(
                problem=_text(context.get("problem")),
                expected_outcome=_text(context.get("expectedOutcome")),
                success_metrics=_strings(context.get("successMetrics")),
                constraints=_strings(context.get("constraints")),
            ),
            team=[
                TeamSeat(
                    id=m.user_id,
                    name=directory.display_name(m.user_id),
                    role=m.role,
                    type=m.type,
                )
                for m in team
            ],
            linked_idea=(
                LinkedIdea(id=linked.id, title=linked.title, score=linked.score)
                if linked
                else LinkedIdea()
            ),
            timeline=project.timeline_label,
            budget=project.budget_label,
        )

    async def clarifications(self, project_id: str) -> list[Clarification]:
        """Clarifications with asker/answerer names; answer fields only when set."""
        directory = self._user_directory()
        _, rows = await asyncio.gather(
            directory.load(),
            self._store.clarifications(project_id),
        )
        return [
            Clarification(
                id=c.id,
                question=c.question,
                asked_by=directory.display_name(c.asked_by_id),
                asked_at=c.asked_at,
                status=c.status,
                answer=c.answer or None,
                answered_by=directory.display_name(c.answered_by_id) if c.answered_by_id else None,
                answered_at=c.answered_at or None,
            )
            for c in rows
        ]


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


def _strings(value: object) -> list[str]:
    return [str(v) for v in parse_json(value, [])]
