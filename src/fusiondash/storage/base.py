"""Abstract read interface over the dashboard's entity store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TypeVar

from fusiondash.errors import UnknownResourceError
from fusiondash.models import (
    Account,
    Activity,
    Clarification,
    CompanySettings,
    CrunchColumn,
    Discussion,
    Edge,
    EdgeMetric,
    EdgeOutcome,
    Idea,
    IdeaScore,
    Milestone,
    NotificationCategory,
    NotificationPreference,
    Process,
    ProcessStep,
    Project,
    ProjectTask,
    ProjectTeamMember,
    ProjectVersion,
    User,
)
from fusiondash.models.base import Entity
from fusiondash.models.user import CURRENT_USER_ID

E = TypeVar("E", bound=Entity)


@dataclass(frozen=True)
class Query:
    """A routed read: one table, equality filters, optional ordering."""

    table: str
    filters: dict[str, str] = field(default_factory=dict)
    single: bool = False
    order_by: str | None = None


# resource name -> table for top-level collections
_COLLECTIONS: dict[str, str] = {
    "users": "users",
    "ideas": "ideas",
    "edges": "edges",
    "edge-outcomes": "edge_outcomes",
    "edge-metrics": "edge_metrics",
    "projects": "projects",
    "activities": "activities",
    "notification-categories": "notification_categories",
    "notification-preferences": "notification_prefs",
    "crunch-columns": "crunch_columns",
    "processes": "processes",
}

_SINGLETONS: dict[str, Query] = {
    "account": Query("account_config", single=True),
    "company-settings": Query("company_settings", single=True),
    "current-user": Query("users", {"id": CURRENT_USER_ID}, single=True),
}

# "{parent}/{id}/{child}" -> (table, foreign key column, single, order_by)
_NESTED: dict[tuple[str, str], tuple[str, str, bool, str | None]] = {
    ("ideas", "score"): ("idea_scores", "idea_id", True, None),
    ("ideas", "edge"): ("edges", "idea_id", True, None),
    ("edges", "outcomes"): ("edge_outcomes", "edge_id", False, None),
    ("projects", "team"): ("project_team", "project_id", False, None),
    ("projects", "milestones"): ("milestones", "project_id", False, "sort_order"),
    ("projects", "tasks"): ("project_tasks", "project_id", False, None),
    ("projects", "discussions"): ("discussions", "project_id", False, None),
    ("projects", "versions"): ("project_versions", "project_id", False, None),
    ("projects", "clarifications"): ("clarifications", "project_id", False, None),
    ("processes", "steps"): ("process_steps", "process_id", False, "sort_order"),
}

_ADDRESSABLE = {"users", "ideas", "edges", "projects", "processes"}

TABLES: tuple[str, ...] = tuple(
    sorted(
        set(_COLLECTIONS.values())
        | {q.table for q in _SINGLETONS.values()}
        | {route[0] for route in _NESTED.values()}
    )
)


def resolve_resource(resource: str) -> Query:
    """Route a resource name such as ``projects/p1/team`` to a table query."""
    parts = [p for p in resource.split("/") if p]

    if len(parts) == 1:
        name = parts[0]
        if name in _COLLECTIONS:
            return Query(_COLLECTIONS[name])
        if name in _SINGLETONS:
            return _SINGLETONS[name]

    if len(parts) == 2 and parts[0] in _ADDRESSABLE:
        return Query(_COLLECTIONS[parts[0]], {"id": parts[1]}, single=True)

    if len(parts) == 3:
        parent, parent_id, child = parts
        route = _NESTED.get((parent, child))
        if route:
            table, column, single, order_by = route
            return Query(table, {column: parent_id}, single=single, order_by=order_by)

    raise UnknownResourceError(f"Unknown resource: {resource!r}")


class StorageBackend(ABC):
    """Read-only entity store.

    Subclasses implement :meth:`_select`; everything else is routed through
    :meth:`read`, and the typed helpers validate rows into entity models so
    composers only ever see well-shaped data.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections or load data."""

    @abstractmethod
    async def close(self) -> None:
        """Close all connections."""

    @abstractmethod
    async def _select(self, query: Query) -> list[dict[str, Any]]:
        """Return the rows of ``query.table`` matching every filter."""

    @abstractmethod
    async def count(self, table: str) -> int:
        """Count rows in a table (0 if the table is absent)."""

    async def read(self, resource: str) -> Any:
        """Read a resource: a list of rows, or one row (or None) for singletons."""
        query = resolve_resource(resource)
        rows = await self._select(query)
        if query.single:
            return rows[0] if rows else None
        return rows

    async def get_stats(self) -> dict[str, int]:
        return {table: await self.count(table) for table in TABLES}

    async def _many(self, resource: str, model: type[E]) -> list[E]:
        rows = await self.read(resource)
        return [model.model_validate(row) for row in rows]

    async def _one(self, resource: str, model: type[E]) -> E | None:
        row = await self.read(resource)
        return model.model_validate(row) if row is not None else None

    # --- Users ---

    async def users(self) -> list[User]:
        return await self._many("users", User)

    async def current_user(self) -> User | None:
        return await self._one("current-user", User)

    # --- Ideas ---

    async def ideas(self) -> list[Idea]:
        return await self._many("ideas", Idea)

    async def idea(self, idea_id: str) -> Idea | None:
        return await self._one(f"ideas/{idea_id}", Idea)

    async def idea_score(self, idea_id: str) -> IdeaScore | None:
        return await self._one(f"ideas/{idea_id}/score", IdeaScore)

    # --- Edges ---

    async def edges(self) -> list[Edge]:
        return await self._many("edges", Edge)

    async def edge_for_idea(self, idea_id: str) -> Edge | None:
        return await self._one(f"ideas/{idea_id}/edge", Edge)

    async def edge_outcomes(self) -> list[EdgeOutcome]:
        return await self._many("edge-outcomes", EdgeOutcome)

    async def outcomes_for_edge(self, edge_id: str) -> list[EdgeOutcome]:
        return await self._many(f"edges/{edge_id}/outcomes", EdgeOutcome)

    async def edge_metrics(self) -> list[EdgeMetric]:
        return await self._many("edge-metrics", EdgeMetric)

    # --- Projects ---

    async def projects(self) -> list[Project]:
        return await self._many("projects", Project)

    async def project(self, project_id: str) -> Project | None:
        return await self._one(f"projects/{project_id}", Project)

    async def project_team(self, project_id: str) -> list[ProjectTeamMember]:
        return await self._many(f"projects/{project_id}/team", ProjectTeamMember)

    async def milestones(self, project_id: str) -> list[Milestone]:
        return await self._many(f"projects/{project_id}/milestones", Milestone)

    async def project_tasks(self, project_id: str) -> list[ProjectTask]:
        return await self._many(f"projects/{project_id}/tasks", ProjectTask)

    async def discussions(self, project_id: str) -> list[Discussion]:
        return await self._many(f"projects/{project_id}/discussions", Discussion)

    async def project_versions(self, project_id: str) -> list[ProjectVersion]:
        return await self._many(f"projects/{project_id}/versions", ProjectVersion)

    async def clarifications(self, project_id: str) -> list[Clarification]:
        return await self._many(f"projects/{project_id}/clarifications", Clarification)

    # --- Workspace ---

    async def activities(self) -> list[Activity]:
        return await self._many("activities", Activity)

    async def account(self) -> Account | None:
        return await self._one("account", Account)

    async def company_settings(self) -> CompanySettings | None:
        return await self._one("company-settings", CompanySettings)

    async def notification_categories(self) -> list[NotificationCategory]:
        return await self._many("notification-categories", NotificationCategory)

    async def notification_preferences(self) -> list[NotificationPreference]:
        return await self._many("notification-preferences", NotificationPreference)

    # --- Tools ---

    async def crunch_columns(self) -> list[CrunchColumn]:
        return await self._many("crunch-columns", CrunchColumn)

    async def processes(self) -> list[Process]:
        return await self._many("processes", Process)

    async def process_steps(self, process_id: str) -> list[ProcessStep]:
        return await self._many(f"processes/{process_id}/steps", ProcessStep)
