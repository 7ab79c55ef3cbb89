"""FastMCP server with 6 read-only view tools and 1 status resource."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from fastmcp import FastMCP
from pydantic import Field

from fusiondash.config import Config
from fusiondash.core.account import AccountComposer
from fusiondash.core.dashboard import DashboardComposer
from fusiondash.core.directory import UserDirectory
from fusiondash.core.edges import EdgeComposer
from fusiondash.core.ideas import IdeaComposer
from fusiondash.core.projects import ProjectComposer
from fusiondash.core.team import TeamComposer
from fusiondash.core.tools import ToolsComposer
from fusiondash.errors import NotFoundError
from fusiondash.storage import open_store
from fusiondash.storage.base import StorageBackend
from fusiondash.views.base import ViewModel

logger = logging.getLogger(__name__)


def _json(data: dict[str, Any]) -> str:
    return json.dumps(data, default=str)


def _ok(data: dict[str, Any]) -> str:
    """Return a versioned JSON success response."""
    return _json({**data, "_v": "1.0"})


def _err(msg: str) -> str:
    """Return a versioned JSON error response."""
    return _json({"_v": "1.0", "error": msg})


def _view(view: ViewModel | None) -> str:
    if view is None:
        return _ok({"found": False})
    return _json(view.to_response())


def _views(key: str, views: list[Any]) -> str:
    items = [v.model_dump(mode="json", by_alias=True) for v in views]
    return _ok({"count": len(items), key: items})


def create_server(data_path: str, config: Config | None = None) -> FastMCP:
    """Create FastMCP server over a snapshot file or SQLite database."""
    mcp = FastMCP("fusiondash", version="0.1.0")
    config = config or Config()

    state: dict[str, Any] = {}
    _lock = asyncio.Lock()

    async def _store() -> StorageBackend:
        async with _lock:
            if "init_failed" in state:
                raise RuntimeError(f"Store init previously failed for {data_path}")
            if "store" not in state:
                try:
                    state["store"] = await open_store(Path(data_path))
                except Exception as e:
                    state["init_failed"] = True
                    logger.error("Failed to open data store: %s", e)
                    raise RuntimeError(f"Store init failed: {data_path}") from e
        return state["store"]

    async def _page() -> tuple[StorageBackend, UserDirectory]:
        # One directory per tool call, i.e. per page composition.
        store = await _store()
        return store, UserDirectory(store, unknown_name=config.unknown_user_name)

    def _need(value: str | None, name: str, action: str) -> str | None:
        if not value or not value.strip():
            return f"{name} is required for {action}"
        return None

    # ── fd_ideas ──────────────────────────────────────────────

    @mcp.tool()
    async def fd_ideas(
        action: Annotated[
            Literal["list", "review", "conversion", "approval", "score", "edge_header"],
            Field(description="list | review | conversion | approval | score | edge_header"),
        ],
        idea_id: Annotated[
            str | None,
            Field(description="Idea ID (conversion, approval, score, edge_header)"),
        ] = None,
    ) -> str:
        """Idea views: list, review queue, and single-idea pages."""
        store, directory = await _page()
        ideas = IdeaComposer(store, directory, config=config)

        if action == "list":
            return _views("ideas", await ideas.list_ideas())
        if action == "review":
            return _views("ideas", await ideas.review_queue())

        missing = _need(idea_id, "idea_id", action)
        if missing:
            return _err(missing)
        idea_id = idea_id.strip()
        try:
            if action == "conversion":
                return _view(await ideas.idea_for_conversion(idea_id))
            if action == "approval":
                return _view(await ideas.idea_for_approval(idea_id))
            if action == "score":
                return _view(await ideas.idea_score(idea_id))
            if action == "edge_header":
                return _view(await ideas.idea_for_edge(idea_id))
        except (NotFoundError, ValueError) as e:
            return _err(str(e))

        return _err(f"Unknown action: {action}")

    # ── fd_edges ──────────────────────────────────────────────

    @mcp.tool()
    async def fd_edges(
        action: Annotated[
            Literal["list", "data", "prefill", "summary"],
            Field(description="list | data | prefill | summary"),
        ],
        idea_id: Annotated[
            str | None,
            Field(description="Idea ID whose edge to load (data, prefill, summary)"),
        ] = None,
    ) -> str:
        """Edge views: inventory, edge data, form pre-fill, completion summary."""
        store, directory = await _page()
        edges = EdgeComposer(store, directory, config=config)

        if action == "list":
            return _views("edges", await edges.edge_list())

        missing = _need(idea_id, "idea_id", action)
        if missing:
            return _err(missing)
        idea_id = idea_id.strip()
        if action == "data":
            return _view(await edges.edge_data_for_idea(idea_id))
        if action == "prefill":
            return _view(await edges.edge_data_with_confidence(idea_id))
        if action == "summary":
            return _view(await edges.edge_summary(idea_id))

        return _err(f"Unknown action: {action}")

    # ── fd_projects ───────────────────────────────────────────

    @mcp.tool()
    async def fd_projects(
        action: Annotated[
            Literal["list", "detail", "engineering", "clarifications"],
            Field(description="list | detail | engineering | clarifications"),
        ],
        project_id: Annotated[
            str | None,
            Field(description="Project ID (detail, engineering, clarifications)"),
        ] = None,
    ) -> str:
        """Project views: list, detail page, engineering requirements, clarifications."""
        store, directory = await _page()
        projects = ProjectComposer(store, directory, config=config)

        if action == "list":
            return _views("projects", await projects.list_projects())

        missing = _need(project_id, "project_id", action)
        if missing:
            return _err(missing)
        project_id = project_id.strip()
        try:
            if action == "detail":
                return _view(await projects.project_detail(project_id))
            if action == "engineering":
                return _view(await projects.project_for_engineering(project_id))
            if action == "clarifications":
                return _views("clarifications", await projects.clarifications(project_id))
        except (NotFoundError, ValueError) as e:
            return _err(str(e))

        return _err(f"Unknown action: {action}")

    # ── fd_team ───────────────────────────────────────────────

    @mcp.tool()
    async def fd_team(
        action: Annotated[
            Literal["members", "managed"],
            Field(description="members | managed"),
        ],
    ) -> str:
        """Team roster (top members) or the user-management table."""
        store, directory = await _page()
        team = TeamComposer(store, directory, config=config)

        if action == "members":
            return _views("members", await team.team_members())
        if action == "managed":
            return _views("users", await team.managed_users())

        return _err(f"Unknown action: {action}")

    # ── fd_account ────────────────────────────────────────────

    @mcp.tool()
    async def fd_account(
        action: Annotated[
            Literal["account", "profile", "current_user", "activity", "notifications", "settings"],
            Field(description="account | profile | current_user | activity | notifications | settings"),
        ],
    ) -> str:
        """Account, profile, activity feed, notification and company settings views."""
        store, directory = await _page()
        account = AccountComposer(store, directory, config=config)

        if action == "account":
            return _view(await account.account())
        if action == "profile":
            return _view(await account.profile())
        if action == "current_user":
            return _view(await account.current_user())
        if action == "activity":
            return _views("activities", await account.activity_feed())
        if action == "notifications":
            return _views("categories", await account.notification_categories())
        if action == "settings":
            return _view(await account.company_settings())

        return _err(f"Unknown action: {action}")

    # ── fd_tools ──────────────────────────────────────────────

    @mcp.tool()
    async def fd_tools(
        action: Annotated[
            Literal["crunch", "flow", "stats", "gauges"],
            Field(description="crunch | flow | stats | gauges"),
        ],
    ) -> str:
        """Crunch columns, process flow, and dashboard stats/gauges."""
        store, directory = await _page()
        tools = ToolsComposer(store, directory, config=config)
        dashboard = DashboardComposer(store, directory, config=config)

        if action == "crunch":
            return _views("columns", await tools.crunch_columns())
        if action == "flow":
            return _view(await tools.flow())
        if action == "stats":
            return _views("stats", await dashboard.stats())
        if action == "gauges":
            return _views("gauges", await dashboard.gauges())

        return _err(f"Unknown action: {action}")

    # ── Resources ─────────────────────────────────────────────

    @mcp.resource("fusion://status")
    async def fd_resource_status() -> str:
        """Row counts per table of the backing store."""
        store = await _store()
        return _ok({"data_path": data_path, "tables": await store.get_stats()})

    return mcp
