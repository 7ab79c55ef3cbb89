"""CLI: init, serve, status, show."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

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

ViewFactory = Callable[[StorageBackend, UserDirectory, Config, str | None], Awaitable[Any]]

# view name -> (needs id, factory)
VIEWS: dict[str, tuple[bool, ViewFactory]] = {
    "ideas": (False, lambda s, d, c, _: IdeaComposer(s, d, config=c).list_ideas()),
    "review-queue": (False, lambda s, d, c, _: IdeaComposer(s, d, config=c).review_queue()),
    "conversion": (True, lambda s, d, c, i: IdeaComposer(s, d, config=c).idea_for_conversion(i)),
    "approval": (True, lambda s, d, c, i: IdeaComposer(s, d, config=c).idea_for_approval(i)),
    "score": (True, lambda s, d, c, i: IdeaComposer(s, d, config=c).idea_score(i)),
    "edges": (False, lambda s, d, c, _: EdgeComposer(s, d, config=c).edge_list()),
    "edge": (True, lambda s, d, c, i: EdgeComposer(s, d, config=c).edge_summary(i)),
    "projects": (False, lambda s, d, c, _: ProjectComposer(s, d, config=c).list_projects()),
    "project": (True, lambda s, d, c, i: ProjectComposer(s, d, config=c).project_detail(i)),
    "engineering": (
        True,
        lambda s, d, c, i: ProjectComposer(s, d, config=c).project_for_engineering(i),
    ),
    "clarifications": (
        True,
        lambda s, d, c, i: ProjectComposer(s, d, config=c).clarifications(i),
    ),
    "team": (False, lambda s, d, c, _: TeamComposer(s, d, config=c).team_members()),
    "users": (False, lambda s, d, c, _: TeamComposer(s, d, config=c).managed_users()),
    "account": (False, lambda s, d, c, _: AccountComposer(s, d, config=c).account()),
    "profile": (False, lambda s, d, c, _: AccountComposer(s, d, config=c).profile()),
    "activity": (False, lambda s, d, c, _: AccountComposer(s, d, config=c).activity_feed()),
    "notifications": (
        False,
        lambda s, d, c, _: AccountComposer(s, d, config=c).notification_categories(),
    ),
    "settings": (False, lambda s, d, c, _: AccountComposer(s, d, config=c).company_settings()),
    "crunch": (False, lambda s, d, c, _: ToolsComposer(s, d, config=c).crunch_columns()),
    "flow": (False, lambda s, d, c, _: ToolsComposer(s, d, config=c).flow()),
    "stats": (False, lambda s, d, c, _: DashboardComposer(s, d, config=c).stats()),
    "gauges": (False, lambda s, d, c, _: DashboardComposer(s, d, config=c).gauges()),
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve_data(config: Config, data: str | None) -> Path:
    path = Path(data).expanduser().resolve() if data else config.default_data_path
    if not path.exists():
        click.echo(f"Error: No data at {path}", err=True)
        sys.exit(1)
    return path


@click.group()
@click.version_option(package_name="fusion-dashboard")
@click.option("--workspace", type=click.Path(), default=None, help="Workspace directory")
@click.pass_context
def main(ctx: click.Context, workspace: str | None) -> None:
    """Fusion dashboard: compose ideas, edges and projects into views."""
    config = Config.load(Path(workspace).expanduser().resolve() if workspace else None)
    _setup_logging(config.log_level)
    ctx.obj = config


@main.command()
@click.argument("data", type=click.Path(exists=True))
@click.pass_obj
def init(config: Config, data: str) -> None:
    """Point the workspace at a snapshot file or SQLite database."""
    config.data_path = Path(data).expanduser().resolve()
    config.save()
    click.echo(f"Initialized workspace at {config.workspace_path}")
    click.echo(f"Data: {config.data_path}")


@main.command()
@click.option("--data", type=click.Path(), default=None, help="Snapshot or database path")
@click.option("--transport", type=click.Choice(["stdio"]), default="stdio")
@click.pass_obj
def serve(config: Config, data: str | None, transport: str) -> None:
    """Start the MCP server."""
    path = _resolve_data(config, data)

    from fusiondash.server import create_server

    server = create_server(str(path), config)
    server.run(transport=transport)  # type: ignore[arg-type]


@main.command()
@click.option("--data", type=click.Path(), default=None, help="Snapshot or database path")
@click.pass_obj
def status(config: Config, data: str | None) -> None:
    """Show row counts of the backing store."""
    path = _resolve_data(config, data)

    async def _status() -> dict:
        store = await open_store(path)
        try:
            return await store.get_stats()
        finally:
            await store.close()

    stats = asyncio.run(_status())
    click.echo(json.dumps(stats, indent=2))


@main.command()
@click.argument("view", type=click.Choice(sorted(VIEWS)))
@click.argument("entity_id", required=False)
@click.option("--data", type=click.Path(), default=None, help="Snapshot or database path")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON instead of a table")
@click.pass_obj
def show(config: Config, view: str, entity_id: str | None, data: str | None, as_json: bool) -> None:
    """Compose a view and print it."""
    needs_id, factory = VIEWS[view]
    if needs_id and not entity_id:
        click.echo(f"Error: '{view}' needs an ID argument", err=True)
        sys.exit(1)
    path = _resolve_data(config, data)

    async def _compose() -> Any:
        store = await open_store(path)
        try:
            directory = UserDirectory(store, unknown_name=config.unknown_user_name)
            return await factory(store, directory, config, entity_id)
        finally:
            await store.close()

    try:
        result = asyncio.run(_compose())
    except NotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    console = Console()
    if result is None:
        console.print(f"[dim]No {view} found.[/dim]")
        return
    if as_json:
        click.echo(json.dumps(_dump(result), indent=2))
        return
    if isinstance(result, list):
        console.print(_table(view, [_dump(r) for r in result]))
    else:
        console.print_json(data=_dump(result))


def _dump(result: ViewModel | list[ViewModel]) -> Any:
    if isinstance(result, list):
        return [r.model_dump(mode="json", by_alias=True) for r in result]
    return result.model_dump(mode="json", by_alias=True)


def _table(title: str, rows: list[dict[str, Any]]) -> Table:
    """Tabulate scalar columns; nested values are summarised by length."""
    table = Table(title=f"{title} ({len(rows)})")
    columns = list(rows[0]) if rows else []
    for column in columns:
        table.add_column(column)
    for row in rows:
        cells = []
        for column in columns:
            value = row.get(column)
            if isinstance(value, list | dict):
                cells.append(f"[{len(value)}]")
            elif value is None:
                cells.append("-")
            else:
                cells.append(str(value))
        table.add_row(*cells)
    return table
