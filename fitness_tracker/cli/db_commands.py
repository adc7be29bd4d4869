"""Database management CLI commands."""

import typer
from rich.prompt import Confirm

from fitness_tracker.core.services import DbManageService, DbSessionService
from fitness_tracker.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="Manage the database schema")


@db_app.command("init")
def init() -> None:
    """Create all tables that do not exist yet."""
    init_db()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop and recreate all tables."""
    if not force and not Confirm.ask("[red]This deletes all users and trainings. Continue?[/red]"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    manager = DbManageService(DbSessionService().engine)
    manager.drop_all()
    manager.create_all()
    console.print("[green]✅ Database reset[/green]")
