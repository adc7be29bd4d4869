"""User inspection CLI commands."""

import typer
from rich.table import Table

from fitness_tracker.core.services import UserService
from fitness_tracker.entities.training import SqlTrainingRepository
from fitness_tracker.entities.user import SqlUserRepository, User

from .utils import cli_session, console

users_app = typer.Typer(help="Inspect stored users")


def _render(users: list[User], title: str) -> None:
    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Birthdate", style="green")
    table.add_column("Email", style="blue")

    for user in users:
        table.add_row(
            str(user.id),
            user.first_name,
            user.last_name,
            user.birthdate.isoformat(),
            user.email,
        )

    console.print(table)


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    with cli_session() as session:
        service = UserService(SqlUserRepository(session), SqlTrainingRepository(session))
        _render(service.get_all_users(), "Users")


@users_app.command("find")
def find_users(
    email: str = typer.Option(..., "--email", "-e", help="Email or email fragment"),
    exact: bool = typer.Option(False, "--exact", help="Require an exact email match"),
) -> None:
    """Find users by email."""
    with cli_session() as session:
        service = UserService(SqlUserRepository(session), SqlTrainingRepository(session))
        if exact:
            user = service.get_user_by_email(email)
            users = [user] if user is not None else []
        else:
            users = service.search_users_by_email(email)
        _render(users, f"Users matching '{email}'")
