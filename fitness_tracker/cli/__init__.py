"""Main CLI application module."""

import typer

from fitness_tracker.api.utils.app_startup import configure_logging

from .db_commands import db_app
from .server_commands import serve
from .training_commands import trainings_app
from .user_commands import users_app

app = typer.Typer(
    help="Fitness Tracker CLI - database, data inspection and server commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")
app.add_typer(trainings_app, name="trainings")
app.command(name="serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
