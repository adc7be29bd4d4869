"""Training inspection CLI commands."""

import typer
from rich.table import Table

from fitness_tracker.core.services import TrainingService
from fitness_tracker.entities.training import ActivityType, SqlTrainingRepository
from fitness_tracker.entities.user import SqlUserRepository

from .utils import cli_session, console

trainings_app = typer.Typer(help="Inspect stored trainings")


@trainings_app.command("list")
def list_trainings(
    user_id: int | None = typer.Option(None, "--user-id", "-u", help="Only this user's trainings"),
    activity_type: ActivityType | None = typer.Option(
        None, "--activity-type", "-a", help="Only trainings of this type", case_sensitive=False
    ),
) -> None:
    """List trainings, optionally filtered by user and activity type."""
    with cli_session() as session:
        service = TrainingService(SqlTrainingRepository(session), SqlUserRepository(session))
        if user_id is not None:
            trainings = service.get_trainings_by_user(user_id)
        elif activity_type is not None:
            trainings = service.get_trainings_by_activity_type(activity_type)
        else:
            trainings = service.get_all_trainings()

        if user_id is not None and activity_type is not None:
            trainings = [t for t in trainings if t.activity_type == activity_type]

    if not trainings:
        console.print("[yellow]No trainings found[/yellow]")
        return

    table = Table(title="Trainings")
    table.add_column("ID", style="cyan")
    table.add_column("User", style="magenta")
    table.add_column("Activity", style="green")
    table.add_column("Start", style="blue")
    table.add_column("End", style="blue")
    table.add_column("Distance", justify="right")
    table.add_column("Avg Speed", justify="right")

    for training in trainings:
        table.add_row(
            str(training.id),
            f"{training.user.first_name} {training.user.last_name}",
            training.activity_type.display_name,
            training.start_time.isoformat(sep=" "),
            training.end_time.isoformat(sep=" "),
            f"{training.distance:.2f}",
            f"{training.average_speed:.2f}",
        )

    console.print(table)
