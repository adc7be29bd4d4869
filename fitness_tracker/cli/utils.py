from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from sqlmodel import Session

from fitness_tracker.core.services import DbSessionService

console = Console()


@contextmanager
def cli_session() -> Iterator[Session]:
    """Open a transactional session against the configured database."""
    with DbSessionService().session_scope() as session:
        yield session
