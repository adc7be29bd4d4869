"""Database initialization script."""

from fitness_tracker.core.services import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables."""
    DbManageService(DbSessionService().engine).create_all()


if __name__ == "__main__":
    init_db()
