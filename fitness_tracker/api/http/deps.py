"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from fitness_tracker.api.http.app_data import ApplicationDependencies
from fitness_tracker.core.services import DbSessionService, TrainingService, UserService
from fitness_tracker.entities.training import SqlTrainingRepository, TrainingRepository
from fitness_tracker.entities.user import SqlUserRepository, UserRepository


def get_db_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(db_service: DbSessionService = Depends(get_db_service)) -> Iterator[Session]:
    """Yield a request-scoped session, committed when the request succeeds."""
    with db_service.session_scope() as session:
        yield session


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return SqlUserRepository(session)


def get_training_repository(session: Session = Depends(get_session)) -> TrainingRepository:
    return SqlTrainingRepository(session)


def get_user_service(
    users: UserRepository = Depends(get_user_repository),
    trainings: TrainingRepository = Depends(get_training_repository),
) -> UserService:
    return UserService(users, trainings)


def get_training_service(
    trainings: TrainingRepository = Depends(get_training_repository),
    users: UserRepository = Depends(get_user_repository),
) -> TrainingService:
    return TrainingService(trainings, users)
