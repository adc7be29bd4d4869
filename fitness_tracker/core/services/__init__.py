"""Core services exports."""

from .database import DbManageService, DbSessionService
from .training_service import TrainingService
from .user_service import UserService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "TrainingService",
    "UserService",
]
