"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
- dto.py / mapper.py: Transport projections and conversions
"""

from .training import ActivityType, Training, TrainingRepository, TrainingTable
from .user import User, UserRepository, UserTable

__all__ = [
    "ActivityType",
    "Training",
    "TrainingRepository",
    "TrainingTable",
    "User",
    "UserRepository",
    "UserTable",
]
