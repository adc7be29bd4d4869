"""Training entity module.

- Training / NewTraining / TrainingAttributes: Domain entities
- ActivityType: Closed set of activity kinds
- TrainingTable: Database persistence model
- TrainingRepository: Query interface with SQL and in-memory backends
- Training DTOs and mapper functions: transport projections
"""

from . import mapper
from .activity_type import ActivityType
from .dto import (
    TrainingAttributesDto,
    TrainingCreateDto,
    TrainingDto,
    TrainingUpdateDto,
    UserReferenceDto,
)
from .entity import NewTraining, Training, TrainingAttributes, UserReference
from .repository import (
    InMemoryTrainingRepository,
    SqlTrainingRepository,
    TrainingRepository,
)
from .table import TrainingTable

__all__ = [
    "ActivityType",
    "InMemoryTrainingRepository",
    "NewTraining",
    "SqlTrainingRepository",
    "Training",
    "TrainingAttributes",
    "TrainingAttributesDto",
    "TrainingCreateDto",
    "TrainingDto",
    "TrainingRepository",
    "TrainingTable",
    "TrainingUpdateDto",
    "UserReference",
    "UserReferenceDto",
    "mapper",
]
