"""Training database table model."""

from datetime import datetime

from sqlmodel import Field

from fitness_tracker.entities._base import EntityTable

from .activity_type import ActivityType


class TrainingTable(EntityTable, table=True):
    """Database persistence model for trainings.

    The owning user is stored as a non-nullable foreign key; repositories
    join it back into a full ``User`` when reading.
    """

    user_id: int = Field(foreign_key="usertable.id", index=True, nullable=False)
    start_time: datetime
    end_time: datetime = Field(index=True)
    activity_type: ActivityType = Field(index=True)
    distance: float
    average_speed: float
