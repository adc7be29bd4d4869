"""Training domain entities."""

from typing import Any

from pydantic import BaseModel, Field

from fitness_tracker.entities._base import Entity, UtcDatetime
from fitness_tracker.entities.user.entity import User

from .activity_type import ActivityType


class TrainingAttributes(BaseModel):
    """The replaceable part of a training.

    No ordering is enforced between ``start_time`` and ``end_time``. Both are
    held in UTC; naive input is read as UTC.
    """

    start_time: UtcDatetime = Field(description="When the activity started")
    end_time: UtcDatetime = Field(description="When the activity finished")
    activity_type: ActivityType = Field(description="Kind of activity")
    distance: float = Field(description="Distance covered")
    average_speed: float = Field(description="Average speed over the activity")


class UserReference(BaseModel):
    """Reference to a user by id, resolved before a training is stored."""

    id: int


class NewTraining(TrainingAttributes):
    """A training that has not been persisted yet."""

    user: UserReference


class Training(TrainingAttributes, Entity):
    """Training entity with its owning user fully resolved."""

    user: User = Field(description="The user who performed the training")

    def __eq__(self, other: Any) -> bool:
        """Compare trainings by business attributes, ignoring timestamps."""
        if not isinstance(other, Training):
            return False

        return (
            self.id == other.id
            and self.user == other.user
            and self.start_time == other.start_time
            and self.end_time == other.end_time
            and self.activity_type == other.activity_type
            and self.distance == other.distance
            and self.average_speed == other.average_speed
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.user,
            self.start_time,
            self.end_time,
            self.activity_type,
            self.distance,
            self.average_speed,
        ))
