"""Transport representations of trainings."""

from pydantic import Field

from fitness_tracker.entities._base import UtcDatetime
from fitness_tracker.entities._dto import CamelModel
from fitness_tracker.entities.user.dto import UserDto

from .activity_type import ActivityType


class UserReferenceDto(CamelModel):
    """Nested ``{"id": ...}`` reference to the owning user."""

    id: int


class TrainingAttributesDto(CamelModel):
    start_time: UtcDatetime = Field(description="When the activity started, normalized to UTC")
    end_time: UtcDatetime = Field(description="When the activity finished, normalized to UTC")
    activity_type: ActivityType = Field(description="Activity type name, e.g. RUNNING")
    distance: float = Field(description="Distance covered")
    average_speed: float = Field(description="Average speed over the activity")


class TrainingCreateDto(TrainingAttributesDto):
    """Body of a training creation request."""

    user: UserReferenceDto


class TrainingUpdateDto(TrainingAttributesDto):
    """Body of a training update request.

    A ``user`` reference may be present but is ignored: updates never move a
    training to another user.
    """

    user: UserReferenceDto | None = None


class TrainingDto(TrainingAttributesDto):
    """Training as returned over HTTP, with its owner expanded."""

    id: int
    user: UserDto
