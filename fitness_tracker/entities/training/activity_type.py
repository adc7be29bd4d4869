from enum import Enum


class ActivityType(str, Enum):
    """Kinds of physical activity a training can record.

    Members are transported and stored by name; ``display_name`` is the
    human-readable label.
    """

    RUNNING = "RUNNING"
    CYCLING = "CYCLING"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    TENNIS = "TENNIS"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ActivityType.RUNNING: "Running",
    ActivityType.CYCLING: "Cycling",
    ActivityType.WALKING: "Walking",
    ActivityType.SWIMMING: "Swimming",
    ActivityType.TENNIS: "Tennis",
}
