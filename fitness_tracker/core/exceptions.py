"""Domain errors raised by the services and translated at the HTTP boundary."""


class FitnessTrackerError(Exception):
    """Base class for all domain errors."""


class UserNotFoundError(FitnessTrackerError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class TrainingNotFoundError(FitnessTrackerError):
    def __init__(self, training_id: int) -> None:
        self.training_id = training_id
        super().__init__(f"Training with ID {training_id} not found")


class ReferencedUserNotFoundError(FitnessTrackerError):
    """A training referenced a user that does not exist."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"Referenced user with ID {user_id} not found")


class UserHasTrainingsError(FitnessTrackerError):
    """A user cannot be deleted while trainings still reference it."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} still has trainings and cannot be deleted")
