from datetime import datetime

from loguru import logger

from fitness_tracker.core.exceptions import (
    ReferencedUserNotFoundError,
    TrainingNotFoundError,
)
from fitness_tracker.entities.training import (
    ActivityType,
    NewTraining,
    Training,
    TrainingAttributes,
    TrainingRepository,
)
from fitness_tracker.entities.user import UserRepository


class TrainingService:
    def __init__(
        self,
        training_repository: TrainingRepository,
        user_repository: UserRepository,
    ):
        self._trainings = training_repository
        self._users = user_repository

    def get_all_trainings(self) -> list[Training]:
        return self._trainings.list_all()

    def get_trainings_by_user(self, user_id: int) -> list[Training]:
        return self._trainings.find_by_user_id(user_id)

    def get_trainings_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return self._trainings.find_by_activity_type(activity_type)

    def get_finished_trainings_after(self, after: datetime) -> list[Training]:
        return self._trainings.find_by_end_time_after(after)

    def create_training(self, training: NewTraining) -> Training:
        """Store ``training`` for the user it references.

        The reference is resolved first; nothing is written when the user
        does not exist.
        """
        user = self._users.get(training.user.id)
        if user is None:
            logger.warning("Training references unknown user {}", training.user.id)
            raise ReferencedUserNotFoundError(training.user.id)

        created = self._trainings.create(
            Training(user=user, **training.model_dump(include=set(TrainingAttributes.model_fields)))
        )
        logger.info("Created training {} for user {}", created.id, user.id)
        return created

    def update_training(self, training_id: int, data: TrainingAttributes) -> Training:
        """Replace the attributes of training ``training_id``; its user is kept."""
        if not self._trainings.exists(training_id):
            logger.warning("Cannot update missing training {}", training_id)
            raise TrainingNotFoundError(training_id)

        updated = self._trainings.update(training_id, data)
        logger.info("Updated training {}", training_id)
        return updated
