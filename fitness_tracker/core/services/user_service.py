from datetime import date

from loguru import logger

from fitness_tracker.core.exceptions import UserHasTrainingsError, UserNotFoundError
from fitness_tracker.entities.training import TrainingRepository
from fitness_tracker.entities.user import User, UserRepository


class UserService:
    """User use cases on top of the user repository.

    The training repository is only consulted to refuse deleting users that
    still own trainings.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        training_repository: TrainingRepository,
    ):
        self._users = user_repository
        self._trainings = training_repository

    def get_all_users(self) -> list[User]:
        return self._users.list_all()

    def get_user_by_id(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            logger.warning("User {} not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    def get_user_by_email(self, email: str) -> User | None:
        return self._users.find_by_email(email)

    def create_user(self, user: User) -> User:
        created = self._users.create(user)
        logger.info("Created user {}", created.id)
        return created

    def update_user(self, user_id: int, user: User) -> User:
        """Replace every business field of user ``user_id``.

        The stored id always stays ``user_id``, whatever id ``user`` carries.
        """
        if not self._users.exists(user_id):
            logger.warning("Cannot update missing user {}", user_id)
            raise UserNotFoundError(user_id)

        updated = self._users.update(user.model_copy(update={"id": user_id}))
        logger.info("Updated user {}", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        if not self._users.exists(user_id):
            logger.warning("Cannot delete missing user {}", user_id)
            raise UserNotFoundError(user_id)
        if self._trainings.exists_for_user(user_id):
            logger.warning("Refusing to delete user {} with trainings", user_id)
            raise UserHasTrainingsError(user_id)

        self._users.delete(user_id)
        logger.info("Deleted user {}", user_id)

    def search_users_by_email(self, fragment: str) -> list[User]:
        return self._users.find_by_email_containing(fragment)

    def search_users_by_age_greater_than(self, age: int, today: date | None = None) -> list[User]:
        return self._users.find_by_age_greater_than(age, today)

    def find_users_older_than(self, cutoff: date) -> list[User]:
        return self._users.find_by_birthdate_before(cutoff)
