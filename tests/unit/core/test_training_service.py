"""Unit tests for TrainingService."""

from datetime import datetime

import pytest

from fitness_tracker.core.exceptions import ReferencedUserNotFoundError, TrainingNotFoundError
from fitness_tracker.core.services import TrainingService
from fitness_tracker.entities.training import ActivityType, InMemoryTrainingRepository
from fitness_tracker.entities.user import InMemoryUserRepository, User
from tests.fixtures.data import make_attributes, make_new_training, make_user


class TestTrainingService:
    @pytest.fixture
    def service(
        self,
        memory_trainings: InMemoryTrainingRepository,
        memory_users: InMemoryUserRepository,
    ) -> TrainingService:
        return TrainingService(memory_trainings, memory_users)

    @pytest.fixture
    def owner(self, memory_users: InMemoryUserRepository) -> User:
        return memory_users.create(make_user())

    def test_create_resolves_user(self, service: TrainingService, owner: User):
        created = service.create_training(make_new_training(owner.id))

        assert created.id is not None
        assert created.user == owner
        assert created.activity_type is ActivityType.RUNNING

    def test_create_for_missing_user_writes_nothing(self, service: TrainingService):
        with pytest.raises(ReferencedUserNotFoundError) as exc_info:
            service.create_training(make_new_training(999))

        assert exc_info.value.user_id == 999
        assert service.get_all_trainings() == []

    def test_get_trainings_by_user(
        self,
        service: TrainingService,
        memory_users: InMemoryUserRepository,
        owner: User,
    ):
        other = memory_users.create(make_user(email="other@example.com"))
        mine = service.create_training(make_new_training(owner.id))
        service.create_training(make_new_training(other.id))

        assert service.get_trainings_by_user(owner.id) == [mine]
        assert service.get_trainings_by_user(12345) == []

    def test_get_trainings_by_activity_type(self, service: TrainingService, owner: User):
        tennis = service.create_training(
            make_new_training(owner.id, activity_type=ActivityType.TENNIS)
        )
        service.create_training(make_new_training(owner.id))

        assert service.get_trainings_by_activity_type(ActivityType.TENNIS) == [tennis]

    def test_get_finished_trainings_after(self, service: TrainingService, owner: User):
        service.create_training(make_new_training(owner.id, end_time=datetime(2024, 1, 1)))
        later = service.create_training(
            make_new_training(owner.id, end_time=datetime(2024, 1, 1, 0, 1))
        )

        assert service.get_finished_trainings_after(datetime(2024, 1, 1)) == [later]

    def test_update_keeps_user(self, service: TrainingService, owner: User):
        created = service.create_training(make_new_training(owner.id))

        updated = service.update_training(
            created.id, make_attributes(activity_type=ActivityType.WALKING, distance=3.2)
        )

        assert updated.id == created.id
        assert updated.user == owner
        assert updated.activity_type is ActivityType.WALKING
        assert updated.distance == 3.2

    def test_update_missing_raises(self, service: TrainingService):
        with pytest.raises(TrainingNotFoundError) as exc_info:
            service.update_training(5, make_attributes())

        assert exc_info.value.training_id == 5
