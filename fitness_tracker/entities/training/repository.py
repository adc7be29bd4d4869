"""Training data-access layer.

Trainings are always returned with their owning user attached. The SQL
backend joins ``UserTable``; the in-memory backend resolves the user through
an ``InMemoryUserRepository``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from sqlmodel import Session, select

from fitness_tracker.entities._base import as_utc
from fitness_tracker.entities.user import User, UserRepository, UserTable

from .activity_type import ActivityType
from .entity import Training, TrainingAttributes
from .table import TrainingTable


class TrainingRepository(ABC):
    """Abstract interface for training storage backends."""

    @abstractmethod
    def get(self, training_id: int) -> Training | None:
        """Return the training with ``training_id`` or None."""

    @abstractmethod
    def list_all(self) -> list[Training]:
        """Return every stored training, in no particular order."""

    @abstractmethod
    def exists(self, training_id: int) -> bool:
        """Check whether a training with ``training_id`` is stored."""

    @abstractmethod
    def create(self, training: Training) -> Training:
        """Insert a training owned by ``training.user`` and return it with its new id."""

    @abstractmethod
    def update(self, training_id: int, attributes: TrainingAttributes) -> Training:
        """Replace the attributes of a stored training, keeping its user.

        Raises:
            ValueError: If no training with that id is stored
        """

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Training]:
        """Trainings owned by ``user_id``; empty when the user has none or is unknown."""

    @abstractmethod
    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        """Trainings of exactly ``activity_type``."""

    @abstractmethod
    def find_by_end_time_after(self, after: datetime) -> list[Training]:
        """Trainings whose ``end_time`` is strictly after ``after``.

        A naive ``after`` is read as UTC.
        """

    def exists_for_user(self, user_id: int) -> bool:
        """Check whether ``user_id`` owns at least one training."""
        return bool(self.find_by_user_id(user_id))


def _to_entity(row: TrainingTable, user_row: UserTable) -> Training:
    return Training(
        id=row.id,
        user=User.model_validate(user_row, from_attributes=True),
        start_time=row.start_time,
        end_time=row.end_time,
        activity_type=row.activity_type,
        distance=row.distance,
        average_speed=row.average_speed,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlTrainingRepository(TrainingRepository):
    """SQLModel-backed training repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _select(self):
        return select(TrainingTable, UserTable).join(
            UserTable, TrainingTable.user_id == UserTable.id
        )

    def _fetch(self, statement) -> list[Training]:
        return [_to_entity(row, user_row) for row, user_row in self._session.exec(statement).all()]

    def get(self, training_id: int) -> Training | None:
        statement = self._select().where(TrainingTable.id == training_id)
        result = self._session.exec(statement).first()
        if result is None:
            return None
        row, user_row = result
        return _to_entity(row, user_row)

    def list_all(self) -> list[Training]:
        return self._fetch(self._select())

    def exists(self, training_id: int) -> bool:
        return self._session.get(TrainingTable, training_id) is not None

    def create(self, training: Training) -> Training:
        if training.user.id is None:
            raise ValueError("Training user must be persisted before the training")

        row = TrainingTable(
            user_id=training.user.id,
            **training.model_dump(include=set(TrainingAttributes.model_fields)),
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)

        created = self.get(row.id)
        if created is None:
            raise ValueError(f"User with id {training.user.id} not found")
        return created

    def update(self, training_id: int, attributes: TrainingAttributes) -> Training:
        row = self._session.get(TrainingTable, training_id)
        if row is None:
            raise ValueError(f"Training with id {training_id} not found")

        for field, value in attributes.model_dump(include=set(TrainingAttributes.model_fields)).items():
            setattr(row, field, value)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)

        updated = self.get(training_id)
        if updated is None:
            raise ValueError(f"Training with id {training_id} not found")
        return updated

    def find_by_user_id(self, user_id: int) -> list[Training]:
        return self._fetch(self._select().where(TrainingTable.user_id == user_id))

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return self._fetch(self._select().where(TrainingTable.activity_type == activity_type))

    def find_by_end_time_after(self, after: datetime) -> list[Training]:
        return self._fetch(self._select().where(TrainingTable.end_time > as_utc(after)))

    def exists_for_user(self, user_id: int) -> bool:
        statement = select(TrainingTable.id).where(TrainingTable.user_id == user_id).limit(1)
        return self._session.exec(statement).first() is not None


class InMemoryTrainingRepository(TrainingRepository):
    """In-memory training repository resolving owners through a user repository."""

    def __init__(self, users: UserRepository) -> None:
        self._users = users
        self._data: dict[int, tuple[int, TrainingAttributes]] = {}
        self._next_id = 1

    def _resolve(self, training_id: int) -> Training | None:
        user_id, attributes = self._data[training_id]
        user = self._users.get(user_id)
        if user is None:
            return None
        return Training(id=training_id, user=user, **attributes.model_dump())

    def _collect(self, training_ids) -> list[Training]:
        trainings = (self._resolve(training_id) for training_id in training_ids)
        return [training for training in trainings if training is not None]

    def get(self, training_id: int) -> Training | None:
        if training_id not in self._data:
            return None
        return self._resolve(training_id)

    def list_all(self) -> list[Training]:
        return self._collect(list(self._data))

    def exists(self, training_id: int) -> bool:
        return training_id in self._data

    def create(self, training: Training) -> Training:
        if training.user.id is None or not self._users.exists(training.user.id):
            raise ValueError(f"User with id {training.user.id} not found")

        training_id = self._next_id
        self._next_id += 1
        self._data[training_id] = (
            training.user.id,
            TrainingAttributes.model_validate(training.model_dump(include=set(TrainingAttributes.model_fields))),
        )
        return self._resolve(training_id)

    def update(self, training_id: int, attributes: TrainingAttributes) -> Training:
        if training_id not in self._data:
            raise ValueError(f"Training with id {training_id} not found")

        user_id, _ = self._data[training_id]
        self._data[training_id] = (
            user_id,
            TrainingAttributes.model_validate(attributes.model_dump(include=set(TrainingAttributes.model_fields))),
        )
        return self._resolve(training_id)

    def find_by_user_id(self, user_id: int) -> list[Training]:
        return self._collect(
            training_id for training_id, (owner_id, _) in self._data.items() if owner_id == user_id
        )

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return self._collect(
            training_id
            for training_id, (_, attributes) in self._data.items()
            if attributes.activity_type == activity_type
        )

    def find_by_end_time_after(self, after: datetime) -> list[Training]:
        after = as_utc(after)
        return self._collect(
            training_id
            for training_id, (_, attributes) in self._data.items()
            if attributes.end_time > after
        )
