"""User data-access layer.

``UserRepository`` is the query interface the services depend on. Two
backends implement it: ``SqlUserRepository`` on top of a SQLModel session and
``InMemoryUserRepository`` for tests and throwaway experiments. Both return
identical result sets for every predicate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from sqlmodel import Session, select

from fitness_tracker.entities._sql import casefold

from .entity import User
from .table import UserTable

_NON_BUSINESS_FIELDS = {"id", "created_at", "updated_at"}


def age_cutoff(age: int, today: date | None = None) -> date:
    """Return ``today`` minus ``age`` years.

    February 29th maps to February 28th when the target year is not a leap year.
    """
    today = today or date.today()
    try:
        return today.replace(year=today.year - age)
    except ValueError:
        return today.replace(year=today.year - age, day=28)


class UserRepository(ABC):
    """Abstract interface for user storage backends."""

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        """Return the user with ``user_id`` or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every stored user, in no particular order."""

    @abstractmethod
    def exists(self, user_id: int) -> bool:
        """Check whether a user with ``user_id`` is stored."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Insert a new user and return it with its store-assigned id.

        Any id carried by ``user`` is ignored.
        """

    @abstractmethod
    def update(self, user: User) -> User:
        """Replace all business fields of the stored user with ``user.id``.

        Raises:
            ValueError: If no user with that id is stored
        """

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user. Returns False when nothing was deleted."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Exact email match, first hit wins."""

    @abstractmethod
    def find_by_email_containing(self, fragment: str) -> list[User]:
        """Case-folded substring match on email; an empty fragment matches all."""

    @abstractmethod
    def find_by_birthdate_before(self, cutoff: date) -> list[User]:
        """Users born strictly before ``cutoff``."""

    def find_by_age_greater_than(self, age: int, today: date | None = None) -> list[User]:
        """Users whose birthdate is strictly before ``today`` minus ``age`` years."""
        return self.find_by_birthdate_before(age_cutoff(age, today))


class SqlUserRepository(UserRepository):
    """SQLModel-backed user repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        rows = self._session.exec(select(UserTable)).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def exists(self, user_id: int) -> bool:
        return self._session.get(UserTable, user_id) is not None

    def create(self, user: User) -> User:
        row = UserTable(**user.model_dump(exclude=_NON_BUSINESS_FIELDS))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def update(self, user: User) -> User:
        row = self._session.get(UserTable, user.id) if user.id is not None else None
        if row is None:
            raise ValueError(f"User with id {user.id} not found")

        for field, value in user.model_dump(exclude=_NON_BUSINESS_FIELDS).items():
            setattr(row, field, value)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def find_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email).order_by(UserTable.id)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def find_by_email_containing(self, fragment: str) -> list[User]:
        statement = select(UserTable).where(
            casefold(UserTable.email).contains(fragment.casefold(), autoescape=True)
        )
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def find_by_birthdate_before(self, cutoff: date) -> list[User]:
        statement = select(UserTable).where(UserTable.birthdate < cutoff)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]


class InMemoryUserRepository(UserRepository):
    """In-memory user repository with sequential ids."""

    def __init__(self) -> None:
        self._data: dict[int, User] = {}
        self._next_id = 1

    def get(self, user_id: int) -> User | None:
        user = self._data.get(user_id)
        return user.model_copy() if user is not None else None

    def list_all(self) -> list[User]:
        return [user.model_copy() for user in self._data.values()]

    def exists(self, user_id: int) -> bool:
        return user_id in self._data

    def create(self, user: User) -> User:
        stored = user.model_copy(update={"id": self._next_id})
        self._data[self._next_id] = stored
        self._next_id += 1
        return stored.model_copy()

    def update(self, user: User) -> User:
        if user.id is None or user.id not in self._data:
            raise ValueError(f"User with id {user.id} not found")
        current = self._data[user.id]
        stored = current.model_copy(update=user.model_dump(exclude=_NON_BUSINESS_FIELDS))
        self._data[user.id] = stored
        return stored.model_copy()

    def delete(self, user_id: int) -> bool:
        return self._data.pop(user_id, None) is not None

    def find_by_email(self, email: str) -> User | None:
        return next((user.model_copy() for user in self._data.values() if user.email == email), None)

    def find_by_email_containing(self, fragment: str) -> list[User]:
        needle = fragment.casefold()
        return [user.model_copy() for user in self._data.values() if needle in user.email.casefold()]

    def find_by_birthdate_before(self, cutoff: date) -> list[User]:
        return [user.model_copy() for user in self._data.values() if user.birthdate < cutoff]
