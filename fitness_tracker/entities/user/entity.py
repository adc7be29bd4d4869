"""User domain entity."""

from datetime import date
from typing import Any

from pydantic import Field

from fitness_tracker.entities._base import Entity


class User(Entity):
    """User entity representing a person whose trainings are tracked.

    Email addresses are not required to be unique.
    """

    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    birthdate: date = Field(description="User's date of birth")
    email: str = Field(description="User's email address")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.birthdate == other.birthdate
            and self.email == other.email
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.birthdate,
            self.email,
        ))
