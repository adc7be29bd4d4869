"""Transport representations of users."""

from datetime import date

from pydantic import Field

from fitness_tracker.entities._dto import CamelModel


class UserDto(CamelModel):
    """Full user projection exchanged over HTTP.

    ``id`` is ignored on input; the store assigns it.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    birthdate: date = Field(description="User's date of birth (ISO-8601)")
    email: str = Field(description="User's email address")


class UserSimpleDto(CamelModel):
    """Compact user projection for listings."""

    id: int
    first_name: str
    last_name: str
