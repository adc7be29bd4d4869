"""Conversions between the User entity and its transport representations."""

from .dto import UserDto, UserSimpleDto
from .entity import User


def to_dto(user: User) -> UserDto:
    return UserDto(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        birthdate=user.birthdate,
        email=user.email,
    )


def to_simple_dto(user: User) -> UserSimpleDto:
    return UserSimpleDto(id=user.id, first_name=user.first_name, last_name=user.last_name)


def to_entity(dto: UserDto) -> User:
    """Build a new, not yet persisted User from ``dto``.

    The DTO id is dropped: identity is only ever assigned by the store.
    """
    return User(
        first_name=dto.first_name,
        last_name=dto.last_name,
        birthdate=dto.birthdate,
        email=dto.email,
    )
