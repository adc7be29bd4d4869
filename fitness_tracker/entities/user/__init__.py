"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserRepository: Query interface with SQL and in-memory backends
- UserDto / UserSimpleDto and the mapper functions: transport projections
"""

from . import mapper
from .dto import UserDto, UserSimpleDto
from .entity import User
from .repository import (
    InMemoryUserRepository,
    SqlUserRepository,
    UserRepository,
    age_cutoff,
)
from .table import UserTable

__all__ = [
    "InMemoryUserRepository",
    "SqlUserRepository",
    "User",
    "UserDto",
    "UserRepository",
    "UserSimpleDto",
    "UserTable",
    "age_cutoff",
    "mapper",
]
