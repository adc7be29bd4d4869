from datetime import UTC, datetime
from typing import Annotated

import sqlalchemy as sa
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier.

    ``id`` stays ``None`` until the entity has been persisted.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = PydanticField(
        default=None,
        description="Store-assigned identifier, None until persisted",
    )

    created_at: UtcDatetime | None = PydanticField(default=None)
    updated_at: UtcDatetime | None = PydanticField(default=None)


class EntityTable(SQLModel, table=False):
    """Base table class with an autoincrement primary key and audit timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Store-assigned identifier",
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
