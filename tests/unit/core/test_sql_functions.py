"""Tests for the shared SQL helpers."""

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from fitness_tracker.entities._sql import casefold
from fitness_tracker.entities.user import UserTable


def test_casefold_compiles_per_dialect():
    expression = casefold(UserTable.email)

    assert str(expression.compile(dialect=sqlite.dialect())).startswith("casefold(")
    assert str(expression.compile(dialect=postgresql.dialect())).startswith("lower(")


def test_casefold_is_available_on_sqlite_connections(session: Session):
    assert session.exec(select(casefold("ÉLODIE Straße"))).one() == "élodie strasse"
