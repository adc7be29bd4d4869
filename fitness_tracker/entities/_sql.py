"""SQL helpers shared by the repositories."""

import sqlite3

from sqlalchemy import Engine, String, event
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class casefold(FunctionElement):
    """Unicode case folding of a string expression.

    SQLite's built-in ``lower`` only folds ASCII, so on SQLite this compiles to
    a ``casefold`` function backed by ``str.casefold``. Other backends use
    their own Unicode-aware ``lower``.
    """

    type = String()
    name = "casefold"
    inherit_cache = True


@compiles(casefold)
def _compile_casefold(element, compiler, **kw):
    return f"lower({compiler.process(element.clauses, **kw)})"


@compiles(casefold, "sqlite")
def _compile_casefold_sqlite(element, compiler, **kw):
    return f"casefold({compiler.process(element.clauses, **kw)})"


def _sqlite_casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


@event.listens_for(Engine, "connect")
def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("casefold", 1, _sqlite_casefold, deterministic=True)
