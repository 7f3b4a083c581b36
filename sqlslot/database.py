"""Database handler: the object application code holds on to.

``Database`` binds one escaper and one set of build settings and exposes the
two public operations, :meth:`~Database.build_query` and
:meth:`~Database.skip`.  It never opens, closes or queries a connection;
executing the returned SQL is the caller's job::

    from sqlalchemy import create_engine
    from sqlslot import Database

    engine = create_engine("sqlite:///shop.db")
    db = Database.from_sqlalchemy(engine)

    sql = db.build_query(
        "SELECT ?# FROM users WHERE id = ?d {AND block = ?d}",
        [["name", "email"], 2, db.skip()],
    )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlslot.compile.builder import QueryBuilder
from sqlslot.escape.base import Escaper
from sqlslot.escape.connection import ConnectionEscaper, escaper_from_sqlalchemy
from sqlslot.schema.settings import BuildSettings
from sqlslot.schema.values import SKIP, SkipValue

if TYPE_CHECKING:
    from sqlalchemy import Connection, Engine


class DatabaseInterface(ABC):
    """The public surface of a query-building database handler."""

    @abstractmethod
    def build_query(self, template: str, args: Sequence[Any] = ()) -> str:
        """Return ``template`` with markers substituted and fragments resolved."""

    @abstractmethod
    def skip(self) -> SkipValue:
        """Return the value that drops the enclosing ``{...}`` fragment."""


class Database(DatabaseInterface):
    """Builds SQL text from templates for one database.

    Safe to share between threads as long as the escaper is.

    Args:
        escaper: String escaper.  Defaults to the escaper registered for
            ``settings.dialect``.
        settings: Rendering settings; defaults to ``BuildSettings()``.

    Raises:
        ConfigError: If no escaper is given and ``settings.dialect`` is not
            registered.
    """

    def __init__(
        self,
        escaper: Escaper | None = None,
        settings: BuildSettings | None = None,
    ) -> None:
        self._builder = QueryBuilder(escaper, settings)

    @classmethod
    def from_connection(
        cls,
        connection: Any,
        settings: BuildSettings | None = None,
    ) -> "Database":
        """Escape through a DB-API connection's ``escape_string``.

        Raises:
            ConfigError: If the connection has no ``escape_string`` method.
        """
        settings = settings or BuildSettings()
        escaper = ConnectionEscaper.from_connection(connection, dialect_name=settings.dialect)
        return cls(escaper, settings)

    @classmethod
    def from_sqlalchemy(
        cls,
        bind: Engine | Connection,
        settings: BuildSettings | None = None,
    ) -> "Database":
        """Pick the escaper matching a SQLAlchemy engine's dialect.

        Raises:
            ConfigError: If the engine's dialect has no registered escaper.
        """
        escaper = escaper_from_sqlalchemy(bind)
        settings = (settings or BuildSettings()).model_copy(
            update={"dialect": escaper.dialect_name}
        )
        return cls(escaper, settings)

    @property
    def builder(self) -> QueryBuilder:
        return self._builder

    def build_query(self, template: str, args: Sequence[Any] = ()) -> str:
        """Build SQL text from ``template`` and positional ``args``.

        Raises:
            InsufficientArgumentsError: Fewer arguments than markers.
            InvalidArgumentTypeError: ``?a`` bound to a non-array.
            UnsupportedTypeError: An argument with no SQL rendering.
        """
        return self._builder.build(template, args)

    def skip(self) -> SkipValue:
        return SKIP
