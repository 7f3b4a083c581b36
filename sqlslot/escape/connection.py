"""Escapers backed by a live database connection.

:class:`ConnectionEscaper` delegates to the driver, so escaping follows the
connection's actual character set.  :func:`escaper_from_sqlalchemy` picks a
registered escaper from a SQLAlchemy bind's dialect name.

Install the optional dependency before using the SQLAlchemy helper::

    pip install "sqlslot[sqlalchemy]"

Example::

    import pymysql
    from sqlslot import Database
    from sqlslot.escape.connection import ConnectionEscaper

    conn = pymysql.connect(host="localhost", user="app", database="shop")
    db = Database(escaper=ConnectionEscaper.from_connection(conn))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from sqlslot.errors import ConfigError
from sqlslot.escape.base import Escaper
from sqlslot.escape.registry import EscaperFactory

if TYPE_CHECKING:
    from sqlalchemy import Connection, Engine


class ConnectionEscaper(Escaper):
    """Wraps a driver-supplied ``escape(str) -> str`` function.

    Args:
        escape_fn: The driver's raw escape function.  ``bytes`` results
            (mysqlclient) are decoded as UTF-8.
        dialect_name: Dialect reported by :attr:`dialect_name`.
    """

    def __init__(
        self,
        escape_fn: Callable[[str], str | bytes],
        dialect_name: str = "mysql",
    ) -> None:
        self._escape_fn = escape_fn
        self._dialect_name = dialect_name

    @classmethod
    def from_connection(cls, connection: Any, dialect_name: str = "mysql") -> "ConnectionEscaper":
        """Build an escaper from a DB-API connection exposing ``escape_string``.

        PyMySQL and mysqlclient connections both provide it.

        Raises:
            ConfigError: If the connection has no ``escape_string`` method.
        """
        escape_fn = getattr(connection, "escape_string", None)
        if not callable(escape_fn):
            raise ConfigError(
                f"{type(connection).__name__} has no escape_string() method; "
                "pass an Escaper or an escape function instead.",
                setting="escaper",
            )
        return cls(escape_fn, dialect_name=dialect_name)

    @property
    def dialect_name(self) -> str:
        return self._dialect_name

    def raw_escape(self, value: str) -> str:
        escaped = self._escape_fn(value)
        if isinstance(escaped, bytes):
            return escaped.decode("utf-8")
        return escaped


def escaper_from_sqlalchemy(bind: Engine | Connection) -> Escaper:
    """Return the registered escaper for a SQLAlchemy engine or connection.

    The bind's ``dialect.name`` (``'mysql'``, ``'sqlite'``, ``'postgresql'``,
    ...) is looked up in :class:`~sqlslot.escape.registry.EscaperFactory`.
    No connection is opened.

    Raises:
        ConfigError: If no escaper is registered for the bind's dialect.
    """
    return EscaperFactory.create(bind.dialect.name)
