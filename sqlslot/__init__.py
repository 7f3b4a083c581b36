"""sqlslot – typed placeholders and conditional fragments for SQL templates.

Public API
----------
``build_query``
    Substitute ``?``, ``?d``, ``?f``, ``?a`` and ``?#`` markers with escaped
    positional arguments, then keep or drop ``{...}`` fragments.

``skip``
    The sentinel argument that drops the ``{...}`` fragment it is bound in.

``Database``
    Handler binding one escaper and one ``BuildSettings`` for repeated use.

Example::

    import sqlslot

    sqlslot.build_query(
        "SELECT * FROM t WHERE id = ?d {AND name = ?}",
        [5, sqlslot.skip()],
    )
    # 'SELECT * FROM t WHERE id = 5 '

Extensibility
-------------
New escaping dialects can be registered via::

    from sqlslot.escape.registry import EscaperFactory

    @EscaperFactory.register("clickhouse")
    class ClickHouseEscaper(Escaper):
        ...

After registration, ``BuildSettings(dialect="clickhouse")`` picks it up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlslot.compile.base import CompiledQuery
from sqlslot.compile.builder import QueryBuilder
from sqlslot.database import Database, DatabaseInterface
from sqlslot.errors import (
    ConfigError,
    InsufficientArgumentsError,
    InvalidArgumentTypeError,
    SqlSlotError,
    TemplateError,
    UnsupportedTypeError,
)
from sqlslot.escape import (
    ConnectionEscaper,
    Escaper,
    EscaperFactory,
    MySQLEscaper,
    PostgresEscaper,
    SQLiteEscaper,
    StandardEscaper,
    escaper_from_sqlalchemy,
)
from sqlslot.schema.markers import MarkerType
from sqlslot.schema.settings import BuildSettings
from sqlslot.schema.values import (
    SKIP,
    MappingValue,
    ScalarValue,
    SequenceValue,
    SkipValue,
    Value,
    to_value,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core pipeline
    "build_query",
    "skip",
    "Database",
    "DatabaseInterface",
    "QueryBuilder",
    "CompiledQuery",
    # Values
    "SKIP",
    "Value",
    "SkipValue",
    "ScalarValue",
    "SequenceValue",
    "MappingValue",
    "MarkerType",
    "to_value",
    # Configuration
    "BuildSettings",
    # Escaping
    "Escaper",
    "EscaperFactory",
    "MySQLEscaper",
    "StandardEscaper",
    "SQLiteEscaper",
    "PostgresEscaper",
    "ConnectionEscaper",
    "escaper_from_sqlalchemy",
    # Errors
    "SqlSlotError",
    "TemplateError",
    "InsufficientArgumentsError",
    "InvalidArgumentTypeError",
    "UnsupportedTypeError",
    "ConfigError",
]


def build_query(
    template: str,
    args: Sequence[Any] = (),
    *,
    escaper: Escaper | None = None,
    settings: BuildSettings | None = None,
) -> str:
    """Build SQL text from a template and positional arguments.

    This is the one-shot entry point; hold a :class:`Database` instead when
    building many queries with the same escaper::

        sql = sqlslot.build_query(
            "UPDATE t SET ?a WHERE id = ?d",
            [{"name": "x", "age": 3}, 7],
        )
        # "UPDATE t SET `name` = 'x', `age` = 3 WHERE id = 7"

    Args:
        template: SQL text with placeholder markers and ``{...}`` fragments.
        args: One argument per marker, consumed left to right.
        escaper: Optional string escaper; defaults to the escaper registered
            for ``settings.dialect`` (MySQL unless configured otherwise).
        settings: Optional rendering settings.

    Returns:
        The finished SQL string.

    Raises:
        InsufficientArgumentsError: Fewer arguments than markers.
        InvalidArgumentTypeError: ``?a`` bound to a non-array.
        UnsupportedTypeError: An argument with no SQL rendering.
        ConfigError: If ``settings.dialect`` has no registered escaper.
    """
    return QueryBuilder(escaper, settings).build(template, args)


def skip() -> SkipValue:
    """Return the sentinel that drops its enclosing ``{...}`` fragment."""
    return SKIP
