"""ANSI SQL string escapers (SQLite, PostgreSQL with standard strings)."""

from __future__ import annotations

from sqlslot.escape.base import Escaper


class StandardEscaper(Escaper):
    """Escapes strings by doubling single quotes.

    Backslashes are left alone: standard SQL gives them no special meaning.
    """

    @property
    def dialect_name(self) -> str:
        return "ansi"

    def raw_escape(self, value: str) -> str:
        return value.replace("'", "''")


class SQLiteEscaper(StandardEscaper):
    """SQLite string escaper.

    SQLite also accepts MySQL-style backtick identifiers, so every marker
    type renders valid SQLite.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"


class PostgresEscaper(StandardEscaper):
    """PostgreSQL escaper, assuming ``standard_conforming_strings = on``."""

    @property
    def dialect_name(self) -> str:
        return "postgresql"
