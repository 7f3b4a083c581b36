"""sqlslot escaping layer: raw strings → quoted SQL literals."""
from sqlslot.escape.base import Escaper
from sqlslot.escape.connection import ConnectionEscaper, escaper_from_sqlalchemy
from sqlslot.escape.mysql import MySQLEscaper
from sqlslot.escape.registry import EscaperFactory
from sqlslot.escape.standard import PostgresEscaper, SQLiteEscaper, StandardEscaper

# ---------------------------------------------------------------------------
# Register built-in escapers with EscaperFactory
# ---------------------------------------------------------------------------

EscaperFactory.register_class("mysql", MySQLEscaper)
EscaperFactory.register_class("mariadb", MySQLEscaper)
EscaperFactory.register_class("sqlite", SQLiteEscaper)
EscaperFactory.register_class("postgresql", PostgresEscaper)
EscaperFactory.register_class("ansi", StandardEscaper)

__all__ = [
    "Escaper",
    "EscaperFactory",
    "MySQLEscaper",
    "StandardEscaper",
    "SQLiteEscaper",
    "PostgresEscaper",
    "ConnectionEscaper",
    "escaper_from_sqlalchemy",
]
