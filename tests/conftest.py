"""Shared pytest fixtures for sqlslot unit and integration tests."""
from __future__ import annotations

import pytest

from sqlslot.compile.context import CompilationContext
from sqlslot.compile.formatter import ValueFormatter
from sqlslot.database import Database
from sqlslot.escape.mysql import MySQLEscaper
from sqlslot.escape.standard import SQLiteEscaper
from sqlslot.schema.settings import BuildSettings


@pytest.fixture()
def mysql_ctx() -> CompilationContext:
    """Context with MySQL escaping and default settings."""
    return CompilationContext(escaper=MySQLEscaper())


@pytest.fixture()
def formatter(mysql_ctx: CompilationContext) -> ValueFormatter:
    return ValueFormatter(mysql_ctx)


@pytest.fixture(scope="session")
def db() -> Database:
    """MySQL-flavoured handler, the default configuration."""
    return Database()


@pytest.fixture(scope="session")
def sqlite_db() -> Database:
    return Database(SQLiteEscaper(), BuildSettings(dialect="sqlite"))
