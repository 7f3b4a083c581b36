"""Test fixtures: sample schema DDL for integration tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent


def load_ddl() -> list[str]:
    """Return the sample SQLite DDL split into single statements.

    Returns:
        ``CREATE TABLE`` statements ready to execute one by one.
    """
    text = (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
    return [stmt.strip() for stmt in text.split(";") if stmt.strip()]
