"""End-to-end tests for QueryBuilder and the module-level API."""

from __future__ import annotations

import logging
import re

import pytest

import sqlslot
from sqlslot.compile.builder import QueryBuilder
from sqlslot.errors import (
    ConfigError,
    InsufficientArgumentsError,
    InvalidArgumentTypeError,
    UnsupportedTypeError,
)
from sqlslot.escape.standard import SQLiteEscaper
from sqlslot.schema.settings import BuildSettings

_RESIDUAL_MARKER = re.compile(r"\?[dfa#]?")


def test_skipped_fragment_keeps_surrounding_space():
    sql = sqlslot.build_query(
        "SELECT * FROM t WHERE id = ?d {AND name = ?}", [5, sqlslot.skip()]
    )
    assert sql == "SELECT * FROM t WHERE id = 5 "


def test_kept_fragment_loses_its_braces():
    sql = sqlslot.build_query("SELECT * FROM t WHERE id = ?d {AND name = ?}", [5, "bob"])
    assert sql == "SELECT * FROM t WHERE id = 5 AND name = 'bob'"


def test_update_with_assoc_array():
    sql = sqlslot.build_query("UPDATE t SET ?a WHERE id = ?d", [{"name": "x", "age": 3}, 7])
    assert sql == "UPDATE t SET `name` = 'x', `age` = 3 WHERE id = 7"


def test_identifiers_and_in_list():
    sql = sqlslot.build_query(
        "SELECT ?# FROM ?# WHERE user_id IN (?a) AND block = ?d",
        [["name", "email"], "users", [1, 2, 3], True],
    )
    assert sql == "SELECT `name`, `email` FROM `users` WHERE user_id IN (1, 2, 3) AND block = 1"


def test_null_and_strings():
    sql = sqlslot.build_query(
        "SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}",
        ["user_id", [1, 2, 3], sqlslot.skip()],
    )
    assert sql == "SELECT name FROM users WHERE `user_id` IN (1, 2, 3)"


def test_update_with_null_value():
    sql = sqlslot.build_query(
        "UPDATE users SET ?a WHERE user_id = -1",
        [{"name": "Jack", "email": None}],
    )
    assert sql == "UPDATE users SET `name` = 'Jack', `email` = NULL WHERE user_id = -1"


@pytest.mark.parametrize("code", ["", "d", "f", "a", "#"])
def test_skip_drops_fragment_for_every_marker_type(code):
    sql = sqlslot.build_query("A{ B ?" + code + "}C", [sqlslot.skip()])
    assert sql == "AC"


def test_skip_in_one_fragment_leaves_others():
    sql = sqlslot.build_query(
        "WHERE 1{ AND a = ?d}{ AND b = ?}{ AND c = ?d}",
        [1, sqlslot.skip(), 3],
    )
    assert sql == "WHERE 1 AND a = 1 AND c = 3"


def test_marker_in_skipped_fragment_still_consumes_argument():
    sql = sqlslot.build_query("{a = ?d AND b = ?d} AND c = ?d", [sqlslot.skip(), 2, 3])
    assert sql == " AND c = 3"


def test_skip_outside_fragment_renders_skip_literal():
    assert sqlslot.build_query("id = ?d", [sqlslot.skip()]) == "id = SKIP_BLOCK"


def test_no_residual_markers():
    template = "?# ?d ?f ?a ? {?d}"
    sql = sqlslot.build_query(template, ["t", 1, 1.5, [1], "s", 2])
    assert not _RESIDUAL_MARKER.search(sql)


def test_escaping_prevents_quote_breakout():
    sql = sqlslot.build_query("name = ?", ["x' OR '1'='1"])
    assert sql == "name = 'x\\' OR \\'1\\'=\\'1'"


def test_sqlite_escaping():
    builder = QueryBuilder(SQLiteEscaper())
    assert builder.build("name = ?", ["O'Brien"]) == "name = 'O''Brien'"


def test_settings_select_escaper():
    sql = sqlslot.build_query("?", ["a'b"], settings=BuildSettings(dialect="sqlite"))
    assert sql == "'a''b'"


def test_unknown_dialect_fails_at_construction():
    with pytest.raises(ConfigError):
        QueryBuilder(settings=BuildSettings(dialect="nope"))


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_insufficient_arguments():
    with pytest.raises(InsufficientArgumentsError):
        sqlslot.build_query("a = ?d AND b = ?d", [1])


def test_insufficient_arguments_inside_fragment():
    with pytest.raises(InsufficientArgumentsError):
        sqlslot.build_query("a = ?d {AND b = ?d}", [1])


def test_array_marker_with_scalar():
    with pytest.raises(InvalidArgumentTypeError):
        sqlslot.build_query("SET ?a", ["name"])


def test_generic_marker_with_array():
    with pytest.raises(UnsupportedTypeError):
        sqlslot.build_query("x = ?", [[1, 2]])


def test_errors_share_base_class():
    with pytest.raises(sqlslot.SqlSlotError):
        sqlslot.build_query("?", [])


# ---------------------------------------------------------------------------
# CompiledQuery
# ---------------------------------------------------------------------------


def test_compile_reports_argument_usage(caplog):
    builder = QueryBuilder()
    with caplog.at_level(logging.DEBUG, logger="sqlslot"):
        compiled = builder.compile("id = ?d", [1, 2])
    assert compiled.sql == "id = 1"
    assert compiled.dialect == "mysql"
    assert compiled.arguments_used == 1
    assert compiled.unused_arguments == 1
    assert "not consumed" in caplog.text


def test_build_is_idempotent():
    builder = QueryBuilder()
    args = [5, sqlslot.skip()]
    first = builder.build("id = ?d {AND x = ?}", args)
    assert builder.build("id = ?d {AND x = ?}", args) == first
