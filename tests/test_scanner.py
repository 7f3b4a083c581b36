"""Unit tests for PlaceholderScanner and ArgumentCursor."""

from __future__ import annotations

import pytest

from sqlslot.compile.context import ArgumentCursor
from sqlslot.compile.scanner import PlaceholderScanner
from sqlslot.errors import InsufficientArgumentsError
from sqlslot.schema.values import SKIP


def _scan(ctx, template, args):
    cursor = ArgumentCursor(args)
    return PlaceholderScanner(ctx).substitute(template, cursor), cursor


def test_every_marker_type(mysql_ctx):
    out, _ = _scan(
        mysql_ctx,
        "SELECT ?# FROM t WHERE a = ? AND b = ?d AND c = ?f AND d IN (?a)",
        [["x", "y"], "s", "5", "2.5", [1, 2]],
    )
    assert out == "SELECT `x`, `y` FROM t WHERE a = 's' AND b = 5 AND c = 2.5 AND d IN (1, 2)"


def test_untyped_marker_does_not_eat_next_char(mysql_ctx):
    out, _ = _scan(mysql_ctx, "a=?,b=?)", [1, 2])
    assert out == "a=1,b=2)"


def test_adjacent_markers(mysql_ctx):
    out, _ = _scan(mysql_ctx, "??d", ["x", 3])
    assert out == "'x'3"


def test_replacements_are_not_rescanned(mysql_ctx):
    out, cursor = _scan(mysql_ctx, "a = ? AND b = ?", ["what?d", "ok"])
    assert out == "a = 'what?d' AND b = 'ok'"
    assert cursor.position == 2


def test_cursor_is_shared_across_fragments(mysql_ctx):
    out, cursor = _scan(mysql_ctx, "?d {x = ?d} ?d", [1, 2, 3])
    assert out == "1 {x = 2} 3"
    assert cursor.position == 3


def test_skip_emits_marker_for_any_type(mysql_ctx):
    for code in ("", "d", "f", "a", "#"):
        out, _ = _scan(mysql_ctx, "{?" + code + "}", [SKIP])
        assert out == "{" + mysql_ctx.skip_marker + "}"


def test_surplus_arguments_are_left(mysql_ctx):
    out, cursor = _scan(mysql_ctx, "id = ?d", [1, 2, 3])
    assert out == "id = 1"
    assert cursor.remaining == 2


def test_template_without_markers(mysql_ctx):
    out, cursor = _scan(mysql_ctx, "SELECT 1", [])
    assert out == "SELECT 1"
    assert cursor.position == 0


def test_insufficient_arguments(mysql_ctx):
    with pytest.raises(InsufficientArgumentsError) as exc_info:
        _scan(mysql_ctx, "a = ?d AND b = ?f", [1])
    err = exc_info.value
    assert err.details == {"position": 1, "marker": "?f", "supplied": 1}
    assert err.code == "INSUFFICIENT_ARGUMENTS"


def test_scanner_starts_from_cursor_position(mysql_ctx):
    cursor = ArgumentCursor(["skipped", "used"], position=1)
    out = PlaceholderScanner(mysql_ctx).substitute("?", cursor)
    assert out == "'used'"


def test_cursor_take_raises_when_exhausted():
    cursor = ArgumentCursor([])
    with pytest.raises(InsufficientArgumentsError):
        cursor.take("?")
