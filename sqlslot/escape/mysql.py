"""MySQL / MariaDB string escaper."""

from __future__ import annotations

from sqlslot.escape.base import Escaper

# Same characters mysql_real_escape_string() rewrites.
_ESCAPE_TABLE: dict[int, str] = {
    0: "\\0",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\\"): "\\\\",
    ord("'"): "\\'",
    ord('"'): '\\"',
    0x1A: "\\Z",
}


class MySQLEscaper(Escaper):
    """Backslash-escapes strings the way the MySQL client library does.

    The result is valid for any ASCII-compatible connection character set
    (``utf8mb4``, ``latin1``, ...).  Multi-byte sets where a trailing byte
    can equal ``0x5C`` (``gbk``, ``sjis``) need a connection-backed
    :class:`~sqlslot.escape.connection.ConnectionEscaper` instead.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def raw_escape(self, value: str) -> str:
        return value.translate(_ESCAPE_TABLE)
