"""Value formatting: typed argument values → SQL text.

``ValueFormatter`` holds no control flow of its own.  The scanner calls
:meth:`ValueFormatter.convert` once per marker with the marker's type code
and the argument bound to it.

Conversion rules
----------------
``?``   :meth:`escape` - strings quoted, ``None`` → ``NULL``, booleans → 1/0,
        numbers as literals.
``?d``  leading-integer parse, rendered in decimal.
``?f``  leading-float parse, rendered with ``float_precision`` digits.
``?a``  :meth:`format_array` - value list or `` `key` = value `` pairs.
``?#``  :meth:`format_identifiers` - back-quoted, never escaped.
"""
from __future__ import annotations

import math
import re
from typing import Any

from sqlslot.compile.context import CompilationContext
from sqlslot.errors import InvalidArgumentTypeError, UnsupportedTypeError
from sqlslot.schema.markers import MarkerType
from sqlslot.schema.values import (
    MappingValue,
    Scalar,
    ScalarValue,
    SequenceValue,
    SkipValue,
    Value,
    to_value,
)

# Optional sign, digits with an optional fraction (or a bare fraction), and
# an optional exponent, after leading whitespace.
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_number(text: str) -> float | int | None:
    """Parse the numeric prefix of ``text``, or ``None`` when there is none."""
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group(1)
    if any(ch in literal for ch in ".eE"):
        return float(literal)
    return int(literal)


class ValueFormatter:
    """Converts argument values to SQL text for one compilation run.

    Args:
        ctx: Compilation context supplying the escaper, the settings and
            the skip marker.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def convert(self, marker_type: MarkerType | str, value: Any) -> str:
        """Render ``value`` for a marker of ``marker_type``.

        A skip value bypasses every conversion and renders as the context's
        skip marker.

        Raises:
            InvalidArgumentTypeError: ``?a`` with a non-array value.
            UnsupportedTypeError: A value with no SQL rendering.
        """
        marker_type = MarkerType(marker_type)
        value = to_value(value)
        if isinstance(value, SkipValue):
            return self._ctx.skip_marker

        if marker_type is MarkerType.INTEGER:
            return str(self.to_int(value))
        if marker_type is MarkerType.FLOAT:
            return self.format_float(self.to_float(value))
        if marker_type is MarkerType.ARRAY:
            return self.format_array(value)
        if marker_type is MarkerType.IDENTIFIER:
            return self.format_identifiers(value)
        return self.escape(value)

    # ------------------------------------------------------------------
    # Generic escaping
    # ------------------------------------------------------------------

    def escape(self, value: Any) -> str:
        """Render a scalar as a SQL literal.

        Raises:
            UnsupportedTypeError: For arrays, skip values and unknown types.
        """
        value = to_value(value)
        if not isinstance(value, ScalarValue):
            raise UnsupportedTypeError(value.kind)
        return self._escape_scalar(value.value)

    def _escape_scalar(self, item: Scalar) -> str:
        if isinstance(item, str):
            return self._ctx.escaper.quote(item)
        if item is None:
            return "NULL"
        if isinstance(item, bool):
            return "1" if item else "0"
        if isinstance(item, float):
            return self.format_float(item)
        return str(item)

    # ------------------------------------------------------------------
    # Arrays and identifiers
    # ------------------------------------------------------------------

    def format_array(self, value: Any) -> str:
        """Render an associative array as assignments, an indexed one as a list.

        Raises:
            InvalidArgumentTypeError: If ``value`` is not an array.
        """
        value = to_value(value)
        if isinstance(value, MappingValue):
            return ", ".join(
                f"`{key}` = {self._escape_scalar(item)}" for key, item in value.items.items()
            )
        if isinstance(value, SequenceValue):
            return ", ".join(self._escape_scalar(item) for item in value.items)
        raise InvalidArgumentTypeError(MarkerType.ARRAY.marker, value.kind)

    def format_identifiers(self, value: Any) -> str:
        """Back-quote one identifier or a comma-separated list of them.

        The identifier text is not escaped; callers must not pass untrusted
        names containing backticks.
        """
        value = to_value(value)
        if isinstance(value, SequenceValue):
            names = list(value.items)
        elif isinstance(value, MappingValue):
            names = list(value.items.values())
        elif isinstance(value, ScalarValue):
            return f"`{self._identifier_text(value.value)}`"
        else:
            raise UnsupportedTypeError(value.kind)
        return ", ".join(f"`{self._identifier_text(name)}`" for name in names)

    def _identifier_text(self, item: Scalar) -> str:
        if isinstance(item, str):
            return item
        if item is None or item is False:
            return ""
        if item is True:
            return "1"
        if isinstance(item, float):
            return self.format_float(item)
        return str(item)

    # ------------------------------------------------------------------
    # Numeric conversion
    # ------------------------------------------------------------------

    def to_int(self, value: Value) -> int:
        """Truncating integer conversion (``"42abc"`` → 42, ``"abc"`` → 0)."""
        if isinstance(value, (SequenceValue, MappingValue)):
            return 1 if value.items else 0
        item = value.value
        if isinstance(item, str):
            item = _leading_number(item)
        if item is None:
            return 0
        if isinstance(item, float):
            return int(item) if math.isfinite(item) else 0
        return int(item)

    def to_float(self, value: Value) -> float:
        """Leading-float conversion (``"3.14xyz"`` → 3.14, ``"abc"`` → 0.0)."""
        if isinstance(value, (SequenceValue, MappingValue)):
            return 1.0 if value.items else 0.0
        item = value.value
        if isinstance(item, str):
            item = _leading_number(item)
        if item is None:
            return 0.0
        return float(item)

    def format_float(self, number: float) -> str:
        """Render ``number`` with ``float_precision`` significant digits."""
        return f"{number:.{self._ctx.settings.float_precision}G}"
