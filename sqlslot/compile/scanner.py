"""First pass: replace every placeholder marker with its rendered argument."""

from __future__ import annotations

import logging
import re

from sqlslot.compile.context import ArgumentCursor, CompilationContext
from sqlslot.compile.formatter import ValueFormatter
from sqlslot.schema.markers import PLACEHOLDER_PATTERN, MarkerType
from sqlslot.schema.values import SkipValue, to_value

logger = logging.getLogger(__name__)


class PlaceholderScanner:
    """Substitutes ``?``, ``?d``, ``?f``, ``?a`` and ``?#`` markers.

    Markers are matched left to right without overlap and replaced in a
    single rewrite, so rendered values are never rescanned for markers.
    A skip argument is replaced by the context's skip marker, which the
    :class:`~sqlslot.compile.collapser.BlockCollapser` picks up later.

    Args:
        ctx: Compilation context for this run.
        formatter: Formatter to render non-skip arguments; defaults to a
            :class:`ValueFormatter` over ``ctx``.
    """

    def __init__(
        self,
        ctx: CompilationContext,
        formatter: ValueFormatter | None = None,
    ) -> None:
        self._ctx = ctx
        self._formatter = formatter or ValueFormatter(ctx)

    def substitute(self, template: str, cursor: ArgumentCursor) -> str:
        """Return ``template`` with every marker replaced.

        Args:
            template: SQL text containing placeholder markers.
            cursor: Argument cursor; advanced once per marker.

        Raises:
            InsufficientArgumentsError: If a marker has no argument left.
            InvalidArgumentTypeError: ``?a`` bound to a non-array.
            UnsupportedTypeError: An argument with no SQL rendering.
        """
        start = cursor.position

        def replace(match: re.Match[str]) -> str:
            marker_type = MarkerType(match.group(1))
            value = to_value(cursor.take(match.group(0)))
            if isinstance(value, SkipValue):
                return self._ctx.skip_marker
            return self._formatter.convert(marker_type, value)

        result = PLACEHOLDER_PATTERN.sub(replace, template)
        logger.debug("Substituted %d placeholder(s)", cursor.position - start)
        return result
