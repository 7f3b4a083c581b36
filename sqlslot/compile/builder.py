"""Template → SQL compilation.

``QueryBuilder`` is the top-level orchestrator.  For every template it
creates a fresh :class:`~sqlslot.compile.context.CompilationContext` (and
with it a fresh skip marker) and an
:class:`~sqlslot.compile.context.ArgumentCursor`, then runs two passes:

QueryBuilder
  ├── PlaceholderScanner   (scanner.py)    markers → rendered values
  │     └── ValueFormatter (formatter.py)
  └── BlockCollapser       (collapser.py)  ``{...}`` → kept or dropped

The scanner's output is intermediate text that may still contain skip
markers; only the collapser's output ever leaves the builder.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlslot.compile.base import CompiledQuery
from sqlslot.compile.collapser import BlockCollapser
from sqlslot.compile.context import ArgumentCursor, CompilationContext
from sqlslot.compile.scanner import PlaceholderScanner
from sqlslot.escape.base import Escaper
from sqlslot.escape.registry import EscaperFactory
from sqlslot.schema.settings import BuildSettings

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Compiles query templates with positional arguments into SQL text.

    Args:
        escaper: String escaper.  Defaults to the escaper registered for
            ``settings.dialect``.
        settings: Rendering settings; defaults to ``BuildSettings()``.

    Raises:
        ConfigError: If no escaper is given and ``settings.dialect`` is not
            registered.
    """

    def __init__(
        self,
        escaper: Escaper | None = None,
        settings: BuildSettings | None = None,
    ) -> None:
        self._settings = settings or BuildSettings()
        self._escaper = escaper or EscaperFactory.create(self._settings.dialect)

    @property
    def escaper(self) -> Escaper:
        return self._escaper

    @property
    def settings(self) -> BuildSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, template: str, args: Sequence[Any] = ()) -> CompiledQuery:
        """Compile ``template`` with ``args``.

        Args:
            template: SQL text with placeholder markers and ``{...}``
                fragments.
            args: One argument per marker, in order of appearance.

        Returns:
            :class:`~sqlslot.compile.base.CompiledQuery` with the SQL text
            and argument usage.

        Raises:
            InsufficientArgumentsError: Fewer arguments than markers.
            InvalidArgumentTypeError: ``?a`` bound to a non-array.
            UnsupportedTypeError: An argument with no SQL rendering.
        """
        ctx = CompilationContext(escaper=self._escaper, settings=self._settings)
        cursor = ArgumentCursor(args)

        intermediate = PlaceholderScanner(ctx).substitute(template, cursor)
        sql = BlockCollapser(ctx).collapse(intermediate)

        if cursor.remaining:
            logger.debug("%d argument(s) not consumed by any marker", cursor.remaining)

        return CompiledQuery(
            sql=sql,
            dialect=self._escaper.dialect_name,
            arguments_used=cursor.position,
            arguments_supplied=len(args),
        )

    def build(self, template: str, args: Sequence[Any] = ()) -> str:
        """Compile ``template`` with ``args`` and return only the SQL text."""
        return self.compile(template, args).sql
