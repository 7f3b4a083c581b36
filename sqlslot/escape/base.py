"""Escaper abstraction: the one database collaborator sqlslot relies on.

The Strategy pattern is used:
- ``Escaper`` defines how a raw string becomes a quoted SQL literal.
- ``MySQLEscaper``, ``StandardEscaper`` and ``ConnectionEscaper`` supply the
  dialect-specific ``raw_escape`` step.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Escaper(ABC):
    """Abstract base for string escapers.

    Implementations must be pure functions of their own state so a single
    instance can be shared between threads.
    """

    @abstractmethod
    def raw_escape(self, value: str) -> str:
        """Neutralise quotes and special characters in ``value``.

        Args:
            value: Unescaped string data.

        Returns:
            Escaped text, without surrounding quotes.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'mysql'``)."""

    def quote(self, value: str) -> str:
        """Return ``value`` as a single-quoted SQL string literal."""
        return f"'{self.raw_escape(value)}'"
