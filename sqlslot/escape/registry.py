"""Escaper registry (Open/Closed Principle).

Adding a dialect means registering an :class:`~sqlslot.escape.base.Escaper`
subclass here; ``Database`` and ``QueryBuilder`` look it up by the
``BuildSettings.dialect`` name.

Usage::

    from sqlslot.escape.registry import EscaperFactory

    @EscaperFactory.register("clickhouse")
    class ClickHouseEscaper(Escaper):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlslot.errors import ConfigError
from sqlslot.escape.base import Escaper


class EscaperFactory:
    """Registry mapping dialect names to :class:`Escaper` classes.

    Example::

        @EscaperFactory.register("mysql")
        class MySQLEscaper(Escaper):
            ...

        escaper = EscaperFactory.create("mysql")
    """

    _escapers: ClassVar[dict[str, type[Escaper]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Escaper]], type[Escaper]]:
        """Decorator that registers an escaper class under ``name``.

        Args:
            name: The dialect name (e.g. ``"mysql"``).

        Returns:
            A decorator that registers and returns the escaper class.
        """

        def decorator(escaper_cls: type[Escaper]) -> type[Escaper]:
            cls._escapers[name] = escaper_cls
            return escaper_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, escaper_cls: type[Escaper]) -> None:
        """Register an escaper class without using the decorator form."""
        cls._escapers[name] = escaper_cls

    @classmethod
    def create(cls, name: str) -> Escaper:
        """Instantiate the escaper registered for ``name``.

        Raises:
            ConfigError: If no escaper is registered for ``name``.
        """
        escaper_cls = cls._escapers.get(name)
        if escaper_cls is None:
            registered = sorted(cls._escapers)
            raise ConfigError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}.",
                setting="dialect",
            )
        return escaper_cls()

    @classmethod
    def registered_dialects(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._escapers)
