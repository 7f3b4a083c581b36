"""Compilation result value object."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompiledQuery:
    """The output of a successful compilation.

    Attributes:
        sql: The finished SQL text, ready to execute as-is.
        dialect: Name of the escaper dialect used for string literals.
        arguments_used: Number of arguments consumed by markers.
        arguments_supplied: Number of arguments passed in.
    """

    sql: str
    dialect: str
    arguments_used: int
    arguments_supplied: int

    @property
    def unused_arguments(self) -> int:
        """Arguments left over after the last marker."""
        return self.arguments_supplied - self.arguments_used
