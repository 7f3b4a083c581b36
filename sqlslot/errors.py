"""Custom exception hierarchy for sqlslot.

All public errors inherit from SqlSlotError so callers can catch the base
class for any sqlslot-specific failure.
"""
from __future__ import annotations

from typing import Any


class SqlSlotError(Exception):
    """Base exception for all sqlslot errors."""


class TemplateError(SqlSlotError):
    """Raised when a template cannot be compiled with the supplied arguments.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. INSUFFICIENT_ARGUMENTS).
        details: Extra context about the failing marker or argument.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for API callers."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class InsufficientArgumentsError(TemplateError):
    """Raised when a marker is reached after the argument list is exhausted."""

    def __init__(self, position: int, marker: str, supplied: int) -> None:
        super().__init__(
            "Insufficient arguments provided for placeholders: "
            f"marker '{marker}' needs argument #{position}, "
            f"only {supplied} supplied.",
            code="INSUFFICIENT_ARGUMENTS",
            details={"position": position, "marker": marker, "supplied": supplied},
        )


class InvalidArgumentTypeError(TemplateError):
    """Raised when a ``?a`` marker receives something that is not an array."""

    def __init__(self, marker: str, received: str) -> None:
        super().__init__(
            f"Expected array for placeholder {marker}, got {received}.",
            code="INVALID_ARGUMENT_TYPE",
            details={"marker": marker, "received": received},
        )


class UnsupportedTypeError(TemplateError):
    """Raised when a value has no defined SQL conversion rule."""

    def __init__(self, received: str) -> None:
        super().__init__(
            f"Values of type '{received}' cannot be rendered as SQL.",
            code="UNSUPPORTED_TYPE",
            details={"received": received},
        )


class ConfigError(SqlSlotError):
    """Raised when build settings or the escaping dialect are misconfigured.

    Detected when a :class:`~sqlslot.compile.builder.QueryBuilder` or
    :class:`~sqlslot.database.Database` is constructed, before any template
    is compiled.

    Args:
        message: Human-readable description.
        setting: Name of the offending setting, if any.
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message)
        self.setting = setting
