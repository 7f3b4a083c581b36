"""Typed argument values for template compilation.

Raw Python arguments are classified once into a closed union of frozen
pydantic models.  Every model carries a ``kind`` discriminator, so the
scanner and formatter dispatch on the tag instead of probing Python types
or comparing strings.

Usage::

    from sqlslot.schema.values import SKIP, ScalarValue, to_value

    assert to_value("bob") == ScalarValue(value="bob")
    assert to_value(SKIP) is SKIP
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from sqlslot.errors import UnsupportedTypeError

_FROZEN = ConfigDict(frozen=True, extra="forbid", strict=True)

#: The plain Python types a scalar argument may hold.
Scalar = Union[bool, int, float, str, None]

_SCALAR_TYPES = (bool, int, float, str, type(None))


# ---------------------------------------------------------------------------
# Concrete value types
# ---------------------------------------------------------------------------


class SkipValue(BaseModel):
    """The reserved skip sentinel.  Only :data:`SKIP` should ever exist."""

    model_config = _FROZEN

    kind: Literal["skip"] = "skip"


class ScalarValue(BaseModel):
    """A single value: integer, float, string, boolean or ``None``."""

    model_config = _FROZEN

    kind: Literal["scalar"] = "scalar"
    value: Scalar = None


class SequenceValue(BaseModel):
    """An indexed array: scalars in positional order."""

    model_config = _FROZEN

    kind: Literal["sequence"] = "sequence"
    items: tuple[Scalar, ...] = ()


class MappingValue(BaseModel):
    """An associative array: string keys to scalars, in insertion order."""

    model_config = _FROZEN

    kind: Literal["mapping"] = "mapping"
    items: dict[str, Scalar] = Field(default_factory=dict)


Value = Annotated[
    Union[SkipValue, ScalarValue, SequenceValue, MappingValue],
    Field(discriminator="kind"),
]

#: The one skip sentinel handed out by ``skip()``.
SKIP = SkipValue()

_VALUE_TYPES = (SkipValue, ScalarValue, SequenceValue, MappingValue)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_assoc(mapping: Mapping[Any, Any]) -> bool:
    """Return True unless the keys are exactly ``0..n-1`` in iteration order.

    An empty mapping counts as indexed.
    """
    return list(mapping.keys()) != list(range(len(mapping)))


def type_name(obj: Any) -> str:
    """Describe ``obj`` for error messages."""
    if isinstance(obj, _VALUE_TYPES):
        return obj.kind
    return type(obj).__name__


def _scalar(obj: Any) -> Scalar:
    if not isinstance(obj, _SCALAR_TYPES):
        raise UnsupportedTypeError(type_name(obj))
    return obj


def to_value(obj: Any) -> Value:
    """Classify a raw argument into a typed :data:`Value`.

    Args:
        obj: A scalar, a list/tuple of scalars, a mapping of scalars, the
            :data:`SKIP` sentinel, or an already-typed value.

    Returns:
        The matching value model.

    Raises:
        UnsupportedTypeError: If ``obj`` (or one of its elements) has no
            SQL rendering.
    """
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, _SCALAR_TYPES):
        return ScalarValue(value=obj)
    if isinstance(obj, (list, tuple)):
        return SequenceValue(items=tuple(_scalar(item) for item in obj))
    if isinstance(obj, Mapping):
        if not is_assoc(obj):
            return SequenceValue(items=tuple(_scalar(item) for item in obj.values()))
        return MappingValue(items={str(key): _scalar(item) for key, item in obj.items()})
    raise UnsupportedTypeError(type_name(obj))
