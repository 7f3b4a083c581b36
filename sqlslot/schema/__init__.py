"""sqlslot value and configuration models."""
from sqlslot.schema.markers import MarkerType
from sqlslot.schema.settings import BuildSettings
from sqlslot.schema.values import (
    SKIP,
    MappingValue,
    ScalarValue,
    SequenceValue,
    SkipValue,
    Value,
    to_value,
)

__all__ = [
    "MarkerType",
    "BuildSettings",
    "SKIP",
    "MappingValue",
    "ScalarValue",
    "SequenceValue",
    "SkipValue",
    "Value",
    "to_value",
]
