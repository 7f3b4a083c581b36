"""Pydantic model for the settings that shape a compiled query.

Settings are immutable and validated on construction::

    from sqlslot import BuildSettings, Database

    db = Database(settings=BuildSettings(dialect="sqlite", float_precision=10))
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from sqlslot.errors import ConfigError


class BuildSettings(BaseModel):
    """Controls escaping and rendering for every query built with it.

    Attributes:
        dialect: Escaper registered with
            :class:`~sqlslot.escape.registry.EscaperFactory` (``'mysql'``,
            ``'sqlite'``, ...).  Ignored when an escaper is passed explicitly.
        skip_literal: Text left in the SQL when a skip argument is bound to a
            marker outside any ``{...}`` fragment.
        float_precision: Significant digits used when rendering floats.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dialect: str = "mysql"
    skip_literal: str = Field("SKIP_BLOCK", min_length=1)
    float_precision: int = Field(14, ge=1, le=17)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "BuildSettings":
        """Build settings from a plain dict (e.g. a loaded config file section).

        Raises:
            ConfigError: If a key is unknown or a value is out of range.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            errors = exc.errors()
            setting = ".".join(str(p) for p in errors[0]["loc"]) if errors else None
            raise ConfigError(f"Invalid build settings: {exc}", setting=setting) from exc
