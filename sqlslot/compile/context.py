"""Compilation context value objects.

``CompilationContext`` packages the ``(escaper, settings, skip marker)``
clump shared by the formatter, scanner and collapser for one build.
``ArgumentCursor`` is the single positional cursor that the scanner
advances across the whole template.
"""
from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlslot.errors import InsufficientArgumentsError
from sqlslot.escape.base import Escaper
from sqlslot.schema.settings import BuildSettings


def new_skip_marker() -> str:
    """Return a fresh marker for skipped arguments.

    The NUL delimiters never survive string escaping and the nonce makes an
    accidental match from identifier text practically impossible.
    """
    return f"\x00skip:{uuid.uuid4().hex}\x00"


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for a single compilation run.

    Attributes:
        escaper: Collaborator used to escape string values.
        settings: Rendering settings.
        skip_marker: Text the scanner emits for a skip argument and the
            collapser looks for inside fragments.
    """

    escaper: Escaper
    settings: BuildSettings = field(default_factory=BuildSettings)
    skip_marker: str = field(default_factory=new_skip_marker)


@dataclass
class ArgumentCursor:
    """Hands out positional arguments strictly left to right.

    Fragment boundaries do not reset the cursor: a marker inside a skipped
    fragment still consumes its argument.
    """

    args: Sequence[Any]
    position: int = 0

    def take(self, marker: str) -> Any:
        """Return the next unconsumed argument for ``marker``.

        Raises:
            InsufficientArgumentsError: If every argument has been consumed.
        """
        if self.position >= len(self.args):
            raise InsufficientArgumentsError(
                position=self.position, marker=marker, supplied=len(self.args)
            )
        value = self.args[self.position]
        self.position += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self.args) - self.position
