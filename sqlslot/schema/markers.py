"""Constants for placeholder markers and conditional fragments.

Both the scanner and the collapser match templates with the patterns
defined here, so the marker syntax lives in exactly one place.
"""

from __future__ import annotations

import re
from enum import Enum

# ---------------------------------------------------------------------------
# Marker type enum
# ---------------------------------------------------------------------------


class MarkerType(str, Enum):
    """The type code following ``?`` in a placeholder marker."""

    GENERIC = ""
    INTEGER = "d"
    FLOAT = "f"
    ARRAY = "a"
    IDENTIFIER = "#"

    @property
    def marker(self) -> str:
        """The marker text as written in a template (e.g. ``'?d'``)."""
        return f"?{self.value}"


# ---------------------------------------------------------------------------
# Template patterns
# ---------------------------------------------------------------------------

#: A ``?`` optionally followed by one recognised type code.
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\?([dfa#]?)")

#: A conditional fragment with no nested braces inside.
FRAGMENT_PATTERN: re.Pattern[str] = re.compile(r"\{([^{}]*)\}")
