"""Second pass: keep or drop ``{...}`` conditional fragments.

A fragment whose text contains the skip marker is removed together with its
braces; any other fragment is replaced by its inner text.  Nested braces
are not supported: only innermost ``{...}`` spans without further braces
are matched, and unbalanced braces are left as they are.  Whitespace around
a removed fragment is kept verbatim.
"""

from __future__ import annotations

import logging
import re

from sqlslot.compile.context import CompilationContext
from sqlslot.schema.markers import FRAGMENT_PATTERN

logger = logging.getLogger(__name__)


class BlockCollapser:
    """Resolves conditional fragments in scanner output.

    Args:
        ctx: Compilation context; must be the one the scanner used so both
            passes agree on the skip marker.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx
        self.dropped = 0
        self.kept = 0

    def collapse(self, text: str) -> str:
        """Return ``text`` with every fragment kept (unbraced) or dropped."""
        marker = self._ctx.skip_marker

        def resolve(match: re.Match[str]) -> str:
            block = match.group(1)
            if marker in block:
                self.dropped += 1
                return ""
            self.kept += 1
            return block

        result = FRAGMENT_PATTERN.sub(resolve, text)

        if marker in result:
            logger.warning(
                "Skip value used outside a conditional fragment; rendering it as %r",
                self._ctx.settings.skip_literal,
            )
            result = result.replace(marker, self._ctx.settings.skip_literal)

        logger.debug("Fragments kept: %d, dropped: %d", self.kept, self.dropped)
        return result
