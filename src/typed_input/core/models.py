"""Value types passed to the core reader by its callers.

The prompt style is a plain enumeration: immutable, hashable, and carrying
no state beyond the member itself.
"""

from __future__ import annotations

import enum


class PromptStyle(enum.Enum):
    """How a prompt is laid out relative to the user's input."""

    INLINE = "inline"
    """Prompt is written without a trailing line break; input follows on the same line."""

    OWN_LINE = "own_line"
    """Prompt is written followed by ``"\\n"``; input starts on the next line."""

    @property
    def terminator(self) -> str:
        """Text appended after the prompt for this style."""
        return "\n" if self is PromptStyle.OWN_LINE else ""

