"""Exception hierarchy for typed-input.

The library reports every failed read as an :class:`InputError`.  Exactly
one of its three subclasses is raised per failing call, and each one
exposes an :class:`InputErrorKind` so callers can
branch either on the class or on ``err.kind``.

Hierarchy
---------
TypedInputError
├── InputError
│   ├── InputIOError
│   ├── InputParseError
│   └── InputEOFError
└── EnvironmentError
"""

from __future__ import annotations

import enum


class InputErrorKind(enum.Enum):
    """The three ways a read-and-parse cycle can fail."""

    IO = "io"
    PARSE = "parse"
    EOF = "eof"


class TypedInputError(Exception):
    """Base exception for all typed-input errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Read-and-parse failures -----------------------------------------------

class InputError(TypedInputError):
    """A prompt/read/parse cycle failed.

    Not raised directly; catch it to handle all three cases at once.
    """

    kind: InputErrorKind


class InputIOError(InputError):
    """Writing the prompt, flushing, or reading the line failed."""

    kind = InputErrorKind.IO

    def __init__(self, source: Exception, *, hint: str | None = None) -> None:
        super().__init__(f"I/O error: {source}", hint=hint)
        self.source: Exception = source
        """The underlying stream or decoding error."""
        self.__cause__ = source


class InputParseError(InputError):
    """The line was read but the parser rejected it."""

    kind = InputErrorKind.PARSE

    def __init__(self, error: Exception, *, hint: str | None = None) -> None:
        super().__init__(f"Parse error: {error}", hint=hint)
        self.error: Exception = error
        """The parser's own exception, unchanged."""
        self.__cause__ = error


class InputEOFError(InputError):
    """The source was exhausted before any part of a new line was read."""

    kind = InputErrorKind.EOF

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("EOF encountered", hint=hint)


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TypedInputError):
    """Raised when an optional runtime dependency is not available."""
