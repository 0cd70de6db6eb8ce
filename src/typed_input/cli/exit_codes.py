"""Process exit codes for the ``typed-input`` demo programs.

A demo that handles an input error itself (``number``) still exits with
:attr:`ExitCode.SUCCESS`.  Only errors reaching the boundary in
:func:`typed_input.cli.app.cli` produce a non-zero code.
"""

from __future__ import annotations

import enum

from typed_input.exceptions import TypedInputError


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    ERROR = 1  # a TypedInputError reached the boundary
    UNEXPECTED_ERROR = 2
    INTERRUPTED = 130  # 128 + SIGINT

    @classmethod
    def for_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception caught at the CLI boundary to its exit code."""
        if isinstance(exc, TypedInputError):
            return cls.ERROR
        if isinstance(exc, KeyboardInterrupt):
            return cls.INTERRUPTED
        return cls.UNEXPECTED_ERROR
