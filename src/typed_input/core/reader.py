"""The single prompt/read/parse operation.

This is the only place in the package where behaviour lives.  The
pipeline is linear with three ordered failure points, each one
short-circuiting the rest:

1. prompt I/O   -> :class:`~typed_input.exceptions.InputIOError`
2. line read    -> :class:`~typed_input.exceptions.InputIOError` or
   :class:`~typed_input.exceptions.InputEOFError`
3. parse        -> :class:`~typed_input.exceptions.InputParseError`

Nothing is retried and nothing is logged.  The caller owns the policy.
"""

from __future__ import annotations

import sys
from typing import TypeVar, overload

from typed_input.core.models import PromptStyle
from typed_input.core.protocols import LineSource, Parser, PromptSink
from typed_input.exceptions import InputEOFError, InputIOError, InputParseError

T = TypeVar("T")

LINE_TERMINATORS: str = "\r\n"
"""Characters stripped from the end of every line before parsing."""

DEFAULT_PARSE_ERRORS: tuple[type[Exception], ...] = (ValueError,)
"""Exception types treated as "the parser rejected the text"."""

# A closed Python stream raises ValueError rather than OSError.
_STREAM_ERRORS: tuple[type[Exception], ...] = (OSError, ValueError)


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------

def _write_prompt(output: PromptSink, prompt: str, style: PromptStyle) -> None:
    """Write *prompt* in *style* and flush so it shows before the read blocks."""
    try:
        output.write(prompt + style.terminator)
        output.flush()
    except _STREAM_ERRORS as exc:
        raise InputIOError(exc) from exc


def _read_line(source: LineSource) -> str:
    """Read one raw line from *source*, decoding bytes as UTF-8."""
    try:
        raw = source.readline()
    except _STREAM_ERRORS as exc:
        raise InputIOError(exc) from exc

    if not raw:
        raise InputEOFError()

    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputIOError(exc) from exc
    return raw


def strip_line_terminators(line: str) -> str:
    """Remove every trailing ``\\r`` and ``\\n``; leave all else untouched.

    >>> strip_line_terminators("  42  \\r\\n")
    '  42  '
    """
    return line.rstrip(LINE_TERMINATORS)


# ---------------------------------------------------------------------------
# Public operation
# ---------------------------------------------------------------------------

@overload
def read_input_from(
    source: LineSource,
    prompt: str | None = ...,
    style: PromptStyle = ...,
    *,
    parse: None = ...,
    parse_errors: tuple[type[Exception], ...] = ...,
    output: PromptSink | None = ...,
) -> str: ...


@overload
def read_input_from(
    source: LineSource,
    prompt: str | None = ...,
    style: PromptStyle = ...,
    *,
    parse: Parser[T],
    parse_errors: tuple[type[Exception], ...] = ...,
    output: PromptSink | None = ...,
) -> T: ...


def read_input_from(
    source: LineSource,
    prompt: str | None = None,
    style: PromptStyle = PromptStyle.INLINE,
    *,
    parse: Parser[object] | None = None,
    parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS,
    output: PromptSink | None = None,
) -> object:
    """Optionally prompt, read one line from *source*, and parse it.

    Parameters
    ----------
    source:
        Line-buffered stream.  ``readline()`` may return ``str`` or
        ``bytes``; bytes are decoded as UTF-8.
    prompt:
        Already-formatted prompt text, or ``None`` to write nothing.
    style:
        Layout of the prompt.  Ignored when *prompt* is ``None``.
    parse:
        Converts the trimmed line into the target type.  Defaults to
        returning the text itself.
    parse_errors:
        Exception types with which *parse* signals rejection.  Any other
        exception raised by *parse* propagates unchanged.
    output:
        Prompt destination.  ``None`` means the current ``sys.stdout``.

    Returns
    -------
    object
        Whatever *parse* returned for the trimmed line.

    Raises
    ------
    InputIOError
        Writing or flushing the prompt, reading the line, or decoding
        it failed.
    InputEOFError
        *source* was already exhausted: zero bytes were obtained.
    InputParseError
        *parse* rejected the text.  ``err.error`` is the parser's own
        exception object.
    """
    if prompt is not None:
        _write_prompt(sys.stdout if output is None else output, prompt, style)

    text = strip_line_terminators(_read_line(source))

    if parse is None:
        return text
    try:
        return parse(text)
    except parse_errors as exc:
        raise InputParseError(exc) from exc
