"""Convenience entry points bound to the process's standard streams.

Both functions forward to :func:`~typed_input.core.reader.read_input_from`
with ``sys.stdin`` as the source and ``sys.stdout`` as the prompt
destination.  The streams are looked up at call time, so test harnesses
that swap ``sys.stdin``/``sys.stdout`` are honoured.

Usage::

    name = read_input("Enter your name: ")
    age = read_input("Enter {}'s age: ", name, parse=parse_u8)
    colour = read_input_line("What's your favourite colour?")
"""

from __future__ import annotations

import sys
from typing import TypeVar, overload

from typed_input.core.models import PromptStyle
from typed_input.core.protocols import Parser
from typed_input.core.reader import DEFAULT_PARSE_ERRORS, read_input_from

T = TypeVar("T")


def format_prompt(
    prompt: str | None,
    args: tuple[object, ...],
    kwargs: dict[str, object],
) -> str | None:
    """Interpolate *args*/*kwargs* into *prompt* with :meth:`str.format`.

    A prompt without arguments is returned verbatim, so literal braces
    need no escaping in the common case.

    Raises
    ------
    TypeError
        Format arguments were given but *prompt* is ``None``.
    """
    if not (args or kwargs):
        return prompt
    if prompt is None:
        raise TypeError("format arguments given without a prompt")
    return prompt.format(*args, **kwargs)


def _read_stdin(
    style: PromptStyle,
    prompt: str | None,
    args: tuple[object, ...],
    kwargs: dict[str, object],
    parse: Parser[object] | None,
    parse_errors: tuple[type[Exception], ...],
) -> object:
    return read_input_from(
        sys.stdin,
        format_prompt(prompt, args, kwargs),
        style,
        parse=parse,
        parse_errors=parse_errors,
        output=sys.stdout,
    )


@overload
def read_input(
    prompt: str | None = ...,
    /,
    *args: object,
    parse: None = ...,
    parse_errors: tuple[type[Exception], ...] = ...,
    **kwargs: object,
) -> str: ...


@overload
def read_input(
    prompt: str | None = ...,
    /,
    *args: object,
    parse: Parser[T],
    parse_errors: tuple[type[Exception], ...] = ...,
    **kwargs: object,
) -> T: ...


def read_input(
    prompt: str | None = None,
    /,
    *args: object,
    parse: Parser[object] | None = None,
    parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS,
    **kwargs: object,
) -> object:
    """Prompt inline on stdout, then read and parse one line of stdin.

    With no *prompt* nothing is written and the call blocks on the read
    immediately.

    Raises
    ------
    InputIOError, InputEOFError, InputParseError
        See :func:`~typed_input.core.reader.read_input_from`.
    """
    return _read_stdin(PromptStyle.INLINE, prompt, args, kwargs, parse, parse_errors)


@overload
def read_input_line(
    prompt: str | None = ...,
    /,
    *args: object,
    parse: None = ...,
    parse_errors: tuple[type[Exception], ...] = ...,
    **kwargs: object,
) -> str: ...


@overload
def read_input_line(
    prompt: str | None = ...,
    /,
    *args: object,
    parse: Parser[T],
    parse_errors: tuple[type[Exception], ...] = ...,
    **kwargs: object,
) -> T: ...


def read_input_line(
    prompt: str | None = None,
    /,
    *args: object,
    parse: Parser[object] | None = None,
    parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS,
    **kwargs: object,
) -> object:
    """Like :func:`read_input`, but the prompt gets its own line."""
    return _read_stdin(PromptStyle.OWN_LINE, prompt, args, kwargs, parse, parse_errors)
