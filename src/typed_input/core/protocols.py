"""Protocols (interfaces) consumed by the core reader.

Any object that implements the listed methods satisfies these protocols
structurally.  ``sys.stdin``, ``sys.stdout``, ``io.StringIO`` and
``io.BytesIO`` all qualify without adaptation.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class LineSource(Protocol):
    """A line-buffered readable stream."""

    def readline(self) -> str | bytes:
        """Return the next line including its terminator.

        Returns the remaining data without a terminator when the stream
        ends mid-line, and an empty value once the stream is exhausted.
        """
        ...  # pragma: no cover


class PromptSink(Protocol):
    """Destination the prompt text is written to."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover

    def flush(self) -> object:
        ...  # pragma: no cover


class Parser(Protocol[T_co]):
    """The "parse from text" capability of a target type.

    Builtins such as :class:`int`, :class:`float` and :class:`str`
    satisfy it, as does any ``from_str`` classmethod.  Rejection is
    signalled by raising an exception; by convention a
    :class:`ValueError` subclass.
    """

    def __call__(self, text: str, /) -> T_co:
        ...  # pragma: no cover
