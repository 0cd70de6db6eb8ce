"""Tests for the core prompt/read/parse operation.

Every test passes an explicit in-memory source and prompt sink, so no
real stdin/stdout is involved.  Failing streams are small stand-in
classes that raise on demand.
"""

from __future__ import annotations

import io
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from unittest.mock import MagicMock

import pytest

from typed_input.core.models import PromptStyle
from typed_input.core.parsers import IntErrorKind, ParseIntError, parse_i32, parse_u8
from typed_input.core.reader import read_input_from, strip_line_terminators
from typed_input.exceptions import (
    InputEOFError,
    InputError,
    InputErrorKind,
    InputIOError,
    InputParseError,
)


# ---------------------------------------------------------------------------
# Stand-in streams
# ---------------------------------------------------------------------------

class _FailingSource:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def readline(self) -> str:
        raise self.error


class _RecordingSink:
    """Prompt sink that logs calls into a shared event list."""

    def __init__(self, events: list[str], *, fail_on: str | None = None) -> None:
        self.events = events
        self.fail_on = fail_on
        self.text = ""

    def write(self, text: str) -> int:
        if self.fail_on == "write":
            raise OSError("write refused")
        self.events.append("write")
        self.text += text
        return len(text)

    def flush(self) -> None:
        if self.fail_on == "flush":
            raise OSError("flush refused")
        self.events.append("flush")


class _RecordingSource:
    def __init__(self, events: list[str], line: str) -> None:
        self.events = events
        self.line = line

    def readline(self) -> str:
        self.events.append("read")
        return self.line


def _read(text: str, **kwargs: object) -> object:
    return read_input_from(io.StringIO(text), output=io.StringIO(), **kwargs)


# ---------------------------------------------------------------------------
# Successful reads
# ---------------------------------------------------------------------------

class TestSuccessfulReads:
    def test_text_line_without_parser(self) -> None:
        assert _read("Alice\n") == "Alice"

    def test_unsigned_byte(self) -> None:
        assert _read("7\n", parse=parse_u8) == 7

    def test_builtin_float(self) -> None:
        assert _read("2.5\n", parse=float) == 2.5

    def test_fraction(self) -> None:
        assert _read("3/4\n", parse=Fraction) == Fraction(3, 4)

    def test_last_line_without_terminator(self) -> None:
        assert _read("last") == "last"

    def test_empty_line_is_not_eof(self) -> None:
        assert _read("\n") == ""

    def test_consumes_exactly_one_line(self) -> None:
        source = io.StringIO("1\n2\n")
        first = read_input_from(source, parse=parse_i32)
        second = read_input_from(source, parse=parse_i32)
        assert (first, second) == (1, 2)
        assert source.read() == ""

    def test_bytes_source_is_decoded(self) -> None:
        source = io.BytesIO("héllo\r\n".encode("utf-8"))
        assert read_input_from(source) == "héllo"


# ---------------------------------------------------------------------------
# Terminator stripping
# ---------------------------------------------------------------------------

class TestTerminatorStripping:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("abc\n", "abc"),
            ("abc\r\n", "abc"),
            ("abc\r", "abc"),
            ("abc\r\r\n", "abc"),
            ("  42  \r\n", "  42  "),
            ("a\tb \n", "a\tb "),
            ("\x00mid\rdle\n", "\x00mid\rdle"),
            ("\r\n", ""),
        ],
    )
    def test_only_trailing_terminators_removed(self, line: str, expected: str) -> None:
        assert strip_line_terminators(line) == expected

    def test_surrounding_spaces_reach_strict_parser(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            _read("  42  \r\n", parse=parse_i32)
        assert exc_info.value.error == ParseIntError(IntErrorKind.INVALID_DIGIT)

    def test_tolerant_parser_accepts_surrounding_spaces(self) -> None:
        assert _read("  42  \r\n", parse=int) == 42


# ---------------------------------------------------------------------------
# End of stream
# ---------------------------------------------------------------------------

class TestEof:
    def test_exhausted_text_source(self) -> None:
        with pytest.raises(InputEOFError):
            _read("")

    def test_exhausted_bytes_source(self) -> None:
        with pytest.raises(InputEOFError):
            read_input_from(io.BytesIO(b""))

    def test_parser_not_called_on_eof(self) -> None:
        parse = MagicMock()
        with pytest.raises(InputEOFError):
            _read("", parse=parse)
        parse.assert_not_called()

    def test_eof_after_last_line(self) -> None:
        source = io.StringIO("only\n")
        assert read_input_from(source) == "only"
        with pytest.raises(InputEOFError) as exc_info:
            read_input_from(source)
        assert exc_info.value.kind is InputErrorKind.EOF


# ---------------------------------------------------------------------------
# Parse failures
# ---------------------------------------------------------------------------

class TestParseFailures:
    def test_invalid_integer(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            _read("abc\n", parse=parse_i32)
        err = exc_info.value
        assert err.kind is InputErrorKind.PARSE
        assert isinstance(err.error, ParseIntError)
        assert err.error.kind is IntErrorKind.INVALID_DIGIT

    def test_carries_the_parsers_own_error(self) -> None:
        sentinel = ValueError("nope")

        def parse(_text: str) -> int:
            raise sentinel

        with pytest.raises(InputParseError) as exc_info:
            _read("x\n", parse=parse)
        assert exc_info.value.error is sentinel
        assert exc_info.value.__cause__ is sentinel

    def test_empty_line_rejected_by_parser(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            _read("\n", parse=parse_u8)
        assert exc_info.value.error.kind is IntErrorKind.EMPTY

    def test_custom_parse_errors(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            _read("abc\n", parse=Decimal, parse_errors=(InvalidOperation,))
        assert isinstance(exc_info.value.error, InvalidOperation)

    def test_unlisted_exception_propagates_unchanged(self) -> None:
        def parse(_text: str) -> int:
            raise TypeError("parser bug")

        with pytest.raises(TypeError, match="parser bug"):
            _read("x\n", parse=parse)


# ---------------------------------------------------------------------------
# I/O failures
# ---------------------------------------------------------------------------

class TestIoFailures:
    def test_read_error(self) -> None:
        error = OSError("device gone")
        with pytest.raises(InputIOError) as exc_info:
            read_input_from(_FailingSource(error))
        assert exc_info.value.source is error
        assert exc_info.value.kind is InputErrorKind.IO

    def test_closed_source(self) -> None:
        source = io.StringIO("never read\n")
        source.close()
        with pytest.raises(InputIOError) as exc_info:
            read_input_from(source)
        assert isinstance(exc_info.value.source, ValueError)

    def test_invalid_utf8(self) -> None:
        with pytest.raises(InputIOError) as exc_info:
            read_input_from(io.BytesIO(b"\xff\xfe\n"))
        assert isinstance(exc_info.value.source, UnicodeDecodeError)

    def test_write_failure_skips_read(self) -> None:
        events: list[str] = []
        source = _RecordingSource(events, "x\n")
        with pytest.raises(InputIOError, match="write refused"):
            read_input_from(source, "Name: ", output=_RecordingSink(events, fail_on="write"))
        assert "read" not in events

    def test_flush_failure(self) -> None:
        events: list[str] = []
        source = _RecordingSource(events, "x\n")
        with pytest.raises(InputIOError, match="flush refused"):
            read_input_from(source, "Name: ", output=_RecordingSink(events, fail_on="flush"))
        assert events == ["write"]

    def test_io_error_is_not_mistaken_for_eof(self) -> None:
        with pytest.raises(InputError) as exc_info:
            read_input_from(_FailingSource(OSError("short read")))
        assert not isinstance(exc_info.value, InputEOFError)


# ---------------------------------------------------------------------------
# Prompt display
# ---------------------------------------------------------------------------

class TestPrompt:
    def test_inline_prompt_has_no_line_break(self) -> None:
        sink = io.StringIO()
        read_input_from(io.StringIO("x\n"), "Name: ", PromptStyle.INLINE, output=sink)
        assert sink.getvalue() == "Name: "

    def test_own_line_prompt_ends_with_line_break(self) -> None:
        sink = io.StringIO()
        read_input_from(io.StringIO("x\n"), "Name:", PromptStyle.OWN_LINE, output=sink)
        assert sink.getvalue() == "Name:\n"

    def test_prompt_flushed_before_read(self) -> None:
        events: list[str] = []
        sink = _RecordingSink(events)
        result = read_input_from(_RecordingSource(events, "ok\n"), "Go: ", output=sink)
        assert result == "ok"
        assert events == ["write", "flush", "read"]

    def test_no_prompt_writes_nothing(self) -> None:
        events: list[str] = []
        read_input_from(_RecordingSource(events, "ok\n"), output=_RecordingSink(events))
        assert events == ["read"]

    def test_empty_prompt_is_still_written(self) -> None:
        sink = io.StringIO()
        read_input_from(io.StringIO("x\n"), "", PromptStyle.OWN_LINE, output=sink)
        assert sink.getvalue() == "\n"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        read_input_from(io.StringIO("x\n"), "Prompt> ")
        assert capsys.readouterr().out == "Prompt> "

    def test_prompt_written_even_when_read_hits_eof(self) -> None:
        sink = io.StringIO()
        with pytest.raises(InputEOFError):
            read_input_from(io.StringIO(""), "Name: ", output=sink)
        assert sink.getvalue() == "Name: "

    def test_style_ignored_without_prompt(self) -> None:
        sink = io.StringIO()
        read_input_from(io.StringIO("x\n"), None, PromptStyle.OWN_LINE, output=sink)
        assert sink.getvalue() == ""
