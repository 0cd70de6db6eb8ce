"""Core layer — the read-and-parse operation and its value types.

Rules
-----
* No ``print()`` calls; the only output is the caller's prompt.
* No imports from ``cli``.
* No state kept between calls.
"""

from typed_input.core.models import PromptStyle
from typed_input.core.protocols import LineSource, Parser, PromptSink
from typed_input.core.reader import read_input_from, strip_line_terminators
from typed_input.exceptions import InputErrorKind

__all__: list[str] = [
    "InputErrorKind",
    "LineSource",
    "Parser",
    "PromptSink",
    "PromptStyle",
    "read_input_from",
    "strip_line_terminators",
]
