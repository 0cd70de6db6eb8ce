"""typed-input — prompt, read one line, parse it into a value.

The whole library is one operation, :func:`read_input_from`, plus the
stdin-bound shortcuts :func:`read_input` and :func:`read_input_line`.
Failures surface as exactly one of :class:`InputIOError`,
:class:`InputParseError` or :class:`InputEOFError`.
"""

from typed_input.api import read_input, read_input_line
from typed_input.core.models import PromptStyle
from typed_input.core.reader import read_input_from
from typed_input.exceptions import (
    InputEOFError,
    InputError,
    InputErrorKind,
    InputIOError,
    InputParseError,
    TypedInputError,
)
from typed_input.version import __version__

__all__: list[str] = [
    "InputEOFError",
    "InputError",
    "InputErrorKind",
    "InputIOError",
    "InputParseError",
    "PromptStyle",
    "TypedInputError",
    "__version__",
    "read_input",
    "read_input_from",
    "read_input_line",
]
