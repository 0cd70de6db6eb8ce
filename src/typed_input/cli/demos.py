"""Bundled example programs, one per CLI sub-command.

Each program reads a single value from stdin with the library's public
API and reports the result.  They double as usage documentation:

* ``greet``  — plain text, errors go to the CLI error boundary.
* ``number`` — handles every error kind itself and always exits cleanly.
* ``age``    — a fixed-width integer with a range the user can violate.
* ``price``  — a user-defined type with its own ``from_str`` parser.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from typed_input.api import read_input, read_input_line
from typed_input.cli.console import out
from typed_input.cli.exit_codes import ExitCode
from typed_input.core.models import PromptStyle
from typed_input.core.parsers import parse_i32, parse_u8
from typed_input.exceptions import InputError, InputErrorKind, InputParseError


# ---------------------------------------------------------------------------
# Custom target type
# ---------------------------------------------------------------------------

class PriceParseError(ValueError):
    """Raised when text is not ``"<currency> <amount>"``."""


@dataclass(frozen=True, slots=True)
class Price:
    """A currency code paired with an amount, e.g. ``EUR 9.99``."""

    currency: str
    amount: float

    @classmethod
    def from_str(cls, text: str) -> Price:
        """Parse two whitespace-separated parts: currency, then amount."""
        parts = text.split()
        if len(parts) != 2:
            raise PriceParseError("String must have two parts")
        currency, raw_amount = parts
        try:
            amount = float(raw_amount)
        except ValueError as exc:
            raise PriceParseError(f"invalid amount: {raw_amount!r}") from exc
        return cls(currency=currency, amount=amount)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------

def _reader(style: PromptStyle) -> Callable[..., object]:
    return read_input_line if style is PromptStyle.OWN_LINE else read_input


def run_greet(style: PromptStyle) -> int:
    """Ask for a name and greet it."""
    name = _reader(style)("Enter your name: ")
    out.print(f"Hello, {name}!", markup=False)
    return ExitCode.SUCCESS


def run_number(style: PromptStyle) -> int:
    """Ask for an integer, reporting each failure kind in its own words."""
    try:
        number = _reader(style)("Please enter a number: ", parse=parse_i32)
    except InputError as exc:
        match exc.kind:
            case InputErrorKind.EOF:
                out.print("End of input reached.")
            case InputErrorKind.PARSE:
                out.print("Failed to parse the input.")
            case InputErrorKind.IO:
                out.print("An I/O error occurred.")
        return ExitCode.SUCCESS

    out.print(f"You entered: {number}", markup=False)
    return ExitCode.SUCCESS


def run_age(style: PromptStyle) -> int:
    """Ask for an age that must fit in an unsigned byte."""
    try:
        age = _reader(style)("Enter your age: ", parse=parse_u8)
    except InputParseError as exc:
        exc.hint = "The age is required, please enter a whole number from 0 to 255."
        raise

    out.print(f"Your age is {age}", markup=False)
    return ExitCode.SUCCESS


def run_price(style: PromptStyle) -> int:
    """Ask for a price such as ``USD 4.50``."""
    try:
        price = _reader(style)("Please enter a price: ", parse=Price.from_str)
    except InputParseError as exc:
        exc.hint = "Enter a currency code and an amount, e.g. 'USD 4.50'."
        raise

    out.print(repr(price), markup=False)
    return ExitCode.SUCCESS


PROGRAMS: dict[str, Callable[[PromptStyle], int]] = {
    "greet": run_greet,
    "number": run_number,
    "age": run_age,
    "price": run_price,
}
"""Sub-command name -> program entry point."""
