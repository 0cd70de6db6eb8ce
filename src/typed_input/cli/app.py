"""CLI application entry point and command routing for typed-input.

This module is the **sole error boundary** for the demo programs.  It
catches :class:`~typed_input.exceptions.TypedInputError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No input handling lives here — all work is delegated to the programs
  in :mod:`typed_input.cli.demos`, which use the public library API.
* This module is the only place that translates between library errors
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from typed_input.cli.console import console, escape
from typed_input.cli.exit_codes import ExitCode
from typed_input.core.models import PromptStyle
from typed_input.exceptions import InputEOFError, TypedInputError
from typed_input.version import __version__

EOF_HINT: str = "Input stream was closed before a line was entered."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``typed-input <program>``             — run one demo program
    * ``typed-input --own-line <program>``  — same, prompt on its own line
    * ``typed-input --version``
    """
    from typed_input.cli.demos import PROGRAMS

    parser = argparse.ArgumentParser(
        prog="typed-input",
        description="Prompt for one line of input and parse it into a typed value.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--own-line",
        action="store_true",
        help="Print the prompt on its own line instead of inline.",
    )
    parser.add_argument(
        "program",
        nargs="?",
        default=None,
        choices=sorted(PROGRAMS),
        help="Demo program to run.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the typed-input CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from typed_input.cli.demos import PROGRAMS

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.program is None:
        parser.print_help()
        return ExitCode.SUCCESS

    style = PromptStyle.OWN_LINE if args.own_line else PromptStyle.INLINE
    return PROGRAMS[args.program](style)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Exception text may
    echo user input, so it is escaped before Rich renders it.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except TypedInputError as exc:
        hint = exc.hint
        if hint is None and isinstance(exc, InputEOFError):
            hint = EOF_HINT
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")
        sys.exit(ExitCode.for_exception(exc))
    except KeyboardInterrupt as exc:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(ExitCode.for_exception(exc))
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(ExitCode.for_exception(exc))
