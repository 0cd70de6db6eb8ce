"""Allow ``python -m typed_input`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m typed_input`` behaves identically to the ``typed-input``
console script.
"""

from __future__ import annotations

from typed_input.cli.app import cli

if __name__ == "__main__":
    cli()
