"""CLI application entry point and error boundary for example-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~example_cli.exceptions.ExampleCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No parsing or validation lives here: :func:`main` hands argv to the
  core dispatcher together with the tree from :mod:`example_cli.cli.commands`.
* Command output goes to stdout; errors and logs go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from example_cli.cli import exit_codes
from example_cli.cli.commands import build_command_tree
from example_cli.cli.console import console, escape
from example_cli.cli.logging_setup import configure_logging
from example_cli.core.dispatcher import execute
from example_cli.exceptions import ExampleCliError, MissingRequiredFlagError, UsageError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the example CLI.

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

    Raises
    ------
    ExampleCliError
        Any dispatch failure; :func:`run` turns these into exit codes.
    SystemExit
        Raised by argparse after printing help or the version.
    """
    if argv is None:
        argv = sys.argv[1:]

    tree = build_command_tree()
    execute(tree, argv)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

def _report_error(exc: ExampleCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if isinstance(exc, (UsageError, MissingRequiredFlagError)) and exc.usage:
        console.print(escape(exc.usage.rstrip()))
    hint = exc.hint
    if hint is None and isinstance(exc, UsageError) and exc.command_path:
        hint = f"Run '{exc.command_path} --help' for usage."
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(argv: Sequence[str] | None = None) -> int:
    """Call :func:`main` and map every outcome to an exit code."""
    try:
        return main(argv)
    except ExampleCliError as exc:
        _report_error(exc)
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    configure_logging()
    sys.exit(run())
