"""Custom exception hierarchy for example-cli.

Every failure that dispatch can report inherits from
:class:`ExampleCliError`.  The CLI error boundary is the only place that
turns these into process exit codes; everything below it raises and lets
the error propagate untouched.

Hierarchy
---------
ExampleCliError
├── UsageError
├── MissingRequiredFlagError
├── DomainValidationError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class ExampleCliError(Exception):
    """Base exception for all example-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line usage ----------------------------------------------------

class UsageError(ExampleCliError):
    """Raised when the argument sequence does not fit the target command.

    Covers unknown flags, flags missing their value, values of the wrong
    type and too few positional arguments, as reported by the command's
    argument parser.  ``command_path`` holds the parser's program name
    (e.g. ``"example echo"``) and ``usage`` its formatted usage block.
    """

    def __init__(
        self,
        message: str,
        *,
        command_path: str | None = None,
        usage: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command_path: str | None = command_path
        self.usage: str | None = usage


# --- Flag presence ---------------------------------------------------------

class MissingRequiredFlagError(ExampleCliError):
    """Raised when a flag marked required was not supplied."""

    def __init__(
        self,
        names: Iterable[str],
        *,
        usage: str | None = None,
        hint: str | None = None,
    ) -> None:
        self.names: tuple[str, ...] = tuple(sorted(names))
        self.usage: str | None = usage
        quoted = ", ".join(f'"{name}"' for name in self.names)
        super().__init__(f"required flag(s) {quoted} not set", hint=hint)


# --- Actions ---------------------------------------------------------------

class DomainValidationError(ExampleCliError):
    """Raised by an action when a well-formed input breaks a business rule."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ExampleCliError):
    """Raised when a required runtime dependency is not available."""
