"""Allow ``python -m example_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m example_cli`` behaves identically to the ``example``
console script.
"""

from __future__ import annotations

from example_cli.cli.app import cli

if __name__ == "__main__":
    cli()
