"""Core layer — command tree, argument parsing, and dispatch.

Rules
-----
* No imports from ``cli``.
* Argument parsing is delegated to :mod:`argparse` through
  :class:`~example_cli.core.parser.CommandParser`.
* Tree and flag snapshots are immutable.
"""

from example_cli.core.dispatcher import execute, resolve
from example_cli.core.models import Command, FlagValues, Invocation
from example_cli.core.parser import CommandParser

__all__: list[str] = [
    "Command",
    "CommandParser",
    "FlagValues",
    "Invocation",
    "execute",
    "resolve",
]
