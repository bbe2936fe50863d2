"""example-cli — a small command-line program with nested subcommands.

Demonstrates local versus inherited flags and positional-argument
validation on top of a hand-built command dispatcher.
"""

from example_cli.version import __version__

__all__: list[str] = ["__version__"]
