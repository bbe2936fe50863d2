"""argparse integration for the command tree.

Each command owns one :class:`CommandParser`.  It differs from a plain
:class:`argparse.ArgumentParser` in three ways:

* parse errors raise :class:`~example_cli.exceptions.UsageError` carrying
  the parser's usage block instead of printing and exiting;
* flags registered with :meth:`CommandParser.add_required_flag` are
  checked by the dispatcher *after* positional arguments, so a missing
  argument is reported before a missing flag;
* subcommands are listed in the help epilog.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any, NoReturn

from example_cli.exceptions import UsageError


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Keep description line breaks and print ``Usage:`` capitalised."""

    def add_usage(
        self,
        usage: str | None,
        actions: Iterable[argparse.Action],
        groups: Iterable[Any],
        prefix: str | None = None,
    ) -> None:
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def commands_epilog(prog: str, subcommands: Sequence[tuple[str, str]]) -> str:
    """Render the ``Available Commands:`` block shown below a parser's help."""
    width = max(len(name) for name, _ in subcommands) + 2
    lines = ["Available Commands:"]
    lines.extend(f"  {name.ljust(width)}{summary}" for name, summary in subcommands)
    lines.append("")
    lines.append(
        f'Use "{prog} [command] --help" for more information about a command.'
    )
    return "\n".join(lines)


class CommandParser(argparse.ArgumentParser):
    """Argument parser for a single command of the tree."""

    def __init__(
        self,
        *args: Any,
        subcommands: Sequence[tuple[str, str]] = (),
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("formatter_class", HelpFormatter)
        if subcommands and kwargs.get("prog"):
            kwargs.setdefault("epilog", commands_epilog(kwargs["prog"], subcommands))
        super().__init__(*args, **kwargs)
        self.required_flags: list[str] = []
        """Destinations that must appear on the command line."""

    def add_required_flag(self, *name_or_flags: str, **kwargs: Any) -> argparse.Action:
        """Add an option whose absence fails dispatch before the action runs.

        The option is stored with ``default=argparse.SUPPRESS`` so that
        its destination is missing from the namespace unless it was
        given; *default* only documents the value in help.
        """
        default = kwargs.pop("default", None)
        if default is not None and "help" in kwargs:
            kwargs["help"] = f"{kwargs['help']} (default {default})"
        action = self.add_argument(*name_or_flags, default=argparse.SUPPRESS, **kwargs)
        self.required_flags.append(action.dest)
        return action

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, command_path=self.prog, usage=self.format_usage())
