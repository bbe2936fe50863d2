"""The concrete ``example`` command tree and its actions.

:func:`build_command_tree` is called once at startup and returns an
immutable tree; nothing is registered at import time.  Each command's
flags are declared on its own :class:`~example_cli.core.parser.CommandParser`;
the persistent ``-p/--persistFlag`` reaches every command through
argparse ``parents``.
"""

from __future__ import annotations

import argparse

from example_cli.core.dispatcher import ARGS_DEST
from example_cli.core.models import Command, Invocation
from example_cli.core.parser import CommandParser
from example_cli.exceptions import DomainValidationError
from example_cli.version import __version__

PROG: str = "example"

ROOT_LONG: str = (
    "This is a simple example of a command-line program.\n"
    "It has several subcommands and flags."
)
ECHO_SHORT: str = "prints given strings to stdout"
TIMES_SHORT: str = "prints given strings to stdout multiple times"
HELP_SHORT: str = "Help about any command"


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def _echo_line(args: tuple[str, ...]) -> str:
    return "Echo: " + " ".join(args)


def run_root(invocation: Invocation) -> None:
    print("Hello From The Root Command")


def run_echo(invocation: Invocation) -> None:
    print(_echo_line(invocation.args))


def run_times(invocation: Invocation) -> None:
    """Print the echo line ``--times`` times.

    The flag's presence is checked by dispatch; a zero value is rejected
    here, before anything is written.
    """
    times = invocation.flags["times"]
    if times == 0:
        raise DomainValidationError("Times Cannot Be Zero")
    line = _echo_line(invocation.args)
    for _ in range(times):
        print(line)


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _build_persistent_parser() -> CommandParser:
    """Flags declared on the root and inherited by every subcommand."""
    parser = CommandParser(add_help=False)
    group = parser.add_argument_group("global flags")
    group.add_argument(
        "-p",
        "--persistFlag",
        action="store_true",
        help="A persistent root flag.",
    )
    return parser


def _build_root_parser(persistent: CommandParser) -> CommandParser:
    parser = CommandParser(
        prog=PROG,
        description=ROOT_LONG,
        parents=[persistent],
        subcommands=[("echo", ECHO_SHORT), ("help", HELP_SHORT)],
    )
    parser.add_argument(
        "-l",
        "--localFlag",
        action="store_true",
        help="A local root flag.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
    )
    parser.add_argument(ARGS_DEST, nargs="*", help=argparse.SUPPRESS)
    return parser


def _build_echo_parser(persistent: CommandParser) -> CommandParser:
    parser = CommandParser(
        prog=f"{PROG} echo",
        description=ECHO_SHORT,
        parents=[persistent],
        subcommands=[("times", TIMES_SHORT)],
    )
    parser.add_argument(
        ARGS_DEST,
        nargs="+",
        metavar="STRING",
        help="strings to echo",
    )
    return parser


def _build_times_parser(persistent: CommandParser) -> CommandParser:
    parser = CommandParser(
        prog=f"{PROG} echo times",
        description=TIMES_SHORT,
        parents=[persistent],
    )
    parser.add_argument(
        ARGS_DEST,
        nargs="+",
        metavar="STRING",
        help="strings to echo",
    )
    parser.add_required_flag(
        "-t",
        "--times",
        type=int,
        default=1,
        help="number of times to echo to stdout",
    )
    return parser


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

def build_command_tree() -> Command:
    """Build the ``example`` → ``echo`` → ``times`` tree."""
    persistent = _build_persistent_parser()
    times = Command(
        "times",
        parser=_build_times_parser(persistent),
        action=run_times,
    )
    echo = Command(
        "echo",
        parser=_build_echo_parser(persistent),
        children=(times,),
        action=run_echo,
    )
    return Command(
        PROG,
        parser=_build_root_parser(persistent),
        children=(echo,),
        action=run_root,
    )
