"""Command dispatch: resolve → parse → validate → invoke.

Every call to :func:`execute` is independent.  The tree is immutable and
the bound flag values live in a fresh :class:`FlagValues` snapshot owned
by the returned :class:`Invocation`, so repeating a call with the same
argv produces the same result.

Validation order
----------------
1. The target's parser: unknown flags, missing or malformed values and
   too few positional arguments.  ``-h/--help`` and ``--version`` print
   and exit here.
2. Required flag presence.
3. The action itself, which owns the validity of flag *values*.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import NoReturn

from example_cli.core.models import Command, FlagValues, Invocation
from example_cli.exceptions import MissingRequiredFlagError, UsageError

logger = logging.getLogger(__name__)

ARGS_DEST: str = "args"
"""Parser destination that collects a command's positional arguments."""

HELP_COMMAND: str = "help"


def resolve(
    root: Command,
    argv: Sequence[str],
) -> tuple[tuple[Command, ...], list[str]]:
    """Descend from *root* while leading tokens name a child command.

    Returns the path from *root* to the deepest match and the tokens
    left for that command's parser.  A flag or unknown word stops the
    descent, so ``example -p echo`` resolves to the root.
    """
    path = [root]
    tokens = list(argv)
    while tokens:
        child = path[-1].child(tokens[0])
        if child is None:
            break
        path.append(child)
        tokens.pop(0)
    return tuple(path), tokens


def _show_help(root: Command, topic: Sequence[str]) -> NoReturn:
    path, rest = resolve(root, topic)
    if rest:
        raise UsageError(
            f"unknown help topic [{' '.join(rest)}]",
            command_path=root.name,
            usage=root.parser.format_usage(),
        )
    parser = path[-1].parser
    logger.debug("help requested for %r", parser.prog)
    parser.print_help()
    parser.exit()


def execute(root: Command, argv: Sequence[str]) -> Invocation:
    """Run the command named by *argv* against the tree rooted at *root*.

    Parameters
    ----------
    root:
        Root of an immutable command tree.
    argv:
        Arguments without the program name.

    Returns
    -------
    Invocation
        The invocation passed to the action.

    Raises
    ------
    UsageError
        Unknown or malformed flags, or too few positional arguments.
    MissingRequiredFlagError
        A required flag was not supplied.
    DomainValidationError
        Raised by the action itself.
    SystemExit
        With status 0, after help or version output was printed.
    """
    if argv and argv[0] == HELP_COMMAND and root.child(HELP_COMMAND) is None:
        _show_help(root, argv[1:])

    path, remaining = resolve(root, argv)
    target = path[-1]
    parser = target.parser

    namespace = parser.parse_intermixed_args(remaining)

    missing = [dest for dest in parser.required_flags if not hasattr(namespace, dest)]
    if missing:
        raise MissingRequiredFlagError(missing, usage=parser.format_usage())

    values = dict(vars(namespace))
    args = tuple(values.pop(ARGS_DEST, ()))
    logger.debug("bound flags for %r: %s", parser.prog, values)

    invocation = Invocation(
        command=target,
        path=path,
        flags=FlagValues(MappingProxyType(values)),
        args=args,
    )

    if target.action is None:
        logger.debug("%r has no action; printing help", parser.prog)
        parser.print_help()
        return invocation

    logger.debug("invoking %r with args %s", parser.prog, list(args))
    target.action(invocation)
    return invocation
