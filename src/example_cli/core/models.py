"""Domain models for example-cli.

All models are **frozen** dataclasses: the command tree is built once at
startup and never mutated, and every dispatch produces its own
:class:`FlagValues` snapshot instead of writing into shared variables.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from example_cli.core.parser import CommandParser

FlagValue = bool | int

Action = Callable[["Invocation"], None]


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagValues:
    """Immutable snapshot of the flag values bound for one invocation.

    Keys are the parser destinations (``persistFlag``, ``times``, ...);
    every flag visible to the target command is present.
    """

    values: Mapping[str, FlagValue] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    def __getitem__(self, name: str) -> FlagValue:
        return self.values[name]

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A node in the command tree.

    ``parser`` declares the command's flags and positional arguments,
    including those inherited from its ancestors.
    """

    name: str
    parser: CommandParser = field(compare=False, repr=False)
    children: tuple[Command, ...] = ()
    action: Action | None = field(default=None, compare=False)

    def child(self, name: str) -> Command | None:
        """Return the direct child called *name*, or ``None``."""
        for child in self.children:
            if child.name == name:
                return child
        return None


# ---------------------------------------------------------------------------
# Dispatch outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """The resolved (command, flags, positional arguments) triple."""

    command: Command
    path: tuple[Command, ...]
    flags: FlagValues
    args: tuple[str, ...]

    @property
    def command_path(self) -> str:
        return " ".join(cmd.name for cmd in self.path)
