"""Shared pytest fixtures and configuration for the example-cli test suite.

Guidelines
----------
* Command output is captured via ``capsys``; no test touches the real
  terminal.
* Core tests build their own small trees from ``CommandParser`` instances.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from example_cli.cli.commands import build_command_tree
from example_cli.core.dispatcher import execute
from example_cli.core.models import Command


@pytest.fixture()
def tree() -> Command:
    """The real ``example`` command tree."""
    return build_command_tree()


@pytest.fixture()
def dispatch(
    tree: Command,
    capsys: pytest.CaptureFixture[str],
) -> Callable[..., str]:
    """Run argv against the real tree and return what was written to stdout."""

    def _dispatch(*argv: str) -> str:
        capsys.readouterr()
        execute(tree, list(argv))
        return capsys.readouterr().out

    return _dispatch
