"""Regression tests for the optional Rich dependency.

Command output never touches Rich; error reporting and logging fall
back to plain stderr when Rich cannot be imported.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from example_cli.cli import exit_codes, logging_setup
from example_cli.cli.app import run
from example_cli.cli.console import escape, get_rich_console
from example_cli.cli.logging_setup import PACKAGE_LOGGER, configure_logging, installed_handler
from example_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


@pytest.fixture()
def restore_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    monkeypatch.setattr(logging_setup, "_installed_handler", None)
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

def test_commands_work_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert run(["echo", "times", "-t", "2", "x"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "Echo: x\nEcho: x\n"


def test_errors_print_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert run(["echo", "times", "-t", "0", "x"]) == exit_codes.GENERAL_ERROR
    assert "Times Cannot Be Zero" in capsys.readouterr().err


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="pip install rich"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape("[nope]") == "[nope]"


def test_escape_protects_brackets() -> None:
    assert escape("[bold]") != "[bold]"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def test_configure_logging_uses_rich_handler(restore_logger: logging.Logger) -> None:
    from rich.logging import RichHandler

    logger = configure_logging(logging.DEBUG)
    assert logger is restore_logger
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in logger.handlers)


def test_configure_logging_is_not_cumulative(restore_logger: logging.Logger) -> None:
    before = len(restore_logger.handlers)
    configure_logging()
    first = installed_handler()
    configure_logging()
    second = installed_handler()
    assert first is not second
    assert first not in restore_logger.handlers
    assert second in restore_logger.handlers
    assert len(restore_logger.handlers) == before + 1


def test_configure_logging_leaves_foreign_handlers(restore_logger: logging.Logger) -> None:
    foreign = logging.NullHandler()
    restore_logger.addHandler(foreign)
    configure_logging()
    configure_logging()
    assert foreign in restore_logger.handlers


def test_configure_logging_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    restore_logger: logging.Logger,
) -> None:
    _hide_rich(monkeypatch)
    logger = configure_logging(logging.INFO)
    handler = installed_handler()
    assert handler in logger.handlers
    assert type(handler) is logging.StreamHandler


def test_dispatch_logs_at_debug(
    restore_logger: logging.Logger,
    caplog: pytest.LogCaptureFixture,
) -> None:
    restore_logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        assert run(["echo", "hi"]) == exit_codes.SUCCESS
    assert any("invoking 'example echo'" in r.getMessage() for r in caplog.records)
