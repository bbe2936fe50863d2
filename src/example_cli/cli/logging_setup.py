"""Logging configuration for the CLI process.

Core modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; this module attaches one handler to the
package logger, using Rich when it is installed.
"""

from __future__ import annotations

import logging

from example_cli.cli.console import get_rich_console
from example_cli.exceptions import EnvironmentError

PACKAGE_LOGGER: str = "example_cli"

_installed_handler: logging.Handler | None = None
"""Handler added by the last :func:`configure_logging` call."""


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler
    try:
        rich_console = get_rich_console()
    except EnvironmentError:
        return logging.StreamHandler()
    return RichHandler(console=rich_console, show_path=False)


def installed_handler() -> logging.Handler | None:
    """Return the handler currently installed by :func:`configure_logging`."""
    return _installed_handler


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger and set *level*.

    Calling this again replaces the previously installed handler rather
    than adding a second one.
    """
    global _installed_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    _installed_handler = _build_handler()
    logger.addHandler(_installed_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
