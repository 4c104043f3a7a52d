"""Logging helpers shared by the JSON bridge and the CLI."""

from __future__ import annotations

import logging
import sys
import traceback

from ... import config

_logger = logging.getLogger(config.LOGGER_NAME)
# Records reach the application's handlers through propagation only
_logger.addHandler(logging.NullHandler())


def log(message: str, level: int = logging.INFO, force_console: bool = False) -> None:
    """
    Log a message to the package logger.

    Args:
        message: Text to log
        level: A logging level such as logging.DEBUG or logging.ERROR
        force_console: Also write to stderr regardless of config.DEBUG
    """
    _logger.log(level, message)

    if config.DEBUG or force_console:
        print(message, file=sys.stderr)


def handle_error(name: str, show_traceback: bool = True) -> None:
    """
    Log the exception currently being handled.

    Call from within an except block.

    Args:
        name: Name of the operation that failed
        show_traceback: Include the full traceback in the log
    """
    log('===== Error =====', logging.ERROR)
    if show_traceback:
        log(f'{name}\n{traceback.format_exc()}', logging.ERROR)
    else:
        log(f'{name}: {sys.exc_info()[1]}', logging.ERROR)
