"""Logging configuration for codexskill."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from codexskill.utils.config import Config

LOGGER_NAME = "codexskill"
LOG_FILENAME = "codexskill.log"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def _file_handler(config: Config) -> RotatingFileHandler:
    """
    Rotating DEBUG log under config.logging_path.

    Raises:
        OSError: If the log directory can't be created or opened
    """
    config.logging_path.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.logging_path / LOG_FILENAME, maxBytes=100000, backupCount=3
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler() -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(logging.INFO)
    return handler


def setup_logging(config: Config, console_output: bool = False) -> logging.Logger:
    """
    Set up logging for one codex-skill invocation.

    Handlers from an earlier call are closed and replaced, so calling this
    twice in one process doesn't duplicate output.

    Args:
        config: Application configuration
        console_output: Also log progress (INFO and up) to stdout

    Returns:
        The package root logger

    Raises:
        OSError: If the log directory under CODEX_HOME isn't writable
    """
    handlers: list[logging.Handler] = [_file_handler(config)]
    if console_output:
        handlers.append(_console_handler())

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)

    return root_logger
