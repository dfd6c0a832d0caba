"""modforge logger hierarchy.

Every module logs through get_logger(); configure_logging() is called once
by the CLI and renders records on stderr with rich, the same console stack
the build plan report uses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

ROOT_LOGGER = "modforge"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger for a modforge component ('registry' -> 'modforge.registry')."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    color: bool = True,
) -> logging.Logger:
    """Attach console and optional file handlers to the modforge logger.

    Handlers of an earlier call are closed and replaced. Records do not
    propagate to the root logger.

    Args:
        verbose: DEBUG instead of INFO, with the emitting module shown
        log_file: Also write plain-text records here
        color: Styled console output
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True, no_color=not color, highlight=False),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
