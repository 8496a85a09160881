"""
Logging setup for Component Insight.

Console output goes through rich to stderr so that reports and DOT text on
stdout stay clean. An optional plain-text log file can be attached.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "component_insight"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def verbosity_level(verbosity: str) -> int:
    """Map a configured verbosity ("quiet", "normal", "verbose") to a level."""
    return _LEVELS.get(verbosity, logging.WARNING)


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Install handlers on the component_insight logger.

    Handlers installed by an earlier call are replaced, so running several
    commands in one process does not duplicate log lines.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging (wins over verbose)
        log_file: Optional file path to append logs to

    Returns:
        The configured component_insight logger
    """
    if quiet:
        level = verbosity_level("quiet")
    elif verbose:
        level = verbosity_level("verbose")
    else:
        level = verbosity_level("normal")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file), mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    return logger


def set_verbosity(verbosity: str) -> logging.Logger:
    """Set the package logger level from a configured verbosity."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(verbosity_level(verbosity))
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger namespaced under component_insight (e.g. for ``__name__``)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
