"""
Logging configuration for the .NET Test Visualizer.
"""

import copy
import logging
import sys
from typing import Optional
from pathlib import Path

import typer

LEVEL_COLORS = {
    logging.DEBUG: typer.colors.CYAN,
    logging.INFO: typer.colors.BRIGHT_BLUE,
    logging.WARNING: typer.colors.BRIGHT_YELLOW,
    logging.ERROR: typer.colors.BRIGHT_RED,
    logging.CRITICAL: typer.colors.BRIGHT_MAGENTA,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name, and the message of errors."""

    def format(self, record: logging.LogRecord) -> str:
        # the record is shared with other handlers
        record = copy.copy(record)
        color = LEVEL_COLORS.get(record.levelno)
        if color is not None:
            record.levelname = typer.style(record.levelname, fg=color)
        if record.levelno >= logging.ERROR:
            record.msg = typer.style(str(record.msg), bold=True)
        return super().format(record)


def setup_logger(
    name: str = "dotnet_test_visualizer",
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    verbosity: int = 0
) -> logging.Logger:
    """
    Set up logger for the .NET Test Visualizer.

    Diagnostics go to stderr so they never interleave with the rendered
    summary on stdout.

    Args:
        name: Logger name
        level: Logging level (overrides verbosity if provided)
        log_file: Optional log file path
        verbosity: Verbosity level (0=warnings, 1=progress, 2=details, 3=debug)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    logger.handlers.clear()

    # Map verbosity to logging level
    if level is None:
        if verbosity == 0:
            level = logging.WARNING
        elif verbosity in (1, 2):
            level = logging.INFO
        else:
            level = logging.DEBUG

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(ColoredFormatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)

        # Format for file (no colors)
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format))

        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "dotnet_test_visualizer") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
