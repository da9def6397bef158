"""Centralized logging configuration for repokit."""

import logging
import os
import sys

import typer

LEVEL_MARKERS: dict[int, tuple[str, str]] = {
    logging.DEBUG: ("·", typer.colors.BRIGHT_BLACK),
    logging.INFO: ("›", typer.colors.CYAN),
    logging.WARNING: ("!", typer.colors.YELLOW),
    logging.ERROR: ("✗", typer.colors.RED),
    logging.CRITICAL: ("✗", typer.colors.BRIGHT_RED),
}


class StatusFormatter(logging.Formatter):
    """Custom formatter that prefixes every log line with a colored status marker."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with a marker matching its level."""
        formatted_message = super().format(record)
        marker, color = LEVEL_MARKERS.get(record.levelno, ("›", typer.colors.WHITE))
        return f"{typer.style(marker, fg=color, bold=True)} {formatted_message}"


def _level_from_env() -> int:
    name = os.getenv("REPOKIT_LOG_LEVEL", "INFO").upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def _console_handler(root: logging.Logger) -> logging.Handler | None:
    for handler in root.handlers:
        if isinstance(handler.formatter, StatusFormatter):
            return handler
    return None


def setup_logging(level: int | None = None) -> None:
    """Install the status-line console handler, or change its level.

    Calling it again only adjusts the level; handlers added by others (such as
    pytest's capture handler) are left in place.
    """
    if level is None:
        level = _level_from_env()
    root = logging.getLogger()
    root.setLevel(level)

    handler = _console_handler(root)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StatusFormatter(fmt="%(message)s"))
        root.addHandler(handler)
    handler.setLevel(level)


setup_logging()

logger = logging.getLogger("repokit")
