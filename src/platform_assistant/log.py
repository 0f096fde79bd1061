"""Logging setup for the command line front end.

Library modules only create loggers; handlers are installed here.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LogLevel


def configure_logging(level: str = "warning", console: Console | None = None) -> None:
    """Route ``platform_assistant`` logs through a Rich handler.

    Args:
        level: Level name (debug, info, warning, error)
        console: Optional Rich console to write to (defaults to stderr)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger("platform_assistant")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(LogLevel.from_string(level))
