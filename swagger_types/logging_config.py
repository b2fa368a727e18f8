"""Logging setup shared by every swagger_types module.

Modules call ``get_logger(__name__)``; nothing is printed until the
command line entry point calls ``configure_logging``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "swagger_types"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Send package logs to stderr through rich.

    Args:
        level: Logging level name or number.

    Returns:
        The package root logger.
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root
