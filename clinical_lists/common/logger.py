"""Rich console logging for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Logger that writes plain messages to stderr through Rich.

    The handler is attached once per name; later calls return the same logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level.upper())
        logger.propagate = False
    return logger
