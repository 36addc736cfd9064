"""Logging configuration."""
from __future__ import annotations

import logging

from rich.logging import RichHandler

# Library loggers that are too chatty at INFO
QUIET_LOGGERS = {
    "urllib3": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "asyncio": logging.ERROR,
}


def setup_logging(level: str = "INFO") -> None:
    """Route all logging through a rich console handler."""
    root = logging.getLogger()
    root.setLevel(level)

    # Avoid stacking handlers when called more than once
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    root.addHandler(
        RichHandler(
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
    )

    for name, logger_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(logger_level)
