"""Logging setup: rich console handler on the package logger."""

import logging
from typing import Union

from rich.logging import RichHandler

_configured = False


def setup_logging(level: Union[int, str] = "WARNING") -> logging.Logger:
    global _configured
    log = logging.getLogger("quickpass")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    log.setLevel(level)
    if not _configured:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
        _configured = True
    return log
