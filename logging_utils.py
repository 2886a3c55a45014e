"""Logging setup for helpwin."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: Optional[Path] = None, level: int = logging.DEBUG) -> None:
    """Set up logging configuration.

    curses owns the terminal, so records only ever go to a file. Without a
    log file logging is disabled.
    """
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
