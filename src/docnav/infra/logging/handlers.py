from __future__ import annotations

"""
Logging Sinks.

Builds the stderr and rotating-file handlers driven by the queue listener
and tags them, so that teardown removes docnav's handlers while leaving
those of host tools (MkDocs, pytest) in place.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from docnav.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_docnav_handler"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rollover policy of the --log-file sink
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_docnav_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the sink handlers requested by the settings.

    A log file that cannot be opened is reported on stderr and skipped, so
    console output keeps working.

    Args:
        cfg: Logging settings.

    Returns:
        List[logging.Handler]: Levelled, formatted and tagged handlers.
    """
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        sinks.append(console)

    if cfg.log_file:
        log_file = _open_log_file(cfg.log_file)
        if log_file is not None:
            sinks.append(log_file)

    for handler in sinks:
        handler.setLevel(cfg.level_int)
        tag_handler(handler)
    return sinks


def _open_log_file(path: str) -> Optional[RotatingFileHandler]:
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{path}': {e}\n")
        return None

    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler
