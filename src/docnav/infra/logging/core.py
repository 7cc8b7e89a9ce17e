from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. A single
QueueHandler on the root logger feeds a QueueListener that owns the real
console and file handlers, so slow handlers never block a generation run.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from docnav.infra.logging.config import LoggingConfig
from docnav.infra.logging.handlers import build_handlers, is_docnav_handler, tag_handler

# Root logger attributes tracking the active configuration
_CONFIGURED_FLAG_ATTR: str = "_docnav_configured"
_QUEUE_LISTENER_ATTR: str = "_docnav_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using a non-blocking queue.

    Repeated calls are no-ops unless force is set, in which case the
    previous docnav handlers and listener are torn down first. Handlers
    installed by other code are left untouched.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()
    root.setLevel(cfg.level_int)

    sinks = build_handlers(cfg)
    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    """Named logger, usually for __name__."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Stop the listener and detach every docnav handler from the root."""
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in list(root.handlers):
        if is_docnav_handler(handler):
            root.removeHandler(handler)
            handler.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener that may already have been stopped.

    QueueListener.stop() fails on a second call because its worker thread
    is reset to None, which happens when both a reset and atexit fire.
    """
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
