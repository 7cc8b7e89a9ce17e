from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, log file rotation, and clean shutdown.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from unittest.mock import patch

import pytest

from docnav.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(logging.getLogger().handlers)

    configure_logging(cfg)
    assert len(logging.getLogger().handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_without_duplicates() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)

    root = logging.getLogger()
    assert len(_our_handlers()) == 1
    assert root.level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "docnav.log"
    cfg = LoggingConfig(level="DEBUG", console=False, log_file=str(log_file))

    with patch("docnav.infra.logging.handlers.LOG_MAX_BYTES", 100), \
            patch("docnav.infra.logging.handlers.LOG_BACKUP_COUNT", 1):
        configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give the QueueListener time to drain
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "docnav.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    queue_handlers = [h for h in _our_handlers() if isinstance(h, QueueHandler)]

    assert len(queue_handlers) == 1
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_shutdown_leaves_foreign_handlers() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO", console=True))
        shutdown_logging()

        assert _our_handlers() == []
        assert foreign in root.handlers
        assert getattr(root, _QUEUE_LISTENER_ATTR) is None
        assert getattr(root, _CONFIGURED_FLAG_ATTR) is False
    finally:
        root.removeHandler(foreign)


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging(LoggingConfig(level="verbose", console=True))
    assert logging.getLogger().level == logging.INFO


def test_level_names_resolve() -> None:
    assert LoggingConfig(level=" debug ").level_int == logging.DEBUG
    assert LoggingConfig(level="WARN").level_int == logging.WARNING
    assert LoggingConfig(level="").level_int == logging.INFO


def test_unopenable_log_file_keeps_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    configure_logging(LoggingConfig(console=True, log_file=str(blocker / "docnav.log")))

    assert "cannot open log file" in capsys.readouterr().err
    assert getattr(logging.getLogger(), _CONFIGURED_FLAG_ATTR) is True
