from __future__ import annotations

"""
Logging Settings.

Immutable settings for the logging bootstrap, as assembled by the CLI from
its --debug and --log-file flags.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Severity name. Unknown names resolve to INFO.
        console: Mirror records to stderr.
        log_file: Optional rotating log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    @property
    def level_int(self) -> int:
        """Numeric level for the configured severity name."""
        value = logging.getLevelName((self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
