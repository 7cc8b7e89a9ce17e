from __future__ import annotations

"""
Configuration Domain Management.

Provides the default run configuration and JSON persistence for project
level settings. Values are layered as defaults <- config file <- CLI
overrides before being validated by the pipeline.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from docnav.domain.constants import (
    CONFIG_FILENAME,
    CURRENT_CONFIG_VERSION,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_EXTENSIONS,
    DEFAULT_INDEX_FILENAME,
    DEFAULT_OVERRIDE_FILENAME,
    DEFAULT_SUMMARY_FILENAME,
    DEFAULT_SUMMARY_TITLE,
    DEFAULT_TOP_DOCUMENT,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root_dir": ".",
        "top_document": DEFAULT_TOP_DOCUMENT,

        # Reserved Filenames
        "index_filename": DEFAULT_INDEX_FILENAME,
        "summary_filename": DEFAULT_SUMMARY_FILENAME,
        "override_filename": DEFAULT_OVERRIDE_FILENAME,

        # Discovery
        "extensions": list(DEFAULT_EXTENSIONS),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),
        "respect_gitignore": False,

        # Rendering
        "apply_overrides": True,
        "summary_title": DEFAULT_SUMMARY_TITLE,
    }


def default_config_path() -> str:
    """Resolve the project configuration file in the working directory."""
    return os.path.join(os.getcwd(), CONFIG_FILENAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the project configuration merged over the defaults.

    A missing file yields the defaults. A corrupt file is reported and
    replaced by the defaults.

    Args:
        config_path: Explicit JSON file. Defaults to '.docnav.json' in CWD.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    defaults = get_default_config()
    path = config_path or default_config_path()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any], config_path: Optional[str] = None) -> str:
    """
    Persist a configuration dictionary as JSON.

    Args:
        config: The configuration to save.
        config_path: Target file. Defaults to '.docnav.json' in CWD.

    Returns:
        str: The path written.

    Raises:
        OSError: If the file cannot be written.
    """
    path = config_path or default_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION

    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=4)
    logger.debug(f"Configuration saved to {path}")
    return path
