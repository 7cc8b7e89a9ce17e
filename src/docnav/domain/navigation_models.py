from __future__ import annotations

"""
Navigation Configuration Model.

Immutable value passed explicitly into every builder and renderer call so
that no navigation step depends on ambient process state.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict

from docnav.domain.constants import (
    DEFAULT_INDEX_FILENAME,
    DEFAULT_OVERRIDE_FILENAME,
    DEFAULT_SUMMARY_FILENAME,
    DEFAULT_SUMMARY_TITLE,
    DEFAULT_TOP_DOCUMENT,
)


@dataclass(frozen=True)
class NavigationConfig:
    """
    Resolved settings for one generation run.

    Attributes:
        root_dir: Absolute directory that holds the content documents.
        top_document: Relative path of the document the 'Top' crumb targets.
        index_filename: Reserved filename of directory index documents.
        summary_filename: Reserved filename of the global summary.
        override_filename: Author-provided file that replaces a generated index.
        apply_overrides: Whether override files are honoured.
        summary_title: Heading of the global summary document.
    """
    root_dir: str = "."
    top_document: str = DEFAULT_TOP_DOCUMENT
    index_filename: str = DEFAULT_INDEX_FILENAME
    summary_filename: str = DEFAULT_SUMMARY_FILENAME
    override_filename: str = DEFAULT_OVERRIDE_FILENAME
    apply_overrides: bool = True
    summary_title: str = DEFAULT_SUMMARY_TITLE


def navigation_config_from_dict(cfg: Dict[str, Any]) -> NavigationConfig:
    """
    Build a NavigationConfig from a validated configuration dictionary.

    Args:
        cfg: Output of the configuration validator.

    Returns:
        NavigationConfig: Immutable settings with an absolute root directory.
    """
    return NavigationConfig(
        root_dir=os.path.abspath(cfg["root_dir"]),
        top_document=cfg["top_document"].replace("\\", "/"),
        index_filename=cfg["index_filename"],
        summary_filename=cfg["summary_filename"],
        override_filename=cfg["override_filename"],
        apply_overrides=bool(cfg["apply_overrides"]),
        summary_title=cfg["summary_title"],
    )
