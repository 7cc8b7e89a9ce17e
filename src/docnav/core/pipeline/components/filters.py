from __future__ import annotations

"""
Document Filtering Engine.

Implements regex-based exclusion logic for the content scan, recognizes
reserved navigation files, and translates .gitignore glob rules into the
same regex vocabulary.
"""

import fnmatch
import logging
import os
import re
from typing import Iterable, List

from docnav.domain.constants import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_extensions() -> List[str]:
    """
    Get the default list of content document extensions.

    Returns:
        List[str]: Markdown extensions.
    """
    return list(DEFAULT_EXTENSIONS)


def default_exclude_patterns() -> List[str]:
    """
    Get the system-level exclusion patterns.

    Skips dependency folders, VCS and IDE metadata, build output, and any
    hidden entry.

    Returns:
        List[str]: Regex patterns matched against entry names.
    """
    return list(DEFAULT_EXCLUDE_PATTERNS)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are reported and discarded.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Discarding invalid pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a name matches at least one compiled pattern.

    Args:
        name: Filename or directory name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found.
    """
    return any(rx.search(name) for rx in compiled_patterns)


def has_extension(file_name: str, extensions: List[str]) -> bool:
    """Case-insensitive extension check."""
    _, ext = os.path.splitext(file_name)
    return ext.lower() in {e.lower() for e in extensions}

# -----------------------------------------------------------------------------
# RESERVED FILES
# -----------------------------------------------------------------------------

def is_reserved_file(rel_path: str, index_filename: str, summary_filename: str) -> bool:
    """
    Identify generated navigation files that must never be indexed.

    Any directory index document is reserved. The summary is reserved only
    at the root, where the generator writes it.

    Args:
        rel_path: '/'-separated path relative to the root.
        index_filename: Reserved directory index filename.
        summary_filename: Reserved summary filename.

    Returns:
        bool: True if the file is produced by the generator.
    """
    if os.path.basename(rel_path) == index_filename:
        return True
    return rel_path == summary_filename

# -----------------------------------------------------------------------------
# GITIGNORE INTEGRATION
# -----------------------------------------------------------------------------

def load_gitignore_patterns(root_path: str) -> List[str]:
    """
    Parse a .gitignore file and translate its glob rules into regexes.

    Args:
        root_path: Directory containing the .gitignore file.

    Returns:
        List[str]: Equivalent regex strings.
    """
    gitignore_path = os.path.join(root_path, ".gitignore")
    if not os.path.exists(gitignore_path):
        return []

    regex_patterns: List[str] = []
    try:
        with open(gitignore_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(("#", "!")):
                    continue
                regex_patterns.append(_gitignore_to_regex(line))
    except OSError as e:
        logger.warning(f"Could not read {gitignore_path}: {e}")

    return regex_patterns


def _gitignore_to_regex(glob_pattern: str) -> str:
    """Translate a gitignore glob to a regex matched against entry names."""
    return fnmatch.translate(glob_pattern.strip("/"))
