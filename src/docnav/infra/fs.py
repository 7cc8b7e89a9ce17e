from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Maps relative paths onto the root directory, verifies the root, and reads
author-provided override files. Acts as the single I/O boundary consulted
by the generation engine before anything is written.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_in_root(root_dir: str, rel_path: str) -> str:
    """Map a '/'-separated relative path onto the root directory."""
    parts = [p for p in rel_path.split("/") if p and p != "."]
    return os.path.join(root_dir, *parts)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def ensure_root_dir(root_dir: str) -> str:
    """
    Verify that the content root exists and is a directory.

    Args:
        root_dir: Candidate root directory.

    Returns:
        str: Absolute root directory.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    root_abs = os.path.abspath(root_dir)
    if not os.path.exists(root_abs):
        raise FileNotFoundError(f"Root directory does not exist: {root_abs}")
    if not os.path.isdir(root_abs):
        raise NotADirectoryError(f"Root path is not a directory: {root_abs}")
    return root_abs

# -----------------------------------------------------------------------------
# OVERRIDE FILES
# -----------------------------------------------------------------------------

def override_path(root_dir: str, directory: str, override_filename: str) -> str:
    """Absolute path of the override file for a directory."""
    return os.path.join(resolve_in_root(root_dir, directory), override_filename)


def read_override(root_dir: str, directory: str, override_filename: str) -> Optional[str]:
    """
    Read the author-provided index for a directory, if one exists.

    Args:
        root_dir: Absolute root directory.
        directory: Directory path relative to the root.
        override_filename: Name of the override file.

    Returns:
        Optional[str]: Raw override content, or None when absent.

    Raises:
        OSError: If the override exists but cannot be read.
    """
    path = override_path(root_dir, directory, override_filename)
    if not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
