from __future__ import annotations

"""
Document Discovery Service.

Walks the content root and yields the relative paths of every content
document, pruning excluded directories early and skipping the navigation
files the generator itself produces.
"""

import logging
import os
import re
from typing import Iterator, List, Optional

from docnav.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_patterns,
    has_extension,
    is_reserved_file,
    load_gitignore_patterns,
    matches_any,
)

logger = logging.getLogger(__name__)

# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_document_paths(
        root_dir: str,
        extensions: List[str],
        exclude_rx: List[re.Pattern],
        index_filename: str,
        summary_filename: str,
) -> Iterator[str]:
    """
    Traverse the root directory and yield content document paths.

    Directories and files are visited in sorted order so repeated runs see
    the same sequence.

    Args:
        root_dir: Root of the content tree.
        extensions: Whitelist of document extensions.
        exclude_rx: Compiled exclusion patterns matched against entry names.
        index_filename: Reserved directory index filename (never yielded).
        summary_filename: Reserved summary filename (never yielded at root).

    Yields:
        str: '/'-separated path relative to the root.
    """
    root_abs = os.path.abspath(root_dir)

    for current, dirs, files in os.walk(root_abs):
        # In-place directory pruning to optimize traversal
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))

        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue
            if not has_extension(file_name, extensions):
                continue

            rel_path = os.path.relpath(os.path.join(current, file_name), root_abs)
            rel_path = rel_path.replace(os.sep, "/")
            if is_reserved_file(rel_path, index_filename, summary_filename):
                continue

            yield rel_path


def prepare_exclusion_rules(
        root_dir: str,
        exclude_patterns: Optional[List[str]],
        respect_gitignore: bool,
) -> List[re.Pattern]:
    """
    Compile user, default, and .gitignore exclusions into regex objects.

    Args:
        root_dir: Root of the content tree.
        exclude_patterns: Raw exclusion regexes, or None for the defaults.
        respect_gitignore: Whether to merge the root .gitignore rules.

    Returns:
        List[re.Pattern]: Compiled exclusion patterns.
    """
    final_exclusions = list(exclude_patterns) if exclude_patterns is not None else default_exclude_patterns()

    if respect_gitignore:
        git_patterns = load_gitignore_patterns(os.path.abspath(root_dir))
        if git_patterns:
            logger.debug(f"Loaded {len(git_patterns)} patterns from .gitignore")
            final_exclusions.extend(git_patterns)

    return compile_patterns(final_exclusions)
