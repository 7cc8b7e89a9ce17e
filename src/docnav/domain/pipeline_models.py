from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the planned output artifacts of a generation run and the unified
result object handed back to the interface layers (CLI and host plugin).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docnav.domain.document_models import AlphabeticalIndex, DirectoryIndex, Document

# -----------------------------------------------------------------------------
# ARTIFACT KINDS
# -----------------------------------------------------------------------------

KIND_DIRECTORY_INDEX = "directory_index"
KIND_OVERRIDE = "override"
KIND_SUMMARY = "summary"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OutputArtifact:
    """
    A document rendered in memory and waiting to be persisted.

    Attributes:
        rel_path: Target path relative to the root directory.
        content: Full text to write.
        kind: One of the KIND_* identifiers.
        source: Override file the content was taken from, if any.
    """
    rel_path: str
    content: str
    kind: str
    source: Optional[str] = None


@dataclass(frozen=True)
class NavigationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        root_dir: Absolute root directory that was indexed.
        dry_run: True when nothing was written to disk.
        documents: Number of content documents indexed.
        directories: Number of directory groups rendered.
        synthetic_documents: Distinct synthesized ancestor index documents.
        overrides: Directory groups served from an override file.
        initials: Initial-group keys in summary order.
        generated_files: Absolute paths written (or planned, for dry runs).
        summary: Extra execution metadata.
    """
    root_dir: str
    dry_run: bool
    documents: int
    directories: int
    synthetic_documents: int
    overrides: int
    initials: List[str] = field(default_factory=list)
    generated_files: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NavigationIndexes:
    """
    Grouping maps built during one single-threaded pass over the documents.

    Attributes:
        documents: Content documents keyed by path.
        alphabetical: Initial-group index (content plus synthetic documents).
        directories: Directory-group index (content documents only).
        synthetic: Synthetic ancestor index documents keyed by path.
    """
    documents: Dict[str, Document] = field(default_factory=dict)
    alphabetical: AlphabeticalIndex = field(default_factory=dict)
    directories: DirectoryIndex = field(default_factory=dict)
    synthetic: Dict[str, Document] = field(default_factory=dict)
