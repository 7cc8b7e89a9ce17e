from __future__ import annotations

"""
Document Domain Data Models.

Defines the immutable Document record, the directory-group records used by
the directory index, and the mapping aliases for both index structures.
Documents are identified by their separator-normalized relative path.
"""

import posixpath
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from docnav.domain.constants import CURRENT_DIR, PATH_SEPARATOR

_DRIVE_RX = re.compile(r"^[A-Za-z]:")

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class PathError(ValueError):
    """
    Raised when a document path is empty, absolute, or escapes the root.

    Attributes:
        path: The offending raw path value.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid document path '{path}': {reason}")
        self.path = path
        self.reason = reason


def normalize_document_path(path: str) -> str:
    """
    Convert a raw relative path into its canonical '/'-separated form.

    Args:
        path: Raw path as produced by a scanner or a host tool.

    Returns:
        str: Normalized relative path.

    Raises:
        PathError: If the path is empty, absolute, or outside the root.
    """
    if not isinstance(path, str) or not path.strip():
        raise PathError(str(path), "path is empty")

    raw = path.strip().replace("\\", PATH_SEPARATOR)
    if raw.startswith(PATH_SEPARATOR) or _DRIVE_RX.match(raw):
        raise PathError(path, "path is absolute")

    normalized = posixpath.normpath(raw)
    if normalized == CURRENT_DIR:
        raise PathError(path, "path does not name a document")
    if normalized == ".." or normalized.startswith("../"):
        raise PathError(path, "path is outside the root directory")
    return normalized

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Document:
    """
    One navigable content document.

    Attributes:
        path: Normalized relative path, the identity key.
        title: Display label. Defaults to the path itself.
    """
    path: str
    title: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_document_path(self.path))
        if self.title is None:
            object.__setattr__(self, "title", self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def basename(self) -> str:
        return posixpath.basename(self.path)

    @property
    def dirname(self) -> str:
        return posixpath.dirname(self.path) or CURRENT_DIR

    @property
    def initial(self) -> str:
        """Uppercased first character of the title's basename."""
        return posixpath.basename(self.title or "")[:1].upper()

    @property
    def is_root(self) -> bool:
        return self.dirname == CURRENT_DIR

    def is_directory_index(self, index_filename: str) -> bool:
        return self.basename == index_filename


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Reference from a directory group to one of its subdirectories.

    Attributes:
        name: Subdirectory segment name.
        index_path: Path of the synthesized index document for it.
    """
    name: str
    index_path: str


@dataclass
class DirectoryGroup:
    """
    Pages and subdirectory references belonging to one directory level.
    """
    pages: List[Document] = field(default_factory=list)
    children: Dict[str, DirectoryEntry] = field(default_factory=dict)


AlphabeticalIndex = Dict[str, Dict[str, Document]]
DirectoryIndex = Dict[str, DirectoryGroup]
