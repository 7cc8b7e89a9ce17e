from __future__ import annotations

"""
Directory Index Builder.

Groups content documents by their containing directory and records, for
every ancestor directory, which subdirectories lead towards the document.
Each ancestor directory below the root is also materialized as a synthetic
index document so it can be listed in the alphabetical summary.
"""

import posixpath
from typing import List, Tuple

from docnav.domain.constants import CURRENT_DIR
from docnav.domain.document_models import (
    DirectoryEntry,
    DirectoryGroup,
    DirectoryIndex,
    Document,
)

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def join_path(*parts: str) -> str:
    """Join path segments with '/', dropping current-directory markers."""
    kept = [p for p in parts if p and p != CURRENT_DIR]
    return posixpath.join(*kept) if kept else CURRENT_DIR


def index_path_for(directory: str, index_filename: str) -> str:
    """Path of the index document that represents a directory."""
    return join_path(directory, index_filename)

# -----------------------------------------------------------------------------
# ANCESTOR ENUMERATION
# -----------------------------------------------------------------------------

def ancestors_of(doc: Document) -> List[Tuple[str, str]]:
    """
    Enumerate (parent_dir, child_segment) pairs from the root downwards.

    For 'a/b/c.md' the walk is ('.', 'a'), ('a', 'b'), ('a/b', 'c.md').
    The last pair always names the document's own directory and basename.
    Root documents produce no pairs.

    Args:
        doc: Content document.

    Returns:
        List[Tuple[str, str]]: Ordered, duplicate-free ancestor pairs.
    """
    if doc.is_root:
        return []

    segments = doc.dirname.split("/") + [doc.basename]
    pairs: List[Tuple[str, str]] = []
    for depth in range(len(segments) - 1):
        parent = join_path(*segments[:depth])
        pairs.append((parent, segments[depth]))
    pairs.append((doc.dirname, doc.basename))
    return pairs


def ancestor_dirs_of(doc: Document) -> List[str]:
    """Directories strictly below the root that contain the document, top-down."""
    return [join_path(parent, child) for parent, child in ancestors_of(doc)[:-1]]

# -----------------------------------------------------------------------------
# GROUPING
# -----------------------------------------------------------------------------

def add_document(index: DirectoryIndex, doc: Document, index_filename: str) -> None:
    """
    Register a content document in every directory group along its path.

    The document becomes a page of its containing directory. Every higher
    ancestor gains a child reference towards it. Adding the same path twice
    replaces the earlier page instead of duplicating it.

    Args:
        index: Directory index being built.
        doc: Content document (never a synthetic one).
        index_filename: Reserved filename of directory index documents.
    """
    for parent, child in ancestors_of(doc):
        group = index.setdefault(parent, DirectoryGroup())
        if parent == doc.dirname:
            _put_page(group, doc)
        else:
            group.children[child] = DirectoryEntry(
                name=child,
                index_path=join_path(parent, child, index_filename),
            )


def synthetic_ancestors_of(doc: Document, index_filename: str) -> List[Document]:
    """
    Build one synthetic index document per ancestor directory below the root.

    Args:
        doc: Content document.
        index_filename: Reserved filename of directory index documents.

    Returns:
        List[Document]: Synthetic documents titled with their directory path.
    """
    return [
        Document(path=index_path_for(directory, index_filename), title=directory)
        for directory in ancestor_dirs_of(doc)
    ]


def sorted_children(group: DirectoryGroup) -> List[DirectoryEntry]:
    """Child directory references ordered by name."""
    return [group.children[name] for name in sorted(group.children)]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _put_page(group: DirectoryGroup, doc: Document) -> None:
    for i, existing in enumerate(group.pages):
        if existing == doc:
            group.pages[i] = doc
            return
    group.pages.append(doc)
