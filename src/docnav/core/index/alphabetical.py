from __future__ import annotations

"""
Alphabetical Index Builder.

Groups documents by the uppercased initial of their title and orders both
the groups and the documents inside them using the active locale collation.
Purely numeric initials are collected at the end of the index.
"""

import locale
import logging
from typing import Iterable, List, Tuple

from docnav.domain.document_models import AlphabeticalIndex, Document

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def add_document(index: AlphabeticalIndex, doc: Document) -> None:
    """
    Insert a document into its initial-group.

    Re-inserting a document with the same path replaces the previous entry.

    Args:
        index: Alphabetical index being built.
        doc: Document to register.
    """
    index.setdefault(doc.initial, {})[doc.path] = doc


def sorted_initials(index: AlphabeticalIndex) -> List[str]:
    """
    Return the initial-group keys in display order.

    Non-numeric keys come first, ASCII digit keys last. Within each class keys
    follow locale-aware lexicographic order.

    Args:
        index: Populated alphabetical index.

    Returns:
        List[str]: Ordered initial keys.
    """
    return sorted(index.keys(), key=_initial_sort_key)


def sort_documents(docs: Iterable[Document]) -> List[Document]:
    """
    Stable, case-insensitive, locale-aware sort by title.

    Args:
        docs: Documents in any order.

    Returns:
        List[Document]: A new sorted list.
    """
    return sorted(docs, key=lambda d: locale.strxfrm((d.title or "").lower()))


def sort_group_at(index: AlphabeticalIndex, initial: str) -> List[Document]:
    """Sorted documents of a single initial-group."""
    return sort_documents(index[initial].values())


def use_user_collation() -> None:
    """Adopt the user's locale for title ordering, keeping 'C' if unavailable."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug(f"Locale collation unavailable ({e}); using default ordering.")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_numeric(key: str) -> bool:
    return key.isascii() and key.isdigit()


def _initial_sort_key(key: str) -> Tuple[bool, str]:
    return _is_numeric(key), locale.strxfrm(key)
