from __future__ import annotations

"""
Markdown Navigation Renderer.

Converts the populated directory and alphabetical indexes into markdown
documents: one listing per directory group and one global summary grouped
by title initial.
"""

from typing import List

from docnav.core.index.alphabetical import sort_documents, sort_group_at, sorted_initials
from docnav.core.index.directory import sorted_children
from docnav.domain.document_models import AlphabeticalIndex, DirectoryGroup

# -----------------------------------------------------------------------------
# LINK SYNTAX
# -----------------------------------------------------------------------------

def format_link(label: str, target: str) -> str:
    """Render a markdown link '[label](target)'."""
    return f"[{label}]({target})"


def _list_item(label: str, target: str) -> str:
    return f"- {format_link(label, target)}"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_directory_group(directory: str, group: DirectoryGroup) -> List[str]:
    """
    Render the listing of one directory level.

    Output order: a heading naming the directory, subdirectory links sorted
    by name, then page links sorted by title. Pages link to their basename
    relative to the directory.

    Args:
        directory: Directory path relative to the root.
        group: Pages and children of that directory.

    Returns:
        List[str]: Markdown lines.
    """
    lines: List[str] = [f"# {directory}"]

    for entry in sorted_children(group):
        lines.append(_list_item(entry.name, entry.index_path))

    for page in sort_documents(group.pages):
        lines.append(_list_item(page.basename, f"./{page.basename}"))

    return lines


def render_summary(index: AlphabeticalIndex, title: str = "Index") -> List[str]:
    """
    Render the global alphabetical summary.

    Args:
        index: Alphabetical index including synthetic ancestor documents.
        title: Top-level heading text.

    Returns:
        List[str]: Markdown lines.
    """
    lines: List[str] = [f"# {title}"]

    for initial in sorted_initials(index):
        lines.append("")
        lines.append(f"### {initial}")
        for doc in sort_group_at(index, initial):
            lines.append(_list_item(doc.title or doc.path, doc.path))

    return lines


def to_document(lines: List[str]) -> str:
    """Join rendered lines into file content with a trailing newline."""
    return "\n".join(lines) + "\n"
