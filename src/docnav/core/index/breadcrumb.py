from __future__ import annotations

"""
Breadcrumb Builder.

Derives the ancestor-to-current navigation trail of a single document and
prepends it to the document content. Runs once per document, independently
of the index builders, as a pure content -> content transformation.
"""

import logging
from typing import List, Optional

from docnav.core.index.directory import join_path
from docnav.core.rendering.markdown import format_link
from docnav.domain.constants import CRUMB_SEPARATOR, TOP_CRUMB_LABEL
from docnav.domain.document_models import Document, normalize_document_path
from docnav.domain.navigation_models import NavigationConfig

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_breadcrumb(path: str, config: NavigationConfig) -> Optional[str]:
    """
    Render the breadcrumb trail for one document.

    The trail starts with a 'Top' crumb linking to the configured top
    document, continues with one crumb per ancestor directory (linking to
    that directory's index document) and ends with the unlinked label of
    the document itself. Directory index documents are labelled with their
    directory name instead of the index filename.

    Args:
        path: Document path relative to the root.
        config: Navigation settings (top document, index filename).

    Returns:
        Optional[str]: The trail, or None for the top document.

    Raises:
        PathError: If the path is malformed.
    """
    doc = Document(path)
    if doc.path == normalize_document_path(config.top_document):
        return None

    segments = [] if doc.is_root else doc.dirname.split("/")
    leaf = doc.basename
    if doc.is_directory_index(config.index_filename) and segments:
        leaf = segments.pop()

    links: List[str] = [format_link(TOP_CRUMB_LABEL, _rooted(config.top_document))]
    for depth, segment in enumerate(segments):
        target = join_path(*segments[: depth + 1], config.index_filename)
        links.append(format_link(segment, _rooted(target)))
    links.append(leaf)

    return CRUMB_SEPARATOR.join(links)


def prepend_breadcrumb(content: str, path: str, config: NavigationConfig) -> str:
    """
    Return the document content prefixed by its breadcrumb trail.

    Args:
        content: Original document content.
        path: Document path relative to the root.
        config: Navigation settings.

    Returns:
        str: '<trail>\\n\\n<content>', or the content unchanged for the top document.
    """
    trail = build_breadcrumb(path, config)
    if trail is None:
        return content
    logger.debug(f"Breadcrumb for {path}: {trail}")
    return f"{trail}\n\n{content}"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _rooted(target: str) -> str:
    return "/" + normalize_document_path(target)
