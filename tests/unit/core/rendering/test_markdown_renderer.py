from __future__ import annotations

"""
Unit tests for the Markdown Navigation Renderer.

Verifies directory listing layout (heading, sorted children, sorted pages)
and the global summary layout grouped by initial.
"""

from docnav.core.index import alphabetical, directory
from docnav.core.rendering.markdown import (
    format_link,
    render_directory_group,
    render_summary,
    to_document,
)
from docnav.domain.document_models import AlphabeticalIndex, DirectoryIndex, Document

INDEX = "_index.md"


def _directory_index(paths) -> DirectoryIndex:
    index: DirectoryIndex = {}
    for p in paths:
        directory.add_document(index, Document(p), INDEX)
    return index


def test_format_link() -> None:
    assert format_link("guide", "guide/_index.md") == "[guide](guide/_index.md)"


def test_render_directory_group_layout() -> None:
    index = _directory_index([
        "guide/zeta.md",
        "guide/Alpha.md",
        "guide/tools/x.md",
        "guide/advanced/tips.md",
    ])

    lines = render_directory_group("guide", index["guide"])

    assert lines == [
        "# guide",
        "- [advanced](guide/advanced/_index.md)",
        "- [tools](guide/tools/_index.md)",
        "- [Alpha.md](./Alpha.md)",
        "- [zeta.md](./zeta.md)",
    ]


def test_render_root_group_lists_top_level_directories(sample_paths) -> None:
    index = _directory_index(sample_paths)
    assert render_directory_group(".", index["."]) == ["# .", "- [guide](guide/_index.md)"]


def test_render_summary_groups_by_initial() -> None:
    index: AlphabeticalIndex = {}
    for p in ["Apple.md", "banana.md", "7th.md"]:
        alphabetical.add_document(index, Document(p))

    lines = render_summary(index)

    assert lines == [
        "# Index",
        "",
        "### A",
        "- [Apple.md](Apple.md)",
        "",
        "### B",
        "- [banana.md](banana.md)",
        "",
        "### 7",
        "- [7th.md](7th.md)",
    ]


def test_render_summary_includes_synthetic_documents() -> None:
    index: AlphabeticalIndex = {}
    doc = Document("guide/setup.md")
    alphabetical.add_document(index, doc)
    for synthetic in directory.synthetic_ancestors_of(doc, INDEX):
        alphabetical.add_document(index, synthetic)

    text = to_document(render_summary(index, title="Contents"))

    assert text.startswith("# Contents\n")
    assert "### G\n- [guide](guide/_index.md)\n" in text
    assert "### S\n- [guide/setup.md](guide/setup.md)\n" in text
    assert text.endswith("\n")
