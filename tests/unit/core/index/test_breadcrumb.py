from __future__ import annotations

"""
Unit tests for the Breadcrumb Builder.

Verifies trail composition for content documents, directory index
documents, root documents and the top document, plus content prefixing.
"""

import pytest

from docnav.core.index.breadcrumb import build_breadcrumb, prepend_breadcrumb
from docnav.domain.document_models import PathError
from docnav.domain.navigation_models import NavigationConfig


def test_top_document_has_no_breadcrumb(nav_config) -> None:
    assert build_breadcrumb("intro.md", nav_config) is None


def test_root_document_trail(nav_config) -> None:
    assert build_breadcrumb("other.md", nav_config) == "[Top](/intro.md) > other.md"


def test_single_level_trail(nav_config) -> None:
    assert build_breadcrumb("guide/setup.md", nav_config) == (
        "[Top](/intro.md) > [guide](/guide/_index.md) > setup.md"
    )


def test_nested_trail_links_every_ancestor(nav_config) -> None:
    assert build_breadcrumb("guide/advanced/tips.md", nav_config) == (
        "[Top](/intro.md) > [guide](/guide/_index.md)"
        " > [advanced](/guide/advanced/_index.md) > tips.md"
    )


def test_directory_index_uses_directory_as_leaf(nav_config) -> None:
    assert build_breadcrumb("guide/_index.md", nav_config) == "[Top](/intro.md) > guide"
    assert build_breadcrumb("guide/advanced/_index.md", nav_config) == (
        "[Top](/intro.md) > [guide](/guide/_index.md) > advanced"
    )


def test_root_level_index_keeps_its_filename(nav_config) -> None:
    assert build_breadcrumb("_index.md", nav_config) == "[Top](/intro.md) > _index.md"


def test_windows_separators_are_normalized(nav_config) -> None:
    assert build_breadcrumb("guide\\_index.md", nav_config) == "[Top](/intro.md) > guide"


def test_current_dir_prefix_is_ignored(nav_config) -> None:
    assert build_breadcrumb("./guide/setup.md", nav_config) == (
        build_breadcrumb("guide/setup.md", nav_config)
    )
    assert build_breadcrumb("./intro.md", nav_config) is None


def test_custom_index_filename() -> None:
    cfg = NavigationConfig(top_document="README.md", index_filename="README.md")
    assert build_breadcrumb("a/b/README.md", cfg) == "[Top](/README.md) > [a](/a/README.md) > b"


def test_prepend_breadcrumb(nav_config) -> None:
    out = prepend_breadcrumb("# Setup\n", "guide/setup.md", nav_config)
    assert out == "[Top](/intro.md) > [guide](/guide/_index.md) > setup.md\n\n# Setup\n"


def test_prepend_breadcrumb_leaves_top_document_untouched(nav_config) -> None:
    assert prepend_breadcrumb("# Intro\n", "intro.md", nav_config) == "# Intro\n"


def test_malformed_path_raises(nav_config) -> None:
    with pytest.raises(PathError):
        build_breadcrumb("/abs/path.md", nav_config)
