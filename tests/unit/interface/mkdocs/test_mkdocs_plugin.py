from __future__ import annotations

"""
Unit tests for the MkDocs host integration.

Drives the plugin hooks directly with minimal stand-ins for the MkDocs
config and page objects.
"""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from docnav.domain.document_models import PathError
from docnav.interface.mkdocs.plugin import NavigationPlugin


@pytest.fixture(autouse=True)
def collation():
    """Keep the process locale untouched while hooks run."""
    with patch("docnav.interface.mkdocs.plugin.use_user_collation") as mocked:
        yield mocked


def _plugin(**options) -> NavigationPlugin:
    plugin = NavigationPlugin()
    errors, _ = plugin.load_config(options)
    assert errors == []
    return plugin


def _page(src_path: str):
    return SimpleNamespace(file=SimpleNamespace(src_path=src_path))


def test_on_config_generates_navigation(docs_tree: Path) -> None:
    plugin = _plugin(top_document="intro.md")
    config = {"docs_dir": str(docs_tree)}

    assert plugin.on_config(config) is config

    assert (docs_tree / "SUMMARY.md").exists()
    assert (docs_tree / "guide" / "_index.md").exists()
    assert (docs_tree / "guide" / "advanced" / "_index.md").exists()


def test_on_page_markdown_prepends_breadcrumb(docs_tree: Path) -> None:
    plugin = _plugin(top_document="intro.md")
    plugin.on_config({"docs_dir": str(docs_tree)})

    out = plugin.on_page_markdown("# Setup\n", _page("guide/setup.md"), {}, None)
    top = plugin.on_page_markdown("# Intro\n", _page("intro.md"), {}, None)

    assert out == "[Top](/intro.md) > [guide](/guide/_index.md) > setup.md\n\n# Setup\n"
    assert top == "# Intro\n"


def test_breadcrumbs_can_be_disabled(docs_tree: Path) -> None:
    plugin = _plugin(top_document="intro.md", breadcrumbs=False)
    plugin.on_config({"docs_dir": str(docs_tree)})

    assert plugin.on_page_markdown("body", _page("guide/setup.md"), {}, None) == "body"


def test_on_config_adopts_user_collation(docs_tree: Path, collation) -> None:
    plugin = _plugin(top_document="intro.md")
    plugin.on_config({"docs_dir": str(docs_tree)})

    collation.assert_called_once_with()


def test_invalid_top_document_fails_before_writing(docs_tree: Path) -> None:
    plugin = _plugin(top_document="/intro.md")

    with pytest.raises(PathError):
        plugin.on_config({"docs_dir": str(docs_tree)})

    assert not (docs_tree / "SUMMARY.md").exists()
    assert not (docs_tree / "guide" / "_index.md").exists()
