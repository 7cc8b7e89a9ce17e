from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared navigation settings and sample documentation trees.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from docnav.domain.navigation_models import NavigationConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def nav_config() -> NavigationConfig:
    """Navigation settings with 'intro.md' as the top document."""
    return NavigationConfig(root_dir=".", top_document="intro.md")


@pytest.fixture
def sample_paths() -> List[str]:
    """The three-document tree used across builder tests."""
    return ["intro.md", "guide/setup.md", "guide/advanced/tips.md"]


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """
    Create a small documentation tree on disk.

    Structure:
    /docs
      intro.md
      guide/
        setup.md
        advanced/
          tips.md
      node_modules/
        pkg.md
    """
    root = tmp_path / "docs"
    (root / "guide" / "advanced").mkdir(parents=True)
    (root / "node_modules").mkdir()

    (root / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (root / "guide" / "setup.md").write_text("# Setup\n", encoding="utf-8")
    (root / "guide" / "advanced" / "tips.md").write_text("# Tips\n", encoding="utf-8")
    (root / "node_modules" / "pkg.md").write_text("vendored\n", encoding="utf-8")

    return root
