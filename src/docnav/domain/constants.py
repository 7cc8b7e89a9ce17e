from __future__ import annotations

"""
Domain Constants.

Centralizes the reserved filenames, link vocabulary, and default filtering
stacks shared by the index builders, the engine, and the interfaces.
"""

from typing import List

CURRENT_CONFIG_VERSION = "1.0.0"
CONFIG_FILENAME = ".docnav.json"

# -----------------------------------------------------------------------------
# RESERVED FILENAMES
# -----------------------------------------------------------------------------

DEFAULT_INDEX_FILENAME = "_index.md"
DEFAULT_SUMMARY_FILENAME = "SUMMARY.md"
DEFAULT_OVERRIDE_FILENAME = "index.md"
DEFAULT_TOP_DOCUMENT = "README.md"
DEFAULT_SUMMARY_TITLE = "Index"

# -----------------------------------------------------------------------------
# NAVIGATION VOCABULARY
# -----------------------------------------------------------------------------

CURRENT_DIR = "."
PATH_SEPARATOR = "/"
TOP_CRUMB_LABEL = "Top"
CRUMB_SEPARATOR = " > "

# -----------------------------------------------------------------------------
# DISCOVERY DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_EXTENSIONS: List[str] = [".md"]

DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^(node_modules|__pycache__|\.git|\.idea|\.vscode|_book|site)$",
    r"^\.",
]
