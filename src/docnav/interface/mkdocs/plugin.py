from __future__ import annotations

"""
MkDocs Host Integration.

Generates the directory indexes and the summary into docs_dir when the
configuration is loaded, before MkDocs collects files, and prefixes each
page's markdown with its breadcrumb trail before rendering.
"""

from typing import Any, Dict, Optional

from mkdocs.config import config_options
from mkdocs.plugins import BasePlugin

from docnav.core.index.alphabetical import use_user_collation
from docnav.core.index.breadcrumb import prepend_breadcrumb
from docnav.core.pipeline.engine import run_pipeline
from docnav.core.pipeline.stages.validator import validate_config
from docnav.domain.navigation_models import NavigationConfig, navigation_config_from_dict
from docnav.infra.logging import get_logger

log = get_logger("mkdocs.plugins.docnav")


class NavigationPlugin(BasePlugin):
    """Index and breadcrumb generation for an MkDocs site."""

    config_scheme = (
        ("top_document", config_options.Type(str, default="index.md")),
        ("index_filename", config_options.Type(str, default="_index.md")),
        ("summary_filename", config_options.Type(str, default="SUMMARY.md")),
        ("override_filename", config_options.Type(str, default="index.md")),
        ("apply_overrides", config_options.Type(bool, default=True)),
        ("summary_title", config_options.Type(str, default="Index")),
        ("breadcrumbs", config_options.Type(bool, default=True)),
    )

    def __init__(self):
        super().__init__()
        self.nav_config: Optional[NavigationConfig] = None

    def _run_config(self, docs_dir: str) -> Dict[str, Any]:
        return {
            "root_dir": docs_dir,
            "top_document": self.config["top_document"],
            "index_filename": self.config["index_filename"],
            "summary_filename": self.config["summary_filename"],
            "override_filename": self.config["override_filename"],
            "apply_overrides": self.config["apply_overrides"],
            "summary_title": self.config["summary_title"],
        }

    def on_config(self, config):
        use_user_collation()
        run_config = self._run_config(config["docs_dir"])
        clean_conf, _ = validate_config(run_config, strict=True)
        self.nav_config = navigation_config_from_dict(clean_conf)

        result = run_pipeline(clean_conf)
        log.info(
            f"[docnav] {result.documents} documents, "
            f"{result.directories} directory indexes written to {result.root_dir}"
        )
        return config

    def on_page_markdown(self, markdown, page, config, files):
        if not self.config["breadcrumbs"] or self.nav_config is None:
            return markdown
        return prepend_breadcrumb(markdown, page.file.src_path, self.nav_config)
