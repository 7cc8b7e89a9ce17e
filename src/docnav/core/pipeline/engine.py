from __future__ import annotations

"""
Core generation pipeline.

This module coordinates one navigation generation run:
1. Validates configuration and the root directory.
2. Discovers content documents.
3. Builds the alphabetical and directory indexes in a single pass.
4. Plans every output document in memory (honouring override files).
5. Writes the planned documents sequentially.

Nothing is written until every document has been planned, and the first
write failure aborts the run.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from docnav.core.index import alphabetical, directory
from docnav.core.pipeline.components.writer import write_artifacts
from docnav.core.pipeline.stages.validator import validate_config
from docnav.core.rendering.markdown import render_directory_group, render_summary, to_document
from docnav.core.services.scanner import prepare_exclusion_rules, yield_document_paths
from docnav.domain.document_models import Document
from docnav.domain.navigation_models import NavigationConfig, navigation_config_from_dict
from docnav.domain.pipeline_models import (
    KIND_DIRECTORY_INDEX,
    KIND_OVERRIDE,
    KIND_SUMMARY,
    NavigationIndexes,
    NavigationResult,
    OutputArtifact,
)
from docnav.infra.fs import ensure_root_dir, override_path, read_override, resolve_in_root

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INDEX CONSTRUCTION
# -----------------------------------------------------------------------------

def build_indexes(paths: Iterable[str], nav_config: NavigationConfig) -> NavigationIndexes:
    """
    Turn relative document paths into the two navigation indexes.

    Each content document feeds both builders. Synthetic ancestor documents
    feed the alphabetical index only.

    Args:
        paths: Relative document paths, in any order.
        nav_config: Navigation settings.

    Returns:
        NavigationIndexes: Populated grouping maps.

    Raises:
        PathError: If any path is malformed.
    """
    indexes = NavigationIndexes()

    for raw_path in paths:
        doc = Document(path=raw_path)
        indexes.documents[doc.path] = doc

        alphabetical.add_document(indexes.alphabetical, doc)
        directory.add_document(indexes.directories, doc, nav_config.index_filename)
        for synthetic in directory.synthetic_ancestors_of(doc, nav_config.index_filename):
            indexes.synthetic[synthetic.path] = synthetic
            alphabetical.add_document(indexes.alphabetical, synthetic)

    return indexes

# -----------------------------------------------------------------------------
# OUTPUT PLANNING
# -----------------------------------------------------------------------------

def plan_artifacts(indexes: NavigationIndexes, nav_config: NavigationConfig) -> List[OutputArtifact]:
    """
    Render every navigation document in memory.

    Args:
        indexes: Populated grouping maps.
        nav_config: Navigation settings.

    Returns:
        List[OutputArtifact]: Directory indexes (sorted by directory) then the summary.

    Raises:
        OSError: If an existing override file cannot be read.
    """
    artifacts: List[OutputArtifact] = []

    for dir_path in sorted(indexes.directories):
        target = directory.index_path_for(dir_path, nav_config.index_filename)

        override = None
        if nav_config.apply_overrides:
            override = read_override(nav_config.root_dir, dir_path, nav_config.override_filename)

        if override is not None:
            source = override_path(nav_config.root_dir, dir_path, nav_config.override_filename)
            logger.debug(f"Using override for '{dir_path}': {source}")
            artifacts.append(OutputArtifact(target, override, KIND_OVERRIDE, source))
        else:
            lines = render_directory_group(dir_path, indexes.directories[dir_path])
            artifacts.append(OutputArtifact(target, to_document(lines), KIND_DIRECTORY_INDEX))

    summary_lines = render_summary(indexes.alphabetical, nav_config.summary_title)
    artifacts.append(
        OutputArtifact(nav_config.summary_filename, to_document(summary_lines), KIND_SUMMARY)
    )
    return artifacts

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
        paths: Optional[Iterable[str]] = None,
) -> NavigationResult:
    """
    Execute a full navigation generation run.

    Args:
        config: Raw or partial configuration dictionary.
        dry_run: If True, plan everything but write nothing.
        paths: Explicit document paths. Scans the root when omitted.

    Returns:
        NavigationResult: Counts and generated file paths.

    Raises:
        PathError: If a document path is malformed.
        OSError: If the root is missing or any read/write fails.
    """
    logger.info("Navigation generation started.")

    # 1) Config & root verification
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    nav_config = navigation_config_from_dict(cfg)
    root_dir = ensure_root_dir(nav_config.root_dir)

    # 2) Discovery
    if paths is None:
        exclude_rx = prepare_exclusion_rules(
            root_dir, cfg["exclude_patterns"], cfg["respect_gitignore"]
        )
        paths = yield_document_paths(
            root_dir,
            cfg["extensions"],
            exclude_rx,
            nav_config.index_filename,
            nav_config.summary_filename,
        )

    # 3) Index construction
    indexes = build_indexes(paths, nav_config)
    logger.info(
        f"Indexed {len(indexes.documents)} documents in "
        f"{len(indexes.directories)} directories."
    )

    # 4) Planning
    artifacts = plan_artifacts(indexes, nav_config)
    overrides = sum(1 for a in artifacts if a.kind == KIND_OVERRIDE)

    # 5) Persistence
    if dry_run:
        logger.info("Dry run: skipping writes.")
        generated = [resolve_in_root(root_dir, a.rel_path) for a in artifacts]
    else:
        generated = write_artifacts(root_dir, artifacts)

    logger.info(f"Navigation generation completed: {len(generated)} files.")
    return NavigationResult(
        root_dir=root_dir,
        dry_run=dry_run,
        documents=len(indexes.documents),
        directories=len(indexes.directories),
        synthetic_documents=len(indexes.synthetic),
        overrides=overrides,
        initials=alphabetical.sorted_initials(indexes.alphabetical),
        generated_files=generated,
        summary={
            "top_document": nav_config.top_document,
            "index_filename": nav_config.index_filename,
            "summary_filename": nav_config.summary_filename,
            "warnings": list(warnings),
        },
    )
