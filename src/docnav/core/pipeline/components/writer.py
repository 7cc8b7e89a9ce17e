from __future__ import annotations

"""
Artifact Persistence.

Writes planned navigation documents beneath the root directory. A target
whose content already matches is left untouched so that file watchers of
host tools do not see a change. Failures propagate to the engine unchanged.
"""

import logging
import os
from typing import List

from docnav.domain.pipeline_models import OutputArtifact
from docnav.infra.fs import resolve_in_root

logger = logging.getLogger(__name__)


def write_artifact(root_dir: str, artifact: OutputArtifact) -> str:
    """
    Persist one artifact unless the target already holds its content.

    Args:
        root_dir: Absolute root directory.
        artifact: Rendered document and its relative target path.

    Returns:
        str: Absolute target path.

    Raises:
        OSError: If the target cannot be read or written.
    """
    target = resolve_in_root(root_dir, artifact.rel_path)
    if _is_current(target, artifact.content):
        logger.debug(f"Unchanged {artifact.kind}: {target}")
        return target

    with open(target, "w", encoding="utf-8", newline="\n") as f:
        f.write(artifact.content)
    logger.debug(f"Wrote {artifact.kind}: {target}")
    return target


def write_artifacts(root_dir: str, artifacts: List[OutputArtifact]) -> List[str]:
    """
    Persist artifacts sequentially, stopping at the first failure.

    Args:
        root_dir: Absolute root directory.
        artifacts: Planned artifacts in write order.

    Returns:
        List[str]: Absolute target paths.
    """
    return [write_artifact(root_dir, artifact) for artifact in artifacts]


def _is_current(target: str, content: str) -> bool:
    if not os.path.isfile(target):
        return False
    try:
        with open(target, "r", encoding="utf-8", newline="") as f:
            return f.read() == content
    except UnicodeDecodeError:
        return False
