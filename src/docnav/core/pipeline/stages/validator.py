from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the generation engine, ensuring that the
configuration dictionary conforms to the expected schema. Handles type
coercion, default injection, and reserved-filename sanity checks.
"""

import logging
from typing import Any, Dict, List, Tuple

from docnav.core.pipeline.components.filters import (
    default_exclude_patterns,
    default_extensions,
)
from docnav.domain.config import get_default_config
from docnav.domain.document_models import PathError, normalize_document_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = [
    "root_dir", "top_document", "index_filename",
    "summary_filename", "override_filename", "summary_title",
]

_BOOL_FIELDS = ["respect_gitignore", "apply_overrides"]

_FILENAME_FIELDS = ["index_filename", "summary_filename", "override_filename"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (JSON file, CLI, host plugin) into strictly
    typed parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an invalid value.
        PathError: In strict mode, if top_document is not a relative document path.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["extensions"] = _as_list_str(
        merged.get("extensions"), default_extensions(), "extensions", warnings, strict
    )
    merged["exclude_patterns"] = _as_list_str(
        merged.get("exclude_patterns"), default_exclude_patterns(), "exclude_patterns",
        warnings, strict, allow_empty=True,
    )

    # 3. Domain-Specific Normalization
    merged["extensions"] = _normalize_extensions(merged["extensions"], warnings, strict)
    for field in _FILENAME_FIELDS:
        merged[field] = _as_filename(merged[field], defaults[field], field, warnings, strict)
    merged["top_document"] = _as_document_path(
        merged["top_document"], defaults["top_document"], "top_document", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(
        value: Any,
        fallback: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
        allow_empty: bool = False,
) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        if items or allow_empty:
            return items
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        if out or allow_empty:
            return out
        return list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extensions(exts: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure all file extensions are prefixed with a dot."""
    out: List[str] = []
    for ext in exts:
        e = ext.strip()
        if not e:
            continue
        if not e.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        out.append(e)
    return out if out else default_extensions()


def _as_filename(value: str, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Reserved names must be bare filenames without directory parts."""
    if "/" not in value and "\\" not in value and value not in (".", ".."):
        return value

    msg = f"Invalid field '{field}': '{value}' is not a bare filename."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_document_path(value: str, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Document references must be relative paths inside the root."""
    try:
        return normalize_document_path(value)
    except PathError as e:
        if strict:
            raise
        warnings.append(f"Invalid field '{field}': {e}. Using fallback.")
        return fallback
