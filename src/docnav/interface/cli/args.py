from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docnav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docnav",
        description=(
            "Generate an alphabetical summary, per-directory index documents "
            "and breadcrumb trails for a tree of markdown documents."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-r", "--root",
        dest="root_dir",
        default=None,
        help="Content root directory (default: current directory).",
    )
    p.add_argument(
        "--top",
        dest="top_document",
        default=None,
        help="Top-level document targeted by the 'Top' crumb (default: README.md).",
    )

    # --- Reserved Filenames ---
    p.add_argument(
        "--index-name",
        dest="index_filename",
        default=None,
        help="Filename of generated directory indexes (default: _index.md).",
    )
    p.add_argument(
        "--summary-name",
        dest="summary_filename",
        default=None,
        help="Filename of the generated summary (default: SUMMARY.md).",
    )
    p.add_argument(
        "--override-name",
        dest="override_filename",
        default=None,
        help="Author-provided file copied instead of a generated index (default: index.md).",
    )
    p.add_argument(
        "--summary-title",
        dest="summary_title",
        default=None,
        help="Heading of the summary document.",
    )

    # --- Discovery Filters ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated document extensions (default: .md).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes matched against file and directory names.",
    )
    p.add_argument(
        "--gitignore",
        action="store_true",
        help="Also exclude entries listed in the root .gitignore.",
    )
    p.add_argument(
        "--no-overrides",
        action="store_true",
        help="Always generate directory indexes, ignoring override files.",
    )

    # --- Runtime Modes ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan the run and report the files without writing them.",
    )
    p.add_argument(
        "--breadcrumb",
        dest="breadcrumb_path",
        default=None,
        metavar="PATH",
        help="Print the breadcrumb trail of one document and exit.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file (default: ./.docnav.json).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration to the configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Unset options map to None.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_dir"] = args.root_dir
    overrides["top_document"] = args.top_document
    overrides["index_filename"] = args.index_filename
    overrides["summary_filename"] = args.summary_filename
    overrides["override_filename"] = args.override_filename
    overrides["summary_title"] = args.summary_title

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.gitignore:
        overrides["respect_gitignore"] = True
    if args.no_overrides:
        overrides["apply_overrides"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
