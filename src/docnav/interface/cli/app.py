from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, project file, CLI overrides), validation, and either a full
generation run or a single breadcrumb lookup. Maps outcomes to exit codes.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from docnav.core.index.alphabetical import use_user_collation
from docnav.core.index.breadcrumb import build_breadcrumb
from docnav.core.pipeline.engine import run_pipeline
from docnav.core.pipeline.stages.validator import validate_config
from docnav.domain.config import get_default_config, load_config, save_config
from docnav.domain.document_models import PathError
from docnav.domain.navigation_models import navigation_config_from_dict
from docnav.domain.pipeline_models import NavigationResult
from docnav.infra.logging import LoggingConfig, configure_logging, get_logger
from docnav.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))
    use_user_collation()

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs project file)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        try:
            saved = save_config(clean_conf, args.config_path)
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")
            return EXIT_FAILURE
        logger.info(f"Configuration saved to {saved}")

    # 5. Single-document breadcrumb lookup
    if args.breadcrumb_path:
        return _print_breadcrumb(args.breadcrumb_path, clean_conf)

    # 6. Pre-flight input verification
    root_dir = clean_conf["root_dir"]
    if not os.path.isdir(root_dir):
        msg = f"Root directory does not exist: {root_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 7. Generation run
    logger.info(f"Targeting root directory: {os.path.abspath(root_dir)}")
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except (PathError, OSError) as e:
        logger.error(f"Navigation generation failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base config.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    keys_to_merge = [
        "root_dir", "top_document", "index_filename", "summary_filename",
        "override_filename", "summary_title", "extensions", "exclude_patterns",
        "respect_gitignore", "apply_overrides",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_breadcrumb(path: str, clean_conf: Dict[str, Any]) -> int:
    nav_config = navigation_config_from_dict(clean_conf)
    try:
        trail = build_breadcrumb(path, nav_config)
    except PathError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    print(trail or "")
    return EXIT_OK


def _print_human_summary(result: NavigationResult) -> None:
    """
    Print the run result as a short terminal report.

    Args:
        result: The navigation result to render.
    """
    if result.dry_run:
        print("SIMULATION COMPLETE (nothing written)")
    else:
        print("Navigation generated.")

    print(f"Root directory: {result.root_dir}")
    print(f"Documents indexed: {result.documents}")
    print(f"Directory indexes: {result.directories} ({result.overrides} from overrides)")
    print(f"Synthetic index documents: {result.synthetic_documents}")
    if result.initials:
        print(f"Initials: {' '.join(result.initials)}")

    if result.generated_files:
        print("\nFiles:")
        for path in result.generated_files:
            print(f"  - {path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
