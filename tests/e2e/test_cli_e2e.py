from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and the navigation files written to disk.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "docnav" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed in site-packages.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path_execution(docs_tree: Path) -> None:
    result = run_cli(["-r", str(docs_tree), "--top", "intro.md", "--use-defaults"])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "Navigation generated." in result.stdout

    for rel in ["_index.md", "guide/_index.md", "guide/advanced/_index.md", "SUMMARY.md"]:
        assert (docs_tree / rel).exists(), f"Navigation file {rel} missing."


def test_cli_handles_missing_root(tmp_path: Path) -> None:
    result = run_cli(["-r", str(tmp_path / "missing"), "--use-defaults"])

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_dry_run_simulation(docs_tree: Path) -> None:
    result = run_cli(["-r", str(docs_tree), "--use-defaults", "--dry-run"])

    assert result.returncode == 0
    assert "SIMULATION COMPLETE" in result.stdout
    assert not (docs_tree / "SUMMARY.md").exists(), "Dry run should not write files."


def test_cli_json_output_structure(docs_tree: Path) -> None:
    result = run_cli(["-r", str(docs_tree), "--use-defaults", "--json", "--dry-run"])
    assert result.returncode == 0

    try:
        data: Dict[str, Any] = json.loads(result.stdout)
    except json.JSONDecodeError:
        pytest.fail(f"Failed to decode JSON output: {result.stdout}")

    for key in ["root_dir", "dry_run", "documents", "directories", "generated_files", "summary"]:
        assert key in data, f"JSON output missing key: {key}"

    assert data["dry_run"] is True
    assert data["documents"] == 3
    assert data["synthetic_documents"] == 2


def test_cli_breadcrumb_lookup(tmp_path: Path) -> None:
    result = run_cli(
        ["--use-defaults", "--top", "intro.md", "--breadcrumb", "guide/advanced/tips.md"],
        cwd=tmp_path,
    )

    assert result.returncode == 0
    assert result.stdout.strip() == (
        "[Top](/intro.md) > [guide](/guide/_index.md)"
        " > [advanced](/guide/advanced/_index.md) > tips.md"
    )


def test_cli_breadcrumb_rejects_absolute_path(tmp_path: Path) -> None:
    result = run_cli(["--use-defaults", "--breadcrumb", "/etc/passwd.md"], cwd=tmp_path)
    assert result.returncode == 2


def test_cli_reads_project_config(docs_tree: Path) -> None:
    config = {"root_dir": str(docs_tree), "summary_filename": "NAV.md", "summary_title": "Pages"}
    (docs_tree / ".docnav.json").write_text(json.dumps(config), encoding="utf-8")

    result = run_cli([], cwd=docs_tree)

    assert result.returncode == 0, result.stderr
    assert (docs_tree / "NAV.md").read_text(encoding="utf-8").startswith("# Pages\n")
    assert not (docs_tree / "SUMMARY.md").exists()


def test_cli_dump_config(tmp_path: Path) -> None:
    result = run_cli(["--use-defaults", "--index-name", "INDEX.md", "--dump-config"], cwd=tmp_path)

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["index_filename"] == "INDEX.md"
    assert data["summary_filename"] == "SUMMARY.md"


def test_cli_help_message() -> None:
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: docnav" in result.stdout
    assert "--root" in result.stdout
