from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: the reference program output, exit codes and
stream output (stdout/stderr).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "morsetree" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the entry point in a separate process.

    Injects the 'src' directory into PYTHONPATH and points the user data
    directory at ``home`` so no state leaks between runs.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["MORSETREE_HOME"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_reference_program_output(isolated_data_dir: Path) -> None:
    """TC-01: Without arguments the reference encode/decode lines are printed."""
    result = run_cli([], isolated_data_dir)

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "encoded: .... . .-.. .-.. ---  .-- --- .-. .-.. -.. ",
        "decoded: hello world ",
    ]


def test_cli_encode(isolated_data_dir: Path) -> None:
    """TC-02: Encoding through the CLI prints the bare code."""
    result = run_cli(["--encode", "Morse"], isolated_data_dir)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "-- --- .-. ... . \n"


def test_cli_fatal_decode_exit_code(isolated_data_dir: Path) -> None:
    """TC-03: An illegal signal aborts with exit code 1 and no output."""
    result = run_cli(["--decode=.- b"], isolated_data_dir)

    assert result.returncode == 1
    assert result.stdout == ""
    assert "Unexpected character 'b'" in result.stderr


def test_cli_usage_error(isolated_data_dir: Path) -> None:
    """TC-04: A missing option argument is a usage error."""
    result = run_cli(["--encode"], isolated_data_dir)

    assert result.returncode == 2


def test_cli_json_output_structure(isolated_data_dir: Path) -> None:
    """TC-05: Verify structure and content of JSON output mode."""
    result = run_cli(["--json", "--decode=... --- ..."], isolated_data_dir)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["mode"] == "decode"
    assert data["output_text"] == "sos "
    assert set(data) == {
        "ok", "error", "mode", "input_text", "output_text", "tree_lines", "summary"
    }
