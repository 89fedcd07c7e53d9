from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated user data directory so tests never touch ~/.morsetree.
3. Shared fixtures for the reference lookup tree and logging reset.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from morsetree.domain.alphabet import build_international_tree  # noqa: E402
from morsetree.domain.tree_models import CodeTree  # noqa: E402
from morsetree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a per-test temporary folder."""
    data_dir = tmp_path / "morsetree_home"
    monkeypatch.setenv("MORSETREE_HOME", str(data_dir))
    return data_dir


@pytest.fixture
def tree() -> CodeTree:
    """Return a freshly built international Morse tree."""
    return build_international_tree()


@pytest.fixture
def reset_logging():
    """Detach the application's handlers before and after a test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
