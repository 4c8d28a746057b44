"""
Pytest configuration and fixtures.

Puts the project root on sys.path and keeps log files out of the repo.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

# Must happen before ai2fs.config is imported anywhere
os.environ.setdefault("AI2FS_LOG_DIR", tempfile.mkdtemp(prefix="ai2fs_test_logs_"))


@pytest.fixture
def out_root(tmp_path: Path) -> Path:
    """Output root inside pytest's tmp_path (not created yet)."""
    return tmp_path / "generated-code"


@pytest.fixture
def write_transcript(tmp_path: Path):
    """Writes a transcript file byte-for-byte and returns its path."""
    def _write(text: str, name: str = "transcript.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write
