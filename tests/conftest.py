"""
Pytest configuration for the update-version tool tests.

Puts the repository root on sys.path so tests run without installing.
"""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def version_file(tmp_path):
    """Path to a version file inside a not-yet-existing lib/ directory."""
    return tmp_path / "lib" / "version.dart"
