"""
Test configuration - ensures repo root is in sys.path.

This allows tests to import block_algebra without installing the package.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import block_algebra.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI tests reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
