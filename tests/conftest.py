from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for directive patterns, content stores and input trees.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rift.domain.config import DEFAULT_DIRECTIVE_REGEX  # noqa: E402
from rift.domain.models import ContentStore, DirectivePattern, compile_directive_pattern  # noqa: E402
from rift.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def default_pattern() -> DirectivePattern:
    """The default '#include "path"' directive pattern."""
    return compile_directive_pattern(DEFAULT_DIRECTIVE_REGEX)


@pytest.fixture
def make_store() -> Callable[[Dict[str, str]], ContentStore]:
    """Factory building a ContentStore from a plain dict."""
    return ContentStore.from_mapping


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Factory writing a dict of ``{rel_path: content}`` under ``tmp_path/input``.

    Returns the root directory of the created tree.
    """
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "input"
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content.encode("utf-8"))
        return root

    return _make


@pytest.fixture
def reset_logging():
    """Tear down handlers installed by configure_logging around a test."""
    shutdown_logging()
    root = logging.getLogger()
    previous_level = root.level
    yield
    shutdown_logging()
    root.setLevel(previous_level)
