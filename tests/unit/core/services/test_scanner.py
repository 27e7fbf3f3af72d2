from __future__ import annotations

"""
Unit tests for the File Discovery and Content Store Service.

Verifies extension filtering, path normalization, output directory
pruning and the handling of unreadable files.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from rift.core.services.scanner import (
    build_content_store,
    get_extension,
    normalize_extensions,
    yield_source_files,
)


@pytest.fixture
def sample_tree(make_tree) -> Path:
    return make_tree({
        "notes.md": '#include "parts/intro.md"',
        "notes.txt": "plain",
        "parts/intro.md": "intro",
        "parts/deep/leaf.html": "<b>leaf</b>",
        "Makefile": "all:",
        ".hidden.md": "hidden",
    })


def test_normalize_extensions() -> None:
    assert normalize_extensions([" md", ".txt", "", "md", "html "]) == ["md", "txt", "html"]
    assert normalize_extensions(None) == []


def test_get_extension() -> None:
    assert get_extension("a.md") == "md"
    assert get_extension("archive.tar.gz") == "gz"
    assert get_extension("Makefile") == ""
    assert get_extension(".gitignore") == ""


def test_empty_filter_accepts_every_file(sample_tree: Path) -> None:
    rel_paths = [rel for _, rel in yield_source_files(str(sample_tree), [])]

    assert rel_paths == [
        ".hidden.md",
        "Makefile",
        "notes.md",
        "notes.txt",
        "parts/intro.md",
        "parts/deep/leaf.html",
    ]


def test_extension_filter(sample_tree: Path) -> None:
    store, errors = build_content_store(str(sample_tree), ["md"])

    assert errors == []
    assert "notes.md" in store
    assert "notes.txt" not in store
    assert "parts/deep/leaf.html" not in store
    assert store["parts/intro.md"] == "intro"


def test_relative_paths_are_slash_normalized(sample_tree: Path) -> None:
    for file_path, rel_path in yield_source_files(str(sample_tree), ["html"]):
        assert "\\" not in rel_path
        assert rel_path == "parts/deep/leaf.html"
        assert os.path.isabs(file_path)


def test_excluded_directories_are_pruned(sample_tree: Path) -> None:
    excluded = str(sample_tree / "parts")

    rel_paths = [rel for _, rel in yield_source_files(str(sample_tree), ["md", "html"], [excluded])]

    assert rel_paths == [".hidden.md", "notes.md"]


def test_unreadable_file_is_omitted(sample_tree: Path, caplog) -> None:
    from rift.core.services import scanner

    real_read = scanner.read_text_file

    def flaky_read(path: str) -> str:
        if path.endswith("notes.md"):
            raise PermissionError("denied")
        return real_read(path)

    with patch.object(scanner, "read_text_file", side_effect=flaky_read):
        store, errors = build_content_store(str(sample_tree), ["md"])

    assert "notes.md" not in store
    assert "parts/intro.md" in store
    assert len(errors) == 1
    assert errors[0].rel_path == "notes.md"
    assert "denied" in errors[0].error
    assert "for reading" in caplog.text
