from __future__ import annotations

"""
Unit tests for the Reader and Writer components.

Verifies:
1. Byte-exact round trips (newlines and undecodable bytes).
2. Creation of nested output directories.
3. Isolation of per-file write failures.
"""

from pathlib import Path

from rift.core.pipeline.components.reader import read_text_file
from rift.core.pipeline.components.writer import write_output_set, write_text_file
from rift.domain.models import ExpansionResult


def test_read_write_round_trip_is_byte_exact(tmp_path: Path) -> None:
    raw = b"first\r\nsecond\n\xff\xfe tail"
    src = tmp_path / "in.txt"
    src.write_bytes(raw)
    dst = tmp_path / "out" / "in.txt"

    write_text_file(str(dst), read_text_file(str(src)))

    assert dst.read_bytes() == raw


def test_write_text_file_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c.md"

    write_text_file(str(target), "content")

    assert target.read_text(encoding="utf-8") == "content"


def test_write_output_set_mirrors_structure(tmp_path: Path) -> None:
    out = tmp_path / "out"
    output_set = {
        "top.md": ExpansionResult("top.md", "TOP"),
        "nested/dir/leaf.md": ExpansionResult("nested/dir/leaf.md", "LEAF"),
    }

    written, errors = write_output_set(str(out), output_set)

    assert written == ["top.md", "nested/dir/leaf.md"]
    assert errors == []
    assert (out / "top.md").read_text(encoding="utf-8") == "TOP"
    assert (out / "nested" / "dir" / "leaf.md").read_text(encoding="utf-8") == "LEAF"


def test_write_failure_does_not_abort_others(tmp_path: Path, caplog) -> None:
    out = tmp_path / "out"
    (out / "blocked.md").mkdir(parents=True)
    output_set = {
        "a.md": ExpansionResult("a.md", "A"),
        "blocked.md": ExpansionResult("blocked.md", "B"),
        "z.md": ExpansionResult("z.md", "Z"),
    }

    written, errors = write_output_set(str(out), output_set)

    assert written == ["a.md", "z.md"]
    assert [e.rel_path for e in errors] == ["blocked.md"]
    assert (out / "z.md").read_text(encoding="utf-8") == "Z"
    assert "for writing" in caplog.text
