from __future__ import annotations

"""
Inclusion Domain Data Models.

Defines the immutable structures shared by the enumeration, resolution and
persistence stages: source files, the read-only content store, the compiled
directive pattern and the per-file expansion results.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator

from rift.domain.errors import ConfigurationError

# -----------------------------------------------------------------------------
# SOURCE SNAPSHOT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceFile:
    """
    A single enumerated input file.

    Attributes:
        rel_path: Slash-normalized path relative to the scan root.
        content: Original text content, never mutated during a run.
    """
    rel_path: str
    content: str


class ContentStore(Mapping):
    """
    Read-only snapshot of every eligible input file, keyed by relative path.

    Keys iterate in sorted order so that a run is deterministic regardless of
    the order in which files were discovered.
    """

    def __init__(self, files: Iterable[SourceFile] = ()):
        entries: Dict[str, str] = {}
        for source in sorted(files, key=lambda f: f.rel_path):
            if source.rel_path in entries:
                raise ValueError(f"Duplicate path in content store: {source.rel_path}")
            entries[source.rel_path] = source.content
        self._entries = MappingProxyType(entries)

    @classmethod
    def from_mapping(cls, contents: Mapping) -> ContentStore:
        """Build a store from a plain ``{rel_path: content}`` mapping."""
        return cls(SourceFile(path, text) for path, text in contents.items())

    def __getitem__(self, rel_path: str) -> str:
        return self._entries[rel_path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ContentStore({len(self)} files)"


# -----------------------------------------------------------------------------
# DIRECTIVE PATTERN
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectivePattern:
    """
    Compiled include-directive pattern.

    The single capture group yields the referenced relative path. A pattern
    with any other number of groups is still accepted here; each substitution
    pass that finds a match reports it and aborts.
    """
    source: str
    regex: re.Pattern

    @property
    def capture_groups(self) -> int:
        return self.regex.groups

    @property
    def has_single_capture_group(self) -> bool:
        return self.regex.groups == 1


def compile_directive_pattern(source: str) -> DirectivePattern:
    """
    Compile a raw regex string into a DirectivePattern.

    Raises:
        ConfigurationError: If the string is not a valid regular expression.
    """
    try:
        regex = re.compile(source)
    except re.error as e:
        raise ConfigurationError(f"Invalid directive regex {source!r}: {e}") from e
    return DirectivePattern(source=source, regex=regex)


# -----------------------------------------------------------------------------
# RESOLUTION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SubstitutionResult:
    """Outcome of one substitution pass over a file's current content."""
    new_content: str
    did_substitute: bool = False


@dataclass(frozen=True)
class ExpansionResult:
    """
    Final content of one file after 0..max_depth passes.

    Attributes:
        rel_path: Path of the expanded file.
        content: Expanded text.
        passes: Number of passes that performed at least one substitution.
        depth_exhausted: True when the depth limit stopped the expansion.
    """
    rel_path: str
    content: str
    passes: int = 0
    depth_exhausted: bool = False


# Ordered mapping rel_path -> ExpansionResult, in content store order
OutputSet = Dict[str, ExpansionResult]


@dataclass(frozen=True)
class FileError:
    """
    Recoverable I/O failure attached to a single file.

    Attributes:
        rel_path: File path relative to its root.
        error: Descriptive error message.
    """
    rel_path: str
    error: str
