from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the run result exchanged between the pipeline engine and the
command-line interface, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rift.domain.models import FileError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RunResult:
    """
    Unified result object of a complete inclusion run.

    Attributes:
        ok: Flag indicating the run reached completion.
        error: Descriptive message in case of a fatal failure.
        input_path: Normalized scan root.
        output_path: Normalized output root.
        regex: Directive pattern source used for the run.
        max_depth: Maximum number of substitution passes per file.
        extensions: Extension allow-list (empty means every file).
        dry_run: Whether writing was skipped.
        written_files: Relative paths persisted under the output root.
        depth_exhausted: Relative paths whose expansion hit the depth limit.
        read_errors: Files omitted from the content store.
        write_errors: Files that could not be persisted.
        summary: Counters for reporting.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    regex: str
    max_depth: int
    extensions: List[str] = field(default_factory=list)
    dry_run: bool = False

    written_files: List[str] = field(default_factory=list)
    depth_exhausted: List[str] = field(default_factory=list)
    read_errors: List[FileError] = field(default_factory=list)
    write_errors: List[FileError] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_file_errors(self) -> bool:
        return bool(self.read_errors or self.write_errors)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str = "",
        output_path: str = "",
) -> RunResult:
    """
    Create a failed run result for a fatal pre-flight condition.

    Args:
        error: Detailed error description.
        cfg: The configuration used for the aborted run.
        input_path: Normalized scan root, if it was resolved.
        output_path: Normalized output root, if it was resolved.

    Returns:
        RunResult: An immutable error result object.
    """
    return RunResult(
        ok=False,
        error=error,
        input_path=input_path or str(cfg.get("input_path", "")),
        output_path=output_path or str(cfg.get("output_path", "")),
        regex=str(cfg.get("regex", "")),
        max_depth=_as_int(cfg.get("max_depth", 0)),
        extensions=list(cfg.get("extensions") or []),
        dry_run=bool(cfg.get("dry_run", False)),
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        scanned: int,
        written_files: Optional[List[str]] = None,
        depth_exhausted: Optional[List[str]] = None,
        read_errors: Optional[List[FileError]] = None,
        write_errors: Optional[List[FileError]] = None,
) -> RunResult:
    """
    Create the result of a run that reached completion.

    Per-file errors do not make the run fail; they are reported alongside.

    Args:
        cfg: Validated configuration used during execution.
        input_path: Normalized scan root.
        output_path: Normalized output root.
        scanned: Number of files in the content store.
        written_files: Persisted relative paths.
        depth_exhausted: Paths that hit the depth limit.
        read_errors: Files omitted on read failure.
        write_errors: Files left unwritten.

    Returns:
        RunResult: An immutable success result object.
    """
    written_files = written_files or []
    depth_exhausted = depth_exhausted or []
    read_errors = read_errors or []
    write_errors = write_errors or []

    return RunResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        regex=cfg["regex"],
        max_depth=cfg["max_depth"],
        extensions=list(cfg["extensions"]),
        dry_run=bool(cfg["dry_run"]),
        written_files=written_files,
        depth_exhausted=depth_exhausted,
        read_errors=read_errors,
        write_errors=write_errors,
        summary={
            "scanned": scanned,
            "written": len(written_files),
            "depth_exhausted": len(depth_exhausted),
            "read_errors": len(read_errors),
            "write_errors": len(write_errors),
        },
    )


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
