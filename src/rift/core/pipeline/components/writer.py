from __future__ import annotations

"""
Output Persistence Component.

Writes expanded files under the output root, mirroring the relative path
structure of the scan root. A failure on one file is reported and the
remaining files are still written.
"""

import logging
import os
from typing import List, Tuple

from rift.core.pipeline.components.reader import TEXT_ENCODING, TEXT_ERRORS
from rift.domain.errors import InvalidPath
from rift.domain.models import FileError, OutputSet
from rift.infra.fs import ensure_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_text_file(file_path: str, content: str) -> None:
    """
    Write ``content`` to ``file_path``, creating parent directories as needed.

    Args:
        file_path: Absolute target path.
        content: Text to persist, written without newline translation.

    Raises:
        InvalidPath: If the parent hierarchy cannot be resolved.
        OSError: If filesystem permissions are denied.
    """
    ensure_directory(os.path.dirname(os.path.abspath(file_path)))
    with open(file_path, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as out:
        out.write(content)


def write_output_set(
        output_root: str,
        output_set: OutputSet,
) -> Tuple[List[str], List[FileError]]:
    """
    Persist every expanded file to ``<output_root>/<rel_path>``.

    Args:
        output_root: Absolute root directory for the expanded tree.
        output_set: Expansion results keyed by relative path.

    Returns:
        Tuple[List[str], List[FileError]]: (Written relative paths, Write failures).
    """
    written: List[str] = []
    errors: List[FileError] = []

    for rel_path, result in output_set.items():
        target = os.path.join(output_root, *rel_path.split("/"))
        try:
            write_text_file(target, result.content)
        except (OSError, InvalidPath) as e:
            logger.error(f"Couldn't open {target} for writing: {e}")
            errors.append(FileError(rel_path=rel_path, error=str(e)))
            continue
        written.append(rel_path)
        logger.debug(f"Written: {rel_path}")

    return written, errors
