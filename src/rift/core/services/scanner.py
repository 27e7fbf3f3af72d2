from __future__ import annotations

"""
File Discovery and Content Store Service.

Traverses the scan root, applies the extension allow-list and loads every
eligible file into the immutable content store consumed by the resolver.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from rift.core.pipeline.components.reader import read_text_file
from rift.domain.models import ContentStore, FileError, SourceFile
from rift.infra.fs import is_subpath, to_slash_path

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def normalize_extensions(values: Optional[Iterable[str]]) -> List[str]:
    """
    Clean an extension allow-list.

    Strips whitespace and a leading dot, drops empty items and duplicates
    while keeping the first-seen order.

    Args:
        values: Raw extensions, e.g. ``["md", ".txt", " html "]``.

    Returns:
        List[str]: Extensions without dot.
    """
    out: List[str] = []
    for value in values or []:
        ext = value.strip()
        if ext.startswith("."):
            ext = ext[1:]
        if ext and ext not in out:
            out.append(ext)
    return out


def get_extension(file_name: str) -> str:
    """Return the text after the last dot of a file name, without the dot."""
    _, ext = os.path.splitext(file_name)
    return ext[1:]


def is_suitable_file(file_path: str, extensions: Sequence[str]) -> bool:
    """
    Decide whether a path takes part in the run.

    Only regular files qualify. An empty allow-list accepts every file.
    """
    if not os.path.isfile(file_path):
        return False
    if not extensions:
        return True
    return get_extension(os.path.basename(file_path)) in extensions


def yield_source_files(
        scan_root: str,
        extensions: Sequence[str],
        exclude_dirs: Sequence[str] = (),
) -> Iterator[Tuple[str, str]]:
    """
    Walk the scan root and yield every eligible file.

    Directories are visited in sorted order; directory symlinks are not
    followed. Directories listed in ``exclude_dirs`` (typically the output
    root when it lies inside the scan root) are pruned.

    Args:
        scan_root: Absolute path of the directory to enumerate.
        extensions: Allow-list of extensions without dot.
        exclude_dirs: Absolute directories to skip entirely.

    Yields:
        Tuple[str, str]: (Absolute file path, slash-normalized relative path).
    """
    root_abs = os.path.abspath(scan_root)
    excluded = [os.path.abspath(d) for d in exclude_dirs]

    for root, dirs, files in os.walk(root_abs):
        dirs[:] = sorted(
            d for d in dirs
            if not any(is_subpath(os.path.join(root, d), ex) for ex in excluded)
        )
        files.sort()

        for file_name in files:
            file_path = os.path.join(root, file_name)
            if not is_suitable_file(file_path, extensions):
                continue
            rel_path = to_slash_path(os.path.relpath(file_path, root_abs))
            yield file_path, rel_path


def build_content_store(
        scan_root: str,
        extensions: Sequence[str],
        exclude_dirs: Sequence[str] = (),
) -> Tuple[ContentStore, List[FileError]]:
    """
    Enumerate the scan root and load every eligible file into a content store.

    Files that cannot be read are reported and left out of the store.

    Args:
        scan_root: Absolute path of the directory to enumerate.
        extensions: Allow-list of extensions without dot (empty = all files).
        exclude_dirs: Absolute directories to skip entirely.

    Returns:
        Tuple[ContentStore, List[FileError]]: (Snapshot of the inputs, Read failures).
    """
    sources: List[SourceFile] = []
    errors: List[FileError] = []

    for file_path, rel_path in yield_source_files(scan_root, extensions, exclude_dirs):
        try:
            content = read_text_file(file_path)
        except OSError as e:
            logger.error(f"Couldn't open {file_path} for reading: {e}")
            errors.append(FileError(rel_path=rel_path, error=str(e)))
            continue
        sources.append(SourceFile(rel_path=rel_path, content=content))

    store = ContentStore(sources)
    logger.debug(f"Content store built with {len(store)} files ({len(errors)} unreadable)")
    return store, errors
