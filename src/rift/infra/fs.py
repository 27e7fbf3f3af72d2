from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, containment checks and directory creation
utilities shared by the enumeration and writing stages.
"""

import os
from typing import List, Optional

from rift.domain.errors import InvalidPath

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_slash_path(rel_path: str) -> str:
    """Convert an OS-specific relative path into the slash-separated form used as store key."""
    return rel_path.replace(os.sep, "/")


def is_subpath(child: str, parent: str) -> bool:
    """
    Check whether ``child`` is ``parent`` itself or lies below it.

    Both paths are compared in their absolute, normalized form.
    """
    child_abs = os.path.normcase(os.path.abspath(child))
    parent_abs = os.path.normcase(os.path.abspath(parent))
    try:
        return os.path.commonpath([child_abs, parent_abs]) == parent_abs
    except ValueError:
        # Different drives on Windows
        return False


# -----------------------------------------------------------------------------
# DIRECTORY CREATION API
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> List[str]:
    """
    Create a directory and every missing ancestor.

    Walks up from ``path`` collecting directories that do not exist yet,
    then creates them top-down.

    Args:
        path: Target directory path.

    Returns:
        List[str]: The directories that were created, outermost first.

    Raises:
        InvalidPath: If a parent resolves to itself before an existing
                     ancestor is found.
        OSError: If a directory cannot be created.
    """
    current = os.path.abspath(path)
    missing: List[str] = []

    while not os.path.exists(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            raise InvalidPath(path)
        current = parent

    created: List[str] = []
    for directory in reversed(missing):
        os.mkdir(directory)
        created.append(directory)
    return created
