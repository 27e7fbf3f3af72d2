from __future__ import annotations

"""
Resilient File Reading Component.

Loads whole files into memory for the content store. Undecodable bytes are
carried through as surrogate escapes so that files without directives are
written back byte for byte.
"""

# -----------------------------------------------------------------------------
# READING OPERATIONS
# -----------------------------------------------------------------------------

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def read_text_file(file_path: str) -> str:
    """
    Read the complete content of a text file.

    Newlines are not translated, so the returned string reflects the file
    exactly.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: The file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as f:
        return f.read()
