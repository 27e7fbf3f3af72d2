from __future__ import annotations

"""
Domain Exception Hierarchy.

Only fatal conditions are raised as exceptions. Recoverable per-file
problems are logged and collected as FileError records instead.
"""


class RiftError(Exception):
    """Base class for all errors raised by the inclusion tool."""


class ConfigurationError(RiftError):
    """Raised when the run configuration cannot be used (bad regex, missing output path...)."""


class InvalidPath(RiftError):
    """
    Raised when a directory hierarchy cannot be created because a path's
    parent resolves to the path itself before an existing ancestor is found.
    """

    def __init__(self, path: str):
        super().__init__(f"Invalid path, reached filesystem root unexpectedly: {path}")
        self.path = path
