"""
Custom exception hierarchy for the directory cleaner.

Filesystem failures (unreadable directories, failed deletions) are left as
plain ``OSError`` so callers see the operating system's own description.
"""
from . import config


class DirCleanerError(Exception):
    """Base exception for all directory cleaner errors."""
    pass


class MissingArgumentError(DirCleanerError):
    """Raised when no root directory was supplied on the command line."""

    def __init__(self, message: str = config.USAGE):
        super().__init__(message)


class InvalidInputError(DirCleanerError):
    """Raised when a deletion answer is not an entry number."""
    pass
