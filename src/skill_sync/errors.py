"""Exceptions raised while synchronizing the skills directory."""

from typing import Optional


class SyncError(Exception):
    """Base class for all fatal synchronization errors."""


class SourceNotFoundError(SyncError):
    """The skills source directory does not exist."""


class DirectoryCreationError(SyncError):
    """The target directory could not be created."""


class CapabilityUnavailableError(SyncError):
    """The requested mode needs a copy tool that is not installed."""


class SyncToolError(SyncError):
    """The underlying copy mechanism failed mid-copy.

    The message is the tool's own error text, unmodified.
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
