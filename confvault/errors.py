"""
Errors - Failure taxonomy for capture and merge operations.

ValidationError is local to a single save and never aborts a run.
StorageError covers every filesystem failure; how fatal it is depends
on the lifecycle step that raised it.
"""

from typing import Optional


class ConfVaultError(RuntimeError):
    """Base error for confvault."""


class ValidationError(ConfVaultError):
    """Raised when a captured value is rejected (e.g. empty)."""


class StorageError(ConfVaultError):
    """Raised when a staging or store operation fails."""


class SessionStateError(StorageError):
    """Raised when a capture session is used outside its lifecycle."""


class MalformedRecordError(StorageError):
    """Raised by a strict merge when a staging line cannot be parsed."""

    def __init__(self, path, line_number: int):
        super().__init__(f"Malformed staging record in {path} at line {line_number}")
        self.path = path
        self.line_number = line_number


class CleanupError(StorageError):
    """
    Raised when the staging area could not be removed after a merge.

    The durable store was already written when this is raised, so the
    merge result is still available on ``report``.
    """

    def __init__(self, message: str, report: Optional[object] = None):
        super().__init__(message)
        self.report = report


class RunAbortedError(ConfVaultError):
    """Raised by VaultClient when a run-fatal step fails."""
