"""
Result - Outcome of a lifecycle hook.

Hooks never raise to the orchestrator; they return a Result that is
falsy on failure and carries the typed error.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from confvault.errors import CleanupError, ConfVaultError, ValidationError

T = TypeVar("T")

RUN = "run"
SESSION = "session"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or typed error."""
    value: Optional[T] = None
    error: Optional[ConfVaultError] = None
    scope: Optional[str] = None  # lifecycle scope a failure belongs to

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ConfVaultError, scope: str) -> "Result[T]":
        return cls(error=error, scope=scope)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def fatal(self) -> Optional[str]:
        """
        Scope a failure aborts: "run", "session", or None.

        Validation errors and cleanup-only failures are never fatal;
        everything else aborts the scope of the hook that raised it.
        """
        if self.ok or isinstance(self.error, (ValidationError, CleanupError)):
            return None
        return self.scope

    @property
    def cleanup_failed(self) -> bool:
        """True when only staging teardown failed after a good store write."""
        return isinstance(self.error, CleanupError)

    @property
    def message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok
