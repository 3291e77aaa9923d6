"""
Capture Session Domain Model - One device's secret-extraction pass.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import IO, Optional, Union

from confvault.domain.identifier import identify
from confvault.domain.record import StagingRecord
from confvault.errors import SessionStateError, StorageError, ValidationError

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Capture session lifecycle states."""
    IDLE = "idle"
    OPEN = "open"
    CLOSED = "closed"


class CaptureSession:
    """
    Capture session - appends identifier/value records to its own staging file.

    Domain rules:
    - IDLE -> OPEN -> CLOSED, never backwards
    - one staging file per session, never shared
    - no deduplication inside a session; the merge resolves duplicates
    """

    def __init__(self, staging):
        """
        Initialize an idle session.

        Args:
            staging: StagingPort that allocates the session's file
        """
        self._staging = staging
        self._handle: Optional[IO[str]] = None
        self.path: Optional[Path] = None
        self.status = SessionStatus.IDLE
        self.records_written = 0

    @property
    def is_open(self) -> bool:
        return self.status == SessionStatus.OPEN

    def start(self) -> None:
        """
        Allocate a staging file and open it for appending.

        Raises:
            SessionStateError: If the session was already started
            StorageError: If allocation or open fails (session stays IDLE)
        """
        if self.status != SessionStatus.IDLE:
            raise SessionStateError(f"Cannot start a session that is {self.status.value}")

        path = self._staging.new_staging_file()
        try:
            handle = open(path, "a", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot open staging file {path}: {e}") from e

        self.path = path
        self._handle = handle
        self.status = SessionStatus.OPEN
        logger.debug("Capture session opened: %s", path.name)

    def save(self, value: Union[str, bytes, None]) -> str:
        """
        Record a secret and return its identifier.

        Args:
            value: Secret exactly as captured

        Returns:
            Identifier to embed in the redacted line

        Raises:
            ValidationError: If value is empty or contains a line break
            SessionStateError: If the session is not open
            StorageError: If the write fails (session stays OPEN)
        """
        if not value:
            raise ValidationError("empty value")
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValidationError(f"value is not valid UTF-8: {e}") from e
        if not isinstance(value, str):
            raise ValidationError("value must be text")
        if "\n" in value or "\r" in value:
            raise ValidationError("value contains a line break")
        if not self.is_open:
            raise SessionStateError(f"Cannot save to a session that is {self.status.value}")

        record = StagingRecord(identifier=identify(value), value=value)
        try:
            self._handle.write(record.to_line())
            self._handle.flush()
        except OSError as e:
            raise StorageError(f"Cannot write to staging file {self.path}: {e}") from e

        self.records_written += 1
        logger.debug("Captured secret %s in %s", record.identifier, self.path.name)
        return record.identifier

    def end(self) -> None:
        """
        Close the staging file.

        Raises:
            SessionStateError: If the session is not open or has no handle
            StorageError: If closing the file fails
        """
        if self.status != SessionStatus.OPEN or self._handle is None:
            raise SessionStateError(f"Cannot end a session that is {self.status.value}")

        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as e:
            raise StorageError(f"Cannot close staging file {self.path}: {e}") from e
        finally:
            self.status = SessionStatus.CLOSED

        logger.debug("Capture session closed: %s (%d records)", self.path.name, self.records_written)
