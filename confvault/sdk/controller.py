"""
Run Controller - Lifecycle hooks called by the archiving orchestrator.

Hook order for one run:

    on_run_start()
    for each device pass:
        on_session_start()
        on_save(secret) ...      # returns the identifier for redaction
        on_session_end()
    on_run_end()

Hooks return a Result instead of raising. Failures in on_run_start and
on_run_end are run-fatal; the others abort only the current device pass.
"""

import logging
from typing import Callable, Optional, TypeVar, Union

from confvault.config import VaultSettings
from confvault.domain.capture_session import CaptureSession
from confvault.domain.result import RUN, SESSION, Result
from confvault.ports.staging_port import StagingPort
from confvault.ports.store_port import SecretStorePort
from confvault.adapters.filesystem_staging import FilesystemStagingArea
from confvault.adapters.file_store import FileSecretStore
from confvault.sdk.merger import MergeReport, StoreMerger
from confvault.errors import ConfVaultError, SessionStateError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RunController:
    """
    Drives staging, capture sessions and the final merge for one run.

    The current capture session is owned by the controller instance, so
    each worker process holds its own; they only share the staging
    directory, where file names never collide.
    """

    def __init__(self, staging: StagingPort, merger: StoreMerger):
        """
        Initialize controller.

        Args:
            staging: Staging area for this run
            merger: Merger that commits the run into the durable store
        """
        self._staging = staging
        self._merger = merger
        self._current: Optional[CaptureSession] = None
        self._last_error: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: VaultSettings, store: Optional[SecretStorePort] = None) -> "RunController":
        """
        Build a controller with filesystem adapters.

        Args:
            settings: Run settings
            store: Durable store override (default: FileSecretStore at settings.store_path)
        """
        staging = FilesystemStagingArea(settings.staging_dir)
        if store is None:
            store = FileSecretStore(settings.store_path, mode=settings.store_mode)
        merger = StoreMerger(
            staging,
            store,
            malformed_records=settings.malformed_records,
            sort_output=settings.sort_output,
            retain_previous=settings.retain_previous,
        )
        return cls(staging, merger)

    @property
    def current_session(self) -> Optional[CaptureSession]:
        return self._current

    def on_run_start(self) -> Result[None]:
        """Prepare a fresh staging area."""
        return self._call(self._staging.initialize, RUN)

    def on_session_start(self) -> Result[None]:
        """Open a capture session and make it current."""
        def start():
            if self._current is not None:
                raise SessionStateError("A capture session is already in progress")
            session = CaptureSession(self._staging)
            session.start()
            self._current = session

        return self._call(start, SESSION)

    def on_save(self, value: Union[str, bytes, None]) -> Result[str]:
        """Record a secret in the current session; the value is its identifier."""
        def save():
            if not value:
                raise ValidationError("empty value")
            return self._require_session().save(value)

        return self._call(save, SESSION)

    def on_session_end(self) -> Result[None]:
        """Close the current session."""
        def end():
            session = self._require_session()
            # A failed close still ends the pass; the next device starts clean
            self._current = None
            session.end()

        return self._call(end, SESSION)

    def on_run_end(self) -> Result[MergeReport]:
        """Merge every staged capture into the durable store."""
        if self._current is not None:
            logger.warning("Run ending with capture session %s still open", self._current.path)
        return self._call(self._merger.merge, RUN)

    def last_error(self) -> Optional[str]:
        """
        Return the last error message and clear it.

        Returns:
            Error text, or None if nothing failed since the last call
        """
        error, self._last_error = self._last_error, None
        return error

    def _require_session(self) -> CaptureSession:
        if self._current is None:
            raise SessionStateError("No capture session in progress")
        return self._current

    def _call(self, operation: Callable[[], T], scope: str) -> Result[T]:
        try:
            value = operation()
        except ConfVaultError as e:
            self._last_error = str(e)
            if isinstance(e, ValidationError):
                logger.warning("Rejected value: %s", e)
            else:
                logger.error("%s step failed: %s", scope.capitalize(), e)
            return Result.failure(e, scope)
        return Result.success(value)
