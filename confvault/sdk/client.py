"""
Vault Client - High-level SDK over the run controller.

Simplifies the capture workflow for Python orchestrators that prefer
exceptions to Result values.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from confvault.config import VaultSettings
from confvault.sdk.controller import RunController
from confvault.sdk.merger import MergeReport
from confvault.errors import RunAbortedError

logger = logging.getLogger(__name__)

REDACTION_TOKEN = "<secret hidden:{identifier}>"


class VaultClient:
    """
    High-level capture client.

    Example:
        from confvault import VaultClient, VaultSettings

        client = VaultClient.from_settings(VaultSettings())
        client.start_run()

        with client.capture():
            line = client.redact(line, secret)

        report = client.finish_run()
    """

    def __init__(self, controller: RunController, token_format: str = REDACTION_TOKEN):
        """
        Initialize client.

        Args:
            controller: Run controller (required)
            token_format: Format for redaction tokens, with an {identifier} field
        """
        self._controller = controller
        self._token_format = token_format

    @classmethod
    def from_settings(cls, settings: VaultSettings) -> "VaultClient":
        return cls(RunController.from_settings(settings))

    @property
    def controller(self) -> RunController:
        return self._controller

    def start_run(self) -> None:
        """
        Prepare the staging area.

        Raises:
            RunAbortedError: If the staging area cannot be prepared
        """
        result = self._controller.on_run_start()
        if not result:
            raise RunAbortedError(result.message) from result.error

    @contextmanager
    def capture(self) -> Iterator[RunController]:
        """
        Open a capture session for one device pass.

        The session is always ended, also when the body raises.

        Raises:
            StorageError: If the session cannot be started or ended
        """
        self._controller.on_session_start().unwrap()
        try:
            yield self._controller
        finally:
            result = self._controller.on_session_end()
        result.unwrap()

    def protect(self, secret: str) -> str:
        """
        Capture a secret in the current session.

        Args:
            secret: Secret as found in the configuration

        Returns:
            Identifier of the secret

        Raises:
            ValidationError: If the secret is empty
            StorageError: If no session is open or the write fails
        """
        return self._controller.on_save(secret).unwrap()

    def redact(self, line: str, secret: str) -> str:
        """
        Capture a secret and replace it in a configuration line.

        Args:
            line: Configuration line containing the secret
            secret: Secret to hide

        Returns:
            Line with every occurrence of secret replaced by a redaction token
        """
        identifier = self.protect(secret)
        return line.replace(secret, self._token_format.format(identifier=identifier))

    def finish_run(self) -> Optional[MergeReport]:
        """
        Commit all captures to the durable store.

        A failed staging cleanup after a good store write is only logged.

        Returns:
            Merge report

        Raises:
            RunAbortedError: If the merge failed
        """
        result = self._controller.on_run_end()
        if result:
            return result.value
        if result.cleanup_failed:
            logger.warning("Secrets committed, staging area left behind: %s", result.message)
            return result.error.report
        raise RunAbortedError(result.message) from result.error
