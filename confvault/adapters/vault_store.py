"""
HashiCorp Vault Store Adapter - Durable store kept in Vault KV v2.

The whole mapping is written as a single secret version, so a merge is
committed all at once and earlier versions stay recoverable in Vault.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from confvault.ports.store_port import SecretStorePort
from confvault.errors import StorageError

logger = logging.getLogger(__name__)


class VaultSecretStore(SecretStorePort):
    """
    Vault-backed durable store.

    Uses KV Secrets Engine v2; one secret holds identifier -> value.
    Requires: pip install hvac
    """

    def __init__(
        self,
        url: str = "http://localhost:8200",
        token: Optional[str] = None,
        mount_point: str = "secret",
        path: str = "confvault/store",
        client=None,
    ):
        """
        Initialize Vault store.

        Args:
            url: Vault server URL
            token: Vault token (or use VAULT_TOKEN env var)
            mount_point: KV mount point (default: secret)
            path: Secret path holding the mapping
            client: Pre-built hvac.Client (overrides url/token)
        """
        try:
            import hvac
        except ImportError:
            raise ImportError("hvac package required: pip install hvac")

        self._mount_point = mount_point
        self._path = path

        if client is None:
            client = hvac.Client(url=url, token=token)
            if not client.is_authenticated():
                raise StorageError("Vault authentication failed")

        self._client = client

    @property
    def location(self) -> str:
        return f"vault:{self._mount_point}/{self._path}"

    def load(self) -> Dict[str, str]:
        """Read the latest mapping version."""
        from hvac.exceptions import InvalidPath, VaultError

        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=self._path,
                mount_point=self._mount_point,
                raise_on_deleted_version=True,
            )
        except InvalidPath:
            return {}
        except (VaultError, OSError) as e:
            raise StorageError(f"Cannot read store {self.location}: {e}") from e

        return dict(response["data"]["data"])

    def replace_all(self, entries: Iterable[Tuple[str, str]]) -> int:
        """Write the mapping as a new secret version."""
        from hvac.exceptions import VaultError

        secret = dict(entries)
        try:
            self._client.secrets.kv.v2.create_or_update_secret(
                path=self._path,
                secret=secret,
                mount_point=self._mount_point,
            )
        except (VaultError, OSError) as e:
            raise StorageError(f"Cannot write store {self.location}: {e}") from e

        logger.info("Store %s replaced with %d entries", self.location, len(secret))
        return len(secret)
