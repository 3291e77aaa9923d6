"""
Store Port - Interface for the durable identifier -> secret mapping.

Implementations:
- FileSecretStore: Tab-separated file, replaced atomically
- VaultSecretStore: HashiCorp Vault KV v2
- MemorySecretStore: In-memory (testing only)
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Tuple


class SecretStorePort(ABC):
    """Port: Persist the merged mapping as one all-or-nothing write."""

    @abstractmethod
    def load(self) -> Dict[str, str]:
        """
        Load the last committed mapping.

        Returns:
            Identifier -> secret value (empty if nothing was committed yet)

        Raises:
            StorageError: If the store exists but cannot be read
        """
        pass

    @abstractmethod
    def replace_all(self, entries: Iterable[Tuple[str, str]]) -> int:
        """
        Replace the whole store with the given entries.

        Either every entry is committed or the previous state is kept.

        Args:
            entries: (identifier, value) pairs, written in the given order

        Returns:
            Number of entries written

        Raises:
            StorageError: If the store cannot be written
        """
        pass

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the store (for logs and reports)."""
        pass
