"""
Adapters - Implementations of ports.

Staging:
- FilesystemStagingArea: Local per-run staging directory

Durable Store:
- FileSecretStore: Tab-separated file, atomically replaced
- VaultSecretStore: HashiCorp Vault KV v2
- MemorySecretStore: In-memory store (testing)
"""

# Staging
from confvault.adapters.filesystem_staging import FilesystemStagingArea

# Durable Store
from confvault.adapters.file_store import FileSecretStore
from confvault.adapters.vault_store import VaultSecretStore
from confvault.adapters.memory_store import MemorySecretStore

__all__ = [
    # Staging
    "FilesystemStagingArea",
    # Durable Store
    "FileSecretStore",
    "VaultSecretStore",
    "MemorySecretStore",
]
