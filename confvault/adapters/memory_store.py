"""
Memory Store Adapter - In-memory durable store (testing only).
"""

from typing import Dict, Iterable, List, Optional, Tuple

from confvault.ports.store_port import SecretStorePort


class MemorySecretStore(SecretStorePort):
    """
    In-memory store.

    WARNING: Only for testing. Mappings are lost on restart.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """Initialize with an optional previously committed mapping."""
        self._entries: List[Tuple[str, str]] = list((initial or {}).items())
        self.writes = 0

    @property
    def location(self) -> str:
        return "memory"

    @property
    def entries(self) -> List[Tuple[str, str]]:
        """Committed entries in write order."""
        return list(self._entries)

    def load(self) -> Dict[str, str]:
        return dict(self._entries)

    def replace_all(self, entries: Iterable[Tuple[str, str]]) -> int:
        # Materialize first so a failing iterable leaves the old state
        new_entries = list(entries)
        self._entries = new_entries
        self.writes += 1
        return len(new_entries)
