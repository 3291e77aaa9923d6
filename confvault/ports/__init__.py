"""
Ports - Interfaces for staging and durable storage.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from confvault.ports.staging_port import StagingPort
from confvault.ports.store_port import SecretStorePort

__all__ = [
    "StagingPort",
    "SecretStorePort",
]
