"""
SDK - Run lifecycle, merge and high-level client.
"""

from confvault.sdk.merger import MergeReport, StoreMerger
from confvault.sdk.controller import RunController
from confvault.sdk.client import VaultClient

__all__ = [
    "MergeReport",
    "StoreMerger",
    "RunController",
    "VaultClient",
]
