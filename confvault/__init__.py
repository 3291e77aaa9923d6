"""
confvault - Secret capture for configuration archives

Replaces credentials in archived device configurations with stable
identifiers, and keeps a deduplicated identifier -> secret mapping in a
separate, restricted store.

Usage:
    from confvault import RunController, VaultSettings

    controller = RunController.from_settings(VaultSettings())
    controller.on_run_start()

    controller.on_session_start()
    identifier = controller.on_save("hunter2").value
    controller.on_session_end()

    controller.on_run_end()
"""

__version__ = "0.1.0"

from confvault.config import VaultSettings
from confvault.domain.identifier import identify
from confvault.domain.result import Result
from confvault.sdk.controller import RunController
from confvault.sdk.client import VaultClient
from confvault.sdk.merger import MergeReport

__all__ = [
    "VaultSettings",
    "identify",
    "Result",
    "RunController",
    "VaultClient",
    "MergeReport",
]
