"""
Domain Models - Identifiers, staging records and capture sessions.

No adapter dependencies. Domain logic only.
"""

from confvault.domain.identifier import identify
from confvault.domain.record import StagingRecord
from confvault.domain.result import Result
from confvault.domain.capture_session import CaptureSession, SessionStatus

__all__ = [
    "identify",
    "StagingRecord",
    "Result",
    "CaptureSession",
    "SessionStatus",
]
