"""Diagnostics for submission attempts.

Tracks the status, errors and notifications of every attempt a form
makes.
"""

from form_sync.diagnostics.collector import AttemptCollector, AttemptLog
from form_sync.diagnostics.models import AttemptRecord, AttemptStatus

__all__ = [
    "AttemptCollector",
    "AttemptLog",
    "AttemptRecord",
    "AttemptStatus",
]
