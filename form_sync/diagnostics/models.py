"""Data models for submission attempt diagnostics.

Tracks what happened on each submission attempt: whether it was gated,
delivered, accepted or rejected, and what the user was shown.
"""

from enum import Enum

from pydantic import BaseModel, Field

from form_sync.core.models import ErrorKind, Notification


class AttemptStatus(str, Enum):
    """Status of a submission attempt."""

    BLOCKED = "blocked"  # Local gate failed, nothing was sent
    SUCCEEDED = "succeeded"  # Transport accepted the submission
    FAILED = "failed"  # Rejected by the server or the transport failed
    DUPLICATE = "duplicate"  # Another submission was already in flight


class AttemptRecord(BaseModel):
    """Diagnostics for one submission attempt."""

    attempt: int
    endpoint: str
    status: AttemptStatus
    error_kind: ErrorKind | None = None
    errors: dict[str, str] = Field(default_factory=dict)
    notifications: list[Notification] = Field(default_factory=list)
    finished: bool = False  # Whether the Finished signal was delivered

    @property
    def submitted(self) -> bool:
        """Whether the attempt reached the transport."""
        return self.status in (AttemptStatus.SUCCEEDED, AttemptStatus.FAILED)
