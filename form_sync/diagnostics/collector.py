"""Collector for submission attempt diagnostics.

Collects the gate result, the outcome signals and the notifications of a
single attempt and produces an AttemptRecord. AttemptLog keeps the records
of every attempt made by one form.
"""

from collections import Counter

from form_sync.core.models import ErrorKind, Failure, Notification
from form_sync.diagnostics.models import AttemptRecord, AttemptStatus


class AttemptCollector:
    """Collects diagnostics while one attempt is running."""

    def __init__(self, attempt: int, endpoint: str) -> None:
        """Initialize the collector for an attempt.

        Args:
            attempt: 1-based sequence number of the attempt.
            endpoint: Endpoint the attempt targets.
        """
        self.attempt = attempt
        self.endpoint = endpoint

        self._status: AttemptStatus | None = None
        self._error_kind: ErrorKind | None = None
        self._errors: dict[str, str] = {}
        self._notifications: list[Notification] = []
        self._finished = False

    def blocked(self, errors: dict[str, str]) -> None:
        """Record a failed local gate."""
        self._status = AttemptStatus.BLOCKED
        self._error_kind = ErrorKind.LOCAL_VALIDATION
        self._errors = dict(errors)

    def duplicate(self) -> None:
        """Record an attempt dropped because one was already in flight."""
        self._status = AttemptStatus.DUPLICATE

    def succeeded(self) -> None:
        self._status = AttemptStatus.SUCCEEDED

    def failed(self, outcome: Failure) -> None:
        self._status = AttemptStatus.FAILED
        self._error_kind = outcome.kind
        self._errors = dict(outcome.errors)

    def notified(self, notification: Notification) -> None:
        self._notifications.append(notification)

    def finished(self) -> None:
        self._finished = True

    def finalize(self) -> AttemptRecord:
        """Return the complete record for the attempt.

        Raises:
            RuntimeError: If no status was ever recorded.
        """
        if self._status is None:
            raise RuntimeError(f"Attempt {self.attempt} finalized without a status")

        return AttemptRecord(
            attempt=self.attempt,
            endpoint=self.endpoint,
            status=self._status,
            error_kind=self._error_kind,
            errors=self._errors,
            notifications=self._notifications,
            finished=self._finished,
        )


class AttemptLog:
    """Ordered history of attempt records for one form."""

    def __init__(self) -> None:
        self._records: list[AttemptRecord] = []
        self._started = 0

    def start(self, endpoint: str) -> AttemptCollector:
        """Begin collecting diagnostics for the next attempt."""
        self._started += 1
        return AttemptCollector(attempt=self._started, endpoint=endpoint)

    def add(self, record: AttemptRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> list[AttemptRecord]:
        return list(self._records)

    @property
    def last(self) -> AttemptRecord | None:
        return self._records[-1] if self._records else None

    def summary(self) -> dict[str, int]:
        """Count attempts per status."""
        counts = Counter(record.status.value for record in self._records)
        return {status.value: counts.get(status.value, 0) for status in AttemptStatus}

    def __len__(self) -> int:
        return len(self._records)
