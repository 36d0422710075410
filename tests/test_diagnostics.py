"""Tests for attempt diagnostics."""

import pytest

from form_sync.core import ErrorKind, Failure, Notification, NotificationLevel
from form_sync.diagnostics import AttemptCollector, AttemptLog, AttemptRecord, AttemptStatus


@pytest.fixture
def collector() -> AttemptCollector:
    """Create an attempt collector for testing."""
    return AttemptCollector(attempt=1, endpoint="/login")


class TestAttemptCollector:
    """Tests for AttemptCollector."""

    def test_blocked_attempt(self, collector: AttemptCollector) -> None:
        """Test a blocked gate is recorded as a local validation error."""
        collector.blocked({"email": "Email is required"})

        record = collector.finalize()

        assert record.status == AttemptStatus.BLOCKED
        assert record.error_kind == ErrorKind.LOCAL_VALIDATION
        assert record.errors == {"email": "Email is required"}
        assert record.submitted is False

    def test_failed_attempt(self, collector: AttemptCollector) -> None:
        """Test a failure keeps its kind, errors and notifications."""
        collector.failed(Failure(errors={"password": "Invalid credentials"}))
        collector.notified(
            Notification(level=NotificationLevel.ERROR, title="Sign in failed", description="Invalid credentials")
        )
        collector.finished()

        record = collector.finalize()

        assert record.status == AttemptStatus.FAILED
        assert record.error_kind == ErrorKind.REMOTE_REJECTION
        assert len(record.notifications) == 1
        assert record.finished is True
        assert record.submitted is True

    def test_finalize_without_status(self, collector: AttemptCollector) -> None:
        """Test finalizing an attempt with no status is an error."""
        with pytest.raises(RuntimeError):
            collector.finalize()


class TestAttemptLog:
    """Tests for AttemptLog."""

    def test_attempt_numbers_are_unique(self) -> None:
        """Test overlapping attempts get distinct numbers."""
        log = AttemptLog()
        first = log.start("/login")
        second = log.start("/login")
        assert (first.attempt, second.attempt) == (1, 2)

    def test_summary_counts_every_status(self) -> None:
        """Test the summary lists every status, including zero counts."""
        log = AttemptLog()
        log.add(AttemptRecord(attempt=1, endpoint="/login", status=AttemptStatus.BLOCKED))
        log.add(AttemptRecord(attempt=2, endpoint="/login", status=AttemptStatus.SUCCEEDED))

        assert log.summary() == {"blocked": 1, "succeeded": 1, "failed": 0, "duplicate": 0}
        assert len(log) == 2
        assert log.last is not None
        assert log.last.attempt == 2
