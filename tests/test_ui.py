"""Tests for the visibility flag and notifiers."""

from io import StringIO

import pytest
from rich.console import Console

from form_sync.core import Notifier, NotificationLevel
from form_sync.ui import ConsoleNotifier, NotificationLog, VisibilityFlag


class TestVisibilityFlag:
    """Tests for VisibilityFlag."""

    def test_every_write_is_reported(self) -> None:
        """Test subscribers see writes even when the value is unchanged."""
        flag = VisibilityFlag(is_open=False)
        seen: list[bool] = []
        flag.subscribe(seen.append)

        flag.close()
        flag.open()
        flag.set(True)

        assert seen == [False, True, True]
        assert flag.is_open is True

    def test_duplicate_subscription_rejected(self) -> None:
        """Test the same observer cannot be registered twice."""
        flag = VisibilityFlag()
        seen: list[bool] = []
        flag.subscribe(seen.append)
        with pytest.raises(ValueError):
            flag.subscribe(seen.append)

    def test_unsubscribe(self) -> None:
        """Test an unsubscribed observer is no longer called."""
        flag = VisibilityFlag()
        seen: list[bool] = []
        flag.subscribe(seen.append)
        flag.unsubscribe(seen.append)
        flag.unsubscribe(seen.append)

        flag.open()

        assert seen == []


class TestNotifiers:
    """Tests for notifier implementations."""

    def test_notification_log(self) -> None:
        """Test notifications are recorded in order."""
        log = NotificationLog()
        assert log.last is None

        log.notify(NotificationLevel.SUCCESS, "Success", "Signed in")
        log.notify(NotificationLevel.ERROR, "Sign in failed", "Invalid credentials")

        assert [n.title for n in log.notifications] == ["Success", "Sign in failed"]
        assert log.last.description == "Invalid credentials"

        log.clear()
        assert log.notifications == []

    def test_console_notifier(self) -> None:
        """Test the console notifier prints title and description."""
        buffer = StringIO()
        notifier = ConsoleNotifier(Console(file=buffer, width=120))

        notifier.notify(NotificationLevel.ERROR, "Sign in failed", "Invalid credentials")

        assert "Sign in failed Invalid credentials" in buffer.getvalue()

    def test_notifiers_satisfy_protocol(self) -> None:
        """Test both notifiers conform to the Notifier protocol."""
        assert isinstance(NotificationLog(), Notifier)
        assert isinstance(ConsoleNotifier(), Notifier)
