"""UI-facing collaborators: visibility flag and notifiers."""

from form_sync.ui.notifications import ConsoleNotifier, NotificationLog
from form_sync.ui.visibility import VisibilityFlag

__all__ = ["ConsoleNotifier", "NotificationLog", "VisibilityFlag"]
