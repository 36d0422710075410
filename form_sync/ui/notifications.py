"""Notifier implementations."""

from rich.console import Console
from rich.markup import escape

from form_sync.core.models import Notification, NotificationLevel


class NotificationLog:
    """Records every notification in order."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, level: NotificationLevel, title: str, description: str) -> None:
        self.notifications.append(Notification(level=level, title=title, description=description))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def clear(self) -> None:
        self.notifications.clear()


class ConsoleNotifier:
    """Prints notifications to a rich console."""

    STYLES = {
        NotificationLevel.SUCCESS: "green",
        NotificationLevel.ERROR: "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def notify(self, level: NotificationLevel, title: str, description: str) -> None:
        style = self.STYLES.get(level, "white")
        self.console.print(f"[{style}]{escape(title)}[/{style}] {escape(description)}")
