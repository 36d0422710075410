"""Collaborator protocols.

Defines the interfaces the form core consumes. Concrete transports,
notifiers and schemas are supplied by the caller.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from form_sync.core.fields import FieldValue
from form_sync.core.models import NotificationLevel, TransportResponse


@runtime_checkable
class Schema(Protocol):
    """Pure, synchronous validation of a complete set of field values."""

    def validate(self, values: Mapping[str, FieldValue]) -> dict[str, str]:
        """Validate all fields together.

        Args:
            values: Current value of every field.

        Returns:
            Mapping of field name to error message (empty if valid).
        """
        ...


@runtime_checkable
class Transport(Protocol):
    """Delivers submitted values to a remote endpoint."""

    async def send(
        self,
        endpoint: str,
        values: dict[str, FieldValue],
        options: dict[str, Any],
    ) -> TransportResponse:
        """Send values and report whether the remote side accepted them.

        Args:
            endpoint: Where to submit (e.g. "/login").
            values: Snapshot of the form values.
            options: Transport-specific options, passed through untouched.

        Returns:
            TransportResponse, with per-field errors when rejected.

        Raises:
            TransportError: For failures that are not validation rejections.
        """
        ...


@runtime_checkable
class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def notify(self, level: NotificationLevel, title: str, description: str) -> None:
        ...
