"""Exceptions raised by form-sync.

Expected submission outcomes (a blocked gate, a server rejection, a
transport failure) are returned as values. The exceptions here signal
misuse of the form state or a broken collaborator.
"""

from typing import Any


class FormSyncError(Exception):
    """Base class for form-sync errors."""


class UnknownFieldError(FormSyncError, KeyError):
    """Raised when a field name is not part of the form's field set."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        message = f"Unknown field: {name}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidFieldValueError(FormSyncError, TypeError):
    """Raised when a value does not match its field's type."""

    def __init__(self, name: str, value: Any, expected: type) -> None:
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(
            f"Field {name} expects {expected.__name__}, got {type(value).__name__}"
        )


class FormStateInUseError(FormSyncError):
    """Raised when a second orchestrator binds to an owned form state."""

    def __init__(self, owner: object) -> None:
        self.owner = owner
        super().__init__(f"Form state is already owned by {owner!r}")


class SessionClosedError(FormSyncError):
    """Raised when a form session is used after it has been unmounted."""

    def __init__(self) -> None:
        super().__init__("Form session has been unmounted")


class ConfigError(FormSyncError):
    """Raised when a configuration file cannot be loaded or validated."""

    pass


class TransportError(FormSyncError):
    """Raised by transports for failures that are not server validation.

    Transports may attach a field -> message mapping describing the failure;
    it is surfaced to the form exactly like a server rejection.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        self.errors = dict(errors or {})
        super().__init__(message)
