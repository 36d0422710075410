"""Core shared infrastructure for form-sync.

Contains field definitions, outcome models, collaborator protocols and
the exception hierarchy shared by every component.
"""

from form_sync.core.errors import (
    ConfigError,
    FormStateInUseError,
    FormSyncError,
    InvalidFieldValueError,
    SessionClosedError,
    TransportError,
    UnknownFieldError,
)
from form_sync.core.fields import LOGIN_FIELDS, FieldSet, FieldSpec, FieldValue
from form_sync.core.models import (
    ErrorKind,
    Failure,
    Finished,
    FormSnapshot,
    Notification,
    NotificationLevel,
    SubmissionOutcome,
    Success,
    TransportResponse,
)
from form_sync.core.protocols import Notifier, Schema, Transport

__all__ = [
    # Fields
    "FieldSet",
    "FieldSpec",
    "FieldValue",
    "LOGIN_FIELDS",
    # Models
    "ErrorKind",
    "Failure",
    "Finished",
    "FormSnapshot",
    "Notification",
    "NotificationLevel",
    "SubmissionOutcome",
    "Success",
    "TransportResponse",
    # Protocols
    "Notifier",
    "Schema",
    "Transport",
    # Errors
    "ConfigError",
    "FormStateInUseError",
    "FormSyncError",
    "InvalidFieldValueError",
    "SessionClosedError",
    "TransportError",
    "UnknownFieldError",
]
