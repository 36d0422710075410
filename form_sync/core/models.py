"""Core models shared by the form state, transports and orchestrator."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from form_sync.core.fields import FieldValue


class ErrorKind(str, Enum):
    """Where an error originated."""

    LOCAL_VALIDATION = "local_validation"  # Schema gate, never reaches the network
    REMOTE_REJECTION = "remote_rejection"  # Server rejected the submitted values
    TRANSPORT = "transport"  # Network or transport failure


class NotificationLevel(str, Enum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    ERROR = "error"


class Success(BaseModel):
    """The submission was accepted."""

    outcome: Literal["success"] = "success"

    model_config = ConfigDict(frozen=True)


class Failure(BaseModel):
    """The submission was rejected or could not be delivered."""

    outcome: Literal["failure"] = "failure"
    errors: dict[str, str] = Field(default_factory=dict)
    kind: ErrorKind = ErrorKind.REMOTE_REJECTION

    model_config = ConfigDict(frozen=True)


class Finished(BaseModel):
    """Always emitted after Success or Failure."""

    outcome: Literal["finished"] = "finished"

    model_config = ConfigDict(frozen=True)


SubmissionOutcome = Annotated[Success | Failure | Finished, Field(discriminator="outcome")]


class TransportResponse(BaseModel):
    """What a transport returns for one submission."""

    ok: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def accepted(cls) -> "TransportResponse":
        return cls(ok=True)

    @classmethod
    def rejected(cls, errors: dict[str, str]) -> "TransportResponse":
        return cls(ok=False, errors=errors)


class Notification(BaseModel):
    """A notification emitted to the notifier collaborator."""

    level: NotificationLevel
    title: str
    description: str


class FormSnapshot(BaseModel):
    """Point-in-time copy of a remote form state."""

    values: dict[str, FieldValue]
    errors: dict[str, str]
    processing: bool

    model_config = ConfigDict(frozen=True)
