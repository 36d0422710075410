"""Remote form state.

Holds the authoritative field values, the server-reported errors and the
in-flight flag. It is the only state that is ever sent over the network.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from form_sync.core.errors import FormStateInUseError, TransportError
from form_sync.core.fields import FieldSet, FieldValue
from form_sync.core.models import (
    ErrorKind,
    Failure,
    Finished,
    FormSnapshot,
    SubmissionOutcome,
    Success,
)
from form_sync.core.protocols import Transport

logger = logging.getLogger(__name__)

ValueObserver = Callable[[str, FieldValue], None]
ErrorsObserver = Callable[[dict[str, str]], None]
OutcomeListener = Callable[[SubmissionOutcome], None]


class RemoteFormState:
    """Authoritative form values, server errors and submission status.

    Observers registered with subscribe_values() are called once per changed
    field; observers registered with subscribe_errors() receive the whole
    error mapping whenever it changes. Submission outcomes, clear_errors()
    and a full reset() publish the mapping even when it is unchanged.
    Observers always receive copies.
    """

    def __init__(
        self,
        fields: FieldSet,
        transport: Transport,
        timeout: float | None = None,
    ) -> None:
        """Initialize the state with every field at its default.

        Args:
            fields: The fixed field set of this form.
            transport: Collaborator that delivers submissions.
            timeout: Optional limit in seconds for one transport call.
                Expiry is reported as a transport Failure with no field errors.
        """
        self.fields = fields
        self.transport = transport
        self.timeout = timeout

        self._values: dict[str, FieldValue] = fields.defaults()
        self._errors: dict[str, str] = {}
        self._processing = False
        self._owner: object | None = None

        self._value_observers: list[ValueObserver] = []
        self._errors_observers: list[ErrorsObserver] = []

    # ------------------------------------------------------------------
    @property
    def values(self) -> dict[str, FieldValue]:
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def processing(self) -> bool:
        return self._processing

    def snapshot(self) -> FormSnapshot:
        """Return a frozen copy of the current state."""
        return FormSnapshot(values=self.values, errors=self.errors, processing=self._processing)

    # ------------------------------------------------------------------
    def set_field(self, name: str, value: FieldValue) -> None:
        """Write a single field value.

        Raises:
            UnknownFieldError: If the field is not part of the field set.
            InvalidFieldValueError: If the value has the wrong type.
        """
        self.fields.check(name, value)
        if self._values[name] == value:
            return
        self._values[name] = value
        for observer in list(self._value_observers):
            observer(name, value)

    def reset(self, name: str | None = None) -> None:
        """Reset one field to its default, or every field and the errors."""
        if name is not None:
            self.set_field(name, self.fields.get(name).default)
            return

        for spec in self.fields.fields:
            self.set_field(spec.name, spec.default)
        self._replace_errors({}, publish=True)

    def clear_errors(self) -> None:
        """Empty the error mapping. Values and processing are untouched.

        Error observers are notified even when the mapping was already empty.
        """
        self._replace_errors({}, publish=True)

    def _replace_errors(self, errors: dict[str, str], publish: bool = False) -> None:
        if errors == self._errors and not publish:
            return
        self._errors = dict(errors)
        for observer in list(self._errors_observers):
            observer(dict(self._errors))

    # ------------------------------------------------------------------
    async def submit(
        self,
        endpoint: str,
        options: dict[str, Any] | None = None,
        listener: OutcomeListener | None = None,
    ) -> Success | Failure | None:
        """Submit the current values through the transport.

        The listener receives Success or Failure, then always Finished.
        processing is cleared only after Finished has been delivered.

        Args:
            endpoint: Where to submit.
            options: Passed through to the transport.
            listener: Receives the outcome signals of this submission.

        Returns:
            The outcome, or None if a submission was already in flight.
        """
        if self._processing:
            logger.debug("Submit to %s ignored: a submission is already in flight", endpoint)
            return None

        self._processing = True
        try:
            outcome = await self._dispatch(endpoint, dict(options or {}))
            if isinstance(outcome, Success):
                self._replace_errors({}, publish=True)
            else:
                self._replace_errors(outcome.errors, publish=True)
            if listener is not None:
                listener(outcome)
        finally:
            try:
                if listener is not None:
                    listener(Finished())
            finally:
                self._processing = False

        return outcome

    async def _dispatch(self, endpoint: str, options: dict[str, Any]) -> Success | Failure:
        """Run the transport call and map every result onto an outcome."""
        values = dict(self._values)
        try:
            send = self.transport.send(endpoint, values, options)
            if self.timeout is None:
                response = await send
            else:
                response = await asyncio.wait_for(send, self.timeout)
        except TransportError as e:
            logger.warning("Transport failed for %s: %s", endpoint, e)
            return Failure(errors=e.errors, kind=ErrorKind.TRANSPORT)
        except asyncio.TimeoutError:
            logger.warning("Submission to %s timed out after %ss", endpoint, self.timeout)
            return Failure(kind=ErrorKind.TRANSPORT)
        except Exception:
            logger.warning("Transport raised while submitting to %s", endpoint, exc_info=True)
            return Failure(kind=ErrorKind.TRANSPORT)

        if response.ok:
            return Success()
        return Failure(errors=dict(response.errors))

    # ------------------------------------------------------------------
    def subscribe_values(self, callback: ValueObserver) -> None:
        if callback in self._value_observers:
            raise ValueError("Value observer already registered")
        self._value_observers.append(callback)

    def unsubscribe_values(self, callback: ValueObserver) -> None:
        if callback in self._value_observers:
            self._value_observers.remove(callback)

    def subscribe_errors(self, callback: ErrorsObserver) -> None:
        if callback in self._errors_observers:
            raise ValueError("Errors observer already registered")
        self._errors_observers.append(callback)

    def unsubscribe_errors(self, callback: ErrorsObserver) -> None:
        if callback in self._errors_observers:
            self._errors_observers.remove(callback)

    @property
    def observer_count(self) -> int:
        """Number of registered value and error observers."""
        return len(self._value_observers) + len(self._errors_observers)

    # ------------------------------------------------------------------
    def claim(self, owner: object) -> None:
        """Register the single orchestrator allowed to drive this state.

        Raises:
            FormStateInUseError: If another owner already holds it.
        """
        if self._owner is not None and self._owner is not owner:
            raise FormStateInUseError(self._owner)
        self._owner = owner

    def release(self, owner: object) -> None:
        if self._owner is owner:
            self._owner = None
