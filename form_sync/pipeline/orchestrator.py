"""Submission orchestrator.

Runs one submission attempt end to end: gate locally, submit through the
remote form state, then apply the side effects of the outcome (visibility,
notifications, field resets).
"""

import logging
from collections.abc import Callable
from enum import Enum

from form_sync.config import FormConfig
from form_sync.core.models import (
    Failure,
    Finished,
    Notification,
    NotificationLevel,
    SubmissionOutcome,
    Success,
)
from form_sync.core.protocols import Notifier
from form_sync.diagnostics import AttemptCollector, AttemptLog, AttemptRecord
from form_sync.remote.state import RemoteFormState
from form_sync.ui.visibility import VisibilityFlag
from form_sync.validation.store import ValidationStore

logger = logging.getLogger(__name__)


class SubmissionPhase(str, Enum):
    """Where the orchestrator is within an attempt."""

    IDLE = "idle"
    GATING = "gating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"  # Applying success side effects
    FAILED = "failed"  # Applying failure side effects
    FINISHED = "finished"


class SubmissionOrchestrator:
    """Entry point for user submits.

    Owns its RemoteFormState exclusively and listens to the shared
    visibility flag: closing the form clears the server errors, and with
    them the store's local gate errors, so that reopening it never shows
    errors from an earlier attempt.
    """

    def __init__(
        self,
        remote: RemoteFormState,
        store: ValidationStore,
        notifier: Notifier,
        visibility: VisibilityFlag,
        config: FormConfig | None = None,
        on_finish: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            remote: Authoritative form state. Claimed for this orchestrator.
            store: Validation store fed by a Synchronizer from remote.
            notifier: Receives success and failure notifications.
            visibility: Shared flag; read to know if the form is open,
                written to close it on success.
            config: Endpoint, field roles and message texts.
            on_finish: Called after every delivered submission, success or
                failure. Not called when the local gate blocks an attempt.

        Raises:
            FormStateInUseError: If remote is already owned.
            UnknownFieldError: If the configured sensitive field is not a
                field of the form.
        """
        self.config = config if config is not None else FormConfig()
        # Raises UnknownFieldError before anything is claimed or subscribed
        remote.fields.get(self.config.sensitive_field)

        self.remote = remote
        self.store = store
        self.notifier = notifier
        self.visibility = visibility
        self.on_finish = on_finish

        self.phase = SubmissionPhase.IDLE
        self.attempts = AttemptLog()

        remote.claim(self)
        visibility.subscribe(self._on_visibility)
        self._closed = False

    @property
    def is_open(self) -> bool:
        return self.visibility.is_open

    async def submit(self) -> AttemptRecord:
        """Handle one user submit.

        Returns:
            The diagnostics record of the attempt.
        """
        collector = self.attempts.start(self.config.endpoint)

        if self.remote.processing:
            logger.debug("Attempt %d dropped: submission already in flight", collector.attempt)
            collector.duplicate()
            return self._record(collector)

        self._enter(SubmissionPhase.GATING)
        gate = self.store.gate()
        if gate.blocked:
            logger.info("Attempt %d blocked by local validation", collector.attempt)
            collector.blocked(gate.errors)
            self._enter(SubmissionPhase.IDLE)
            return self._record(collector)

        self._enter(SubmissionPhase.SUBMITTING)
        try:
            outcome = await self.remote.submit(
                self.config.endpoint,
                self.config.submit_options,
                listener=lambda signal: self._handle(signal, collector),
            )
        finally:
            self._enter(SubmissionPhase.IDLE)

        if outcome is None:
            collector.duplicate()
        return self._record(collector)

    def close(self) -> None:
        """Stop listening to the visibility flag and release the form state."""
        if self._closed:
            return
        self.visibility.unsubscribe(self._on_visibility)
        self.remote.release(self)
        self._closed = True

    # ------------------------------------------------------------------
    def _handle(self, signal: SubmissionOutcome, collector: AttemptCollector) -> None:
        if isinstance(signal, Success):
            self._enter(SubmissionPhase.SUCCEEDED)
            self._on_success(collector)
        elif isinstance(signal, Failure):
            self._enter(SubmissionPhase.FAILED)
            self._on_failure(signal, collector)
        elif isinstance(signal, Finished):
            self._enter(SubmissionPhase.FINISHED)
            collector.finished()
            if self.on_finish is not None:
                self.on_finish()

    def _on_success(self, collector: AttemptCollector) -> None:
        logger.info("Attempt %d succeeded", collector.attempt)
        collector.succeeded()
        self.visibility.close()
        self._notify(
            collector,
            NotificationLevel.SUCCESS,
            self.config.success_title,
            self.config.success_message,
        )
        if self.config.reset_on_success:
            self.remote.reset()

    def _on_failure(self, outcome: Failure, collector: AttemptCollector) -> None:
        logger.info(
            "Attempt %d failed (%s): %s",
            collector.attempt,
            outcome.kind.value,
            sorted(outcome.errors),
        )
        collector.failed(outcome)
        self.remote.reset(self.config.sensitive_field)
        self._notify(
            collector,
            NotificationLevel.ERROR,
            self.config.failure_title,
            self.failure_message(outcome.errors),
        )

    def failure_message(self, errors: dict[str, str]) -> str:
        """Pick the text of the failure notification.

        The identifier field's error wins, then the sensitive field's, then
        the configured fallback.
        """
        for field in (self.config.identifier_field, self.config.sensitive_field):
            message = errors.get(field)
            if message:
                return message
        return self.config.failure_fallback

    def _notify(
        self,
        collector: AttemptCollector,
        level: NotificationLevel,
        title: str,
        description: str,
    ) -> None:
        self.notifier.notify(level, title, description)
        collector.notified(Notification(level=level, title=title, description=description))

    def _on_visibility(self, is_open: bool) -> None:
        if not is_open:
            self.remote.clear_errors()

    def _enter(self, phase: SubmissionPhase) -> None:
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _record(self, collector: AttemptCollector) -> AttemptRecord:
        record = collector.finalize()
        self.attempts.add(record)
        return record
