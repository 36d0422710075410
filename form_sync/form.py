"""Form session assembly.

A FormSession is one mounted instance of a form: a remote state, the
validation store projected from it, the synchronizer between them and the
orchestrator that drives submissions. Unmounting detaches every observer so
a discarded session never receives events.
"""

import logging

from form_sync.config import FormConfig
from form_sync.core.errors import SessionClosedError
from form_sync.core.fields import LOGIN_FIELDS, FieldSet, FieldValue
from form_sync.core.protocols import Notifier, Schema, Transport
from form_sync.diagnostics import AttemptRecord
from form_sync.pipeline.orchestrator import SubmissionOrchestrator
from form_sync.remote.state import RemoteFormState
from form_sync.sync.synchronizer import Synchronizer
from form_sync.ui.visibility import VisibilityFlag
from form_sync.validation.schema import login_schema
from form_sync.validation.store import ValidationStore

logger = logging.getLogger(__name__)


class FormSession:
    """One mounted form instance."""

    def __init__(
        self,
        fields: FieldSet,
        schema: Schema,
        transport: Transport,
        notifier: Notifier,
        visibility: VisibilityFlag,
        config: FormConfig | None = None,
    ) -> None:
        """Mount the form.

        Args:
            fields: Fixed field set of the form.
            schema: Local validation rules.
            transport: Delivers submissions.
            notifier: Receives outcome notifications.
            visibility: Shared visibility flag of the surrounding container.
            config: Orchestrator configuration.
        """
        self.config = config if config is not None else FormConfig()
        self.visibility = visibility

        self.remote = RemoteFormState(fields, transport, timeout=self.config.timeout)
        self.store = ValidationStore(fields, schema, values=self.remote.values)
        self.synchronizer = Synchronizer(self.remote, self.store)
        self.synchronizer.attach()
        self.orchestrator = SubmissionOrchestrator(
            self.remote,
            self.store,
            notifier,
            visibility,
            config=self.config,
        )
        self._mounted = True
        logger.debug("Form session mounted with fields %s", list(fields.names))

    @property
    def mounted(self) -> bool:
        return self._mounted

    def _ensure_mounted(self) -> None:
        if not self._mounted:
            raise SessionClosedError()

    # User events ------------------------------------------------------
    def set_field(self, name: str, value: FieldValue) -> None:
        """Write user input into the authoritative state."""
        self._ensure_mounted()
        self.remote.set_field(name, value)

    async def submit(self) -> AttemptRecord:
        self._ensure_mounted()
        return await self.orchestrator.submit()

    def reset(self, name: str | None = None) -> None:
        self._ensure_mounted()
        self.remote.reset(name)

    def clear_errors(self) -> None:
        self._ensure_mounted()
        self.remote.clear_errors()

    # Lifecycle --------------------------------------------------------
    def unmount(self) -> None:
        """Detach every observer. Safe to call more than once."""
        if not self._mounted:
            return
        self.orchestrator.close()
        self.synchronizer.detach()
        self._mounted = False
        logger.debug("Form session unmounted")

    def __enter__(self) -> "FormSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()


def create_login_session(
    transport: Transport,
    notifier: Notifier,
    visibility: VisibilityFlag,
    config: FormConfig | None = None,
) -> FormSession:
    """Create a session for the email/password/remember login form."""
    return FormSession(
        fields=LOGIN_FIELDS,
        schema=login_schema(),
        transport=transport,
        notifier=notifier,
        visibility=visibility,
        config=config,
    )
