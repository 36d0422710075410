"""One-directional bridge from the remote form state to the validation store.

Values are forwarded per field, errors as a whole mapping. Nothing flows
back: user edits are written into the remote state and reach the store
through this bridge.
"""

import logging

from form_sync.core.fields import FieldValue
from form_sync.remote.state import RemoteFormState
from form_sync.validation.store import ValidationStore

logger = logging.getLogger(__name__)


class Synchronizer:
    """Observer pair that keeps a ValidationStore in step with a RemoteFormState.

    Use as a context manager, or pair attach() and detach() explicitly, so a
    discarded form never keeps receiving propagation events.
    """

    def __init__(self, remote: RemoteFormState, store: ValidationStore) -> None:
        self.remote = remote
        self.store = store
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """Subscribe to the remote state and copy its current contents."""
        if self._attached:
            return
        self.remote.subscribe_values(self._on_value)
        self.remote.subscribe_errors(self._on_errors)
        self._attached = True

        for name, value in self.remote.values.items():
            self.store.set_field_value(name, value)
        self.store.set_errors(self.remote.errors)

    def detach(self) -> None:
        """Unsubscribe from the remote state."""
        if not self._attached:
            return
        self.remote.unsubscribe_values(self._on_value)
        self.remote.unsubscribe_errors(self._on_errors)
        self._attached = False

    def __enter__(self) -> "Synchronizer":
        self.attach()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    def _on_value(self, name: str, value: FieldValue) -> None:
        logger.debug("Propagating value for %s", name)
        self.store.set_field_value(name, value)

    def _on_errors(self, errors: dict[str, str]) -> None:
        logger.debug("Propagating %d remote error(s)", len(errors))
        self.store.set_errors(errors)
