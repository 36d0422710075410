"""Tests for remote-to-local propagation."""

import pytest

from form_sync.remote import RemoteFormState
from form_sync.sync import Synchronizer
from form_sync.validation import ValidationStore


class TestSynchronizer:
    """Tests for Synchronizer."""

    @pytest.mark.parametrize(
        "writes",
        [
            [("email", "a@b.com")],
            [("email", "a"), ("email", "ab"), ("password", "x"), ("remember", True)],
            [("remember", True), ("remember", False), ("password", "p"), ("password", "")],
        ],
    )
    def test_values_mirror_remote(
        self,
        remote: RemoteFormState,
        store: ValidationStore,
        synchronizer: Synchronizer,
        writes: list,
    ) -> None:
        """Test the store's values equal the remote values after any writes."""
        for name, value in writes:
            remote.set_field(name, value)
            assert store.values == remote.values

    def test_errors_fully_replaced(
        self,
        remote: RemoteFormState,
        store: ValidationStore,
        synchronizer: Synchronizer,
    ) -> None:
        """Test a new remote error mapping leaves no residual keys."""
        remote._replace_errors({"email": "Taken", "password": "Weak"})
        assert store.errors == {"email": "Taken", "password": "Weak"}

        remote._replace_errors({"remember": "Nope"})
        assert store.errors == {"remember": "Nope"}

    def test_propagation_precedes_gate(
        self,
        remote: RemoteFormState,
        store: ValidationStore,
        synchronizer: Synchronizer,
    ) -> None:
        """Test a gate right after a write sees the written value."""
        remote.set_field("email", "a@b.com")
        remote.set_field("password", "x")
        assert store.gate().passed

    def test_no_back_propagation(
        self,
        remote: RemoteFormState,
        store: ValidationStore,
        synchronizer: Synchronizer,
    ) -> None:
        """Test writes into the store never reach the remote state."""
        store.set_field_value("email", "local@only.com")
        store.set_errors({"email": "Local"})
        assert remote.values["email"] == ""
        assert remote.errors == {}

    def test_attach_copies_current_state(self, remote: RemoteFormState, store: ValidationStore) -> None:
        """Test attaching late brings the store up to date immediately."""
        remote.set_field("email", "early@b.com")
        remote._replace_errors({"email": "Taken"})

        sync = Synchronizer(remote, store)
        sync.attach()

        assert store.values["email"] == "early@b.com"
        assert store.errors == {"email": "Taken"}
        sync.detach()

    def test_detach_stops_propagation(self, remote: RemoteFormState, store: ValidationStore) -> None:
        """Test a detached synchronizer leaves no observers behind."""
        with Synchronizer(remote, store) as sync:
            assert sync.attached
            assert remote.observer_count == 2

        assert not sync.attached
        assert remote.observer_count == 0
        remote.set_field("email", "after@b.com")
        assert store.values["email"] == ""

    def test_attach_and_detach_idempotent(self, remote: RemoteFormState, store: ValidationStore) -> None:
        """Test repeated attach/detach calls do not stack observers."""
        sync = Synchronizer(remote, store)
        sync.attach()
        sync.attach()
        assert remote.observer_count == 2

        sync.detach()
        sync.detach()
        assert remote.observer_count == 0
