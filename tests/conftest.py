"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from form_sync.core import LOGIN_FIELDS, FieldSet
from form_sync.form import FormSession, create_login_session
from form_sync.remote import RemoteFormState, ScriptedTransport
from form_sync.sync import Synchronizer
from form_sync.ui import NotificationLog, VisibilityFlag
from form_sync.validation import ValidationStore, login_schema


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fields() -> FieldSet:
    """The email/password/remember field set."""
    return LOGIN_FIELDS


@pytest.fixture
def transport() -> ScriptedTransport:
    """A transport with no scripted responses; tests enqueue their own."""
    return ScriptedTransport()


@pytest.fixture
def notifier() -> NotificationLog:
    """A notifier that records notifications."""
    return NotificationLog()


@pytest.fixture
def visibility() -> VisibilityFlag:
    """An open visibility flag."""
    return VisibilityFlag(is_open=True)


@pytest.fixture
def remote(fields: FieldSet, transport: ScriptedTransport) -> RemoteFormState:
    """A remote form state at defaults."""
    return RemoteFormState(fields, transport)


@pytest.fixture
def store(fields: FieldSet, remote: RemoteFormState) -> ValidationStore:
    """A validation store bound to the remote state's initial snapshot."""
    return ValidationStore(fields, login_schema(), values=remote.values)


@pytest.fixture
def synchronizer(remote: RemoteFormState, store: ValidationStore):
    """An attached synchronizer, detached after the test."""
    with Synchronizer(remote, store) as sync:
        yield sync


@pytest.fixture
def session(
    transport: ScriptedTransport,
    notifier: NotificationLog,
    visibility: VisibilityFlag,
):
    """A mounted login form session, unmounted after the test."""
    with create_login_session(transport, notifier, visibility) as form:
        yield form


@pytest.fixture
def filled_session(session: FormSession) -> FormSession:
    """A mounted session holding values that pass the local schema."""
    session.set_field("email", "a@b.com")
    session.set_field("password", "x")
    return session
