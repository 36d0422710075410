"""Remote submission state and transports."""

from form_sync.remote.state import RemoteFormState
from form_sync.remote.transport import CallableTransport, ScriptedTransport, TransportCall

__all__ = [
    "CallableTransport",
    "RemoteFormState",
    "ScriptedTransport",
    "TransportCall",
]
