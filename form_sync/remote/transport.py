"""Transport implementations.

The concrete network protocol is the caller's concern. These transports
cover scripted replay (CLI sessions, tests) and adapting a plain coroutine
function.
"""

import asyncio
from collections import deque
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from pydantic import BaseModel, Field

from form_sync.core.errors import TransportError
from form_sync.core.fields import FieldValue
from form_sync.core.models import TransportResponse


class TransportCall(BaseModel):
    """A single recorded call to a transport."""

    endpoint: str
    values: dict[str, FieldValue]
    options: dict[str, Any] = Field(default_factory=dict)


class ScriptedTransport:
    """Replays a fixed queue of responses, one per call.

    Each scripted entry is either a TransportResponse or an exception to
    raise. Calls are recorded so callers can inspect what was sent.
    """

    def __init__(
        self,
        responses: Iterable[TransportResponse | Exception] = (),
        delay: float = 0.0,
    ) -> None:
        self._responses: deque[TransportResponse | Exception] = deque(responses)
        self.delay = delay
        self.calls: list[TransportCall] = []

    def enqueue(self, response: TransportResponse | Exception) -> None:
        self._responses.append(response)

    @property
    def pending(self) -> int:
        """Number of scripted responses not yet consumed."""
        return len(self._responses)

    async def send(
        self,
        endpoint: str,
        values: dict[str, FieldValue],
        options: dict[str, Any],
    ) -> TransportResponse:
        self.calls.append(TransportCall(endpoint=endpoint, values=values, options=options))
        if self.delay:
            await asyncio.sleep(self.delay)

        if not self._responses:
            raise TransportError(f"No scripted response left for {endpoint}")
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "ScriptedTransport":
        """Build a transport from plain dict records.

        Record forms:
            {"ok": true}
            {"ok": false, "errors": {"password": "Invalid credentials"}}
            {"transport_error": "Connection refused", "errors": {...}}
        """
        responses: list[TransportResponse | Exception] = []
        for record in records:
            if "transport_error" in record:
                responses.append(
                    TransportError(record["transport_error"], errors=record.get("errors"))
                )
            else:
                responses.append(TransportResponse.model_validate(record))
        return cls(responses)


class CallableTransport:
    """Adapts a coroutine function to the Transport protocol."""

    def __init__(
        self,
        func: Callable[[str, dict[str, FieldValue], dict[str, Any]], Awaitable[TransportResponse]],
    ) -> None:
        self.func = func

    async def send(
        self,
        endpoint: str,
        values: dict[str, FieldValue],
        options: dict[str, Any],
    ) -> TransportResponse:
        return await self.func(endpoint, values, options)
