"""Shared visibility flag.

A boolean that several parties may read and write, such as a modal's
open state. Subscribers are told about every write, including writes that
leave the value unchanged.
"""

from collections.abc import Callable

VisibilityObserver = Callable[[bool], None]


class VisibilityFlag:
    """A boolean shared by handle, with write notifications."""

    def __init__(self, is_open: bool = False) -> None:
        self._is_open = is_open
        self._observers: list[VisibilityObserver] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    def set(self, is_open: bool) -> None:
        self._is_open = is_open
        for observer in list(self._observers):
            observer(is_open)

    def open(self) -> None:
        self.set(True)

    def close(self) -> None:
        self.set(False)

    def subscribe(self, callback: VisibilityObserver) -> None:
        if callback in self._observers:
            raise ValueError("Visibility observer already registered")
        self._observers.append(callback)

    def unsubscribe(self, callback: VisibilityObserver) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    @property
    def observer_count(self) -> int:
        return len(self._observers)
