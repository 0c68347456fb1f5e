"""Minimal synchronous value publisher."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Observable(Generic[T]):
    """Holds a value and notifies subscribers on every publish, changed or not."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def publish(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe


__all__ = ["Observable"]
