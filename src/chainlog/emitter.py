"""Synchronous publish/subscribe used for logger lifecycle events.
"""
from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

__all__ = ['Event', 'Emitter']


class Event(StrEnum):
    """Events published by the logger."""
    ADD_MODE = 'addMode'
    ADD_LOGGER = 'addLogger'
    LOG = 'log'


class Emitter:
    """Ordered observer registry keyed by event name.

    Listeners run in subscription order on the caller's thread. Nothing is
    isolated: an exception raised by a listener propagates out of ``emit``
    and the remaining listeners are not called.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: Event | str, listener: Callable[..., Any]) -> Emitter:
        """Subscribe ``listener`` to ``event``."""
        self._callbacks.setdefault(str(event), []).append(listener)
        return self

    def once(self, event: Event | str, listener: Callable[..., Any]) -> Emitter:
        """Subscribe ``listener`` for a single delivery."""
        def wrapper(*args: Any) -> Any:
            self.off(event, wrapper)
            return listener(*args)
        wrapper.listener = listener
        return self.on(event, wrapper)

    def off(self, event: Event | str | None = None,
            listener: Callable[..., Any] | None = None) -> Emitter:
        """Remove one listener, all listeners of an event, or everything.
        """
        if event is None:
            self._callbacks.clear()
            return self
        key = str(event)
        if listener is None:
            self._callbacks.pop(key, None)
            return self
        callbacks = self._callbacks.get(key, [])
        for i, cb in enumerate(callbacks):
            if cb is listener or getattr(cb, 'listener', None) is listener:
                del callbacks[i]
                break
        if not callbacks:
            self._callbacks.pop(key, None)
        return self

    def emit(self, event: Event | str, *args: Any) -> Emitter:
        """Call every listener of ``event`` with ``args``."""
        # copy so listeners may subscribe or unsubscribe while running
        for listener in list(self._callbacks.get(str(event), [])):
            listener(*args)
        return self

    def listeners(self, event: Event | str) -> list[Callable[..., Any]]:
        return list(self._callbacks.get(str(event), []))

    def has_listeners(self, event: Event | str) -> bool:
        return bool(self._callbacks.get(str(event)))
