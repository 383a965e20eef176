"""Signal bus feeding the status and score sinks.

Signals are queued during a frame and delivered on ``flush`` (the last
system of every frame). The most recent payload of each signal is
retained so a late subscriber, or an overlay drawn mid-frame, can read
the current status text or score without waiting for the next publish.
"""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

STATUS = "status"
SCORE = "score"
STATE = "state"


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []
        self._latest: dict[str, dict[str, Any]] = {}

    def subscribe(self, signal_name: str, handler: _Handler, replay: bool = False) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)
        if replay and signal_name in self._latest:
            handler(signal_name, self._latest[signal_name])

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is not None and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._latest[signal_name] = data
        self._queue.append((signal_name, data))

    def latest(self, signal_name: str) -> dict[str, Any] | None:
        return self._latest.get(signal_name)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)

    def make_flush_system(self) -> Callable[[Any, Any], None]:
        """Return a system that delivers everything published this frame."""

        def flush_system(context: Any, ctx: Any) -> None:
            self.flush()

        return flush_system
