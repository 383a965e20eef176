"""Status text sink with an auto-reverting transient message."""
from __future__ import annotations

import logging

from flick.bus import STATUS, SignalBus
from flick_schedule import Timers

logger = logging.getLogger(__name__)

STATUS_TIMER = "status-revert"


class StatusLine:
    """The single human-readable status string shown under the canvas.

    ``flash`` shows a message and schedules a revert to the idle text;
    flashing again before the revert fires replaces the pending revert,
    so an older timer can never overwrite a newer message.
    """

    def __init__(self, bus: SignalBus, timers: Timers, idle: str, hold_ms: float = 2000.0) -> None:
        self._bus = bus
        self._timers = timers
        self._idle = idle
        self._hold_ms = hold_ms
        self._text = ""
        self.show_idle()

    @property
    def text(self) -> str:
        return self._text

    @property
    def idle(self) -> str:
        return self._idle

    @property
    def transient(self) -> bool:
        return self._timers.pending(STATUS_TIMER)

    def _set(self, text: str) -> None:
        if text != self._text:
            logger.debug("status: %s", text)
        self._text = text
        self._bus.publish(STATUS, text=text)

    def show(self, text: str) -> None:
        """Show ``text`` until something else replaces it."""
        self._timers.cancel(STATUS_TIMER)
        self._set(text)

    def show_idle(self) -> None:
        self.show(self._idle)

    def flash(self, text: str, hold_ms: float | None = None) -> None:
        """Show ``text`` and revert to the idle text after ``hold_ms``."""
        self._set(text)
        self._timers.set(
            STATUS_TIMER,
            self._hold_ms if hold_ms is None else hold_ms,
            self.show_idle,
        )
