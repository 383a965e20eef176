"""Named one-shot timers with replace-on-set semantics."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from flick_schedule.components import Timer

if TYPE_CHECKING:
    from flick import TickContext

logger = logging.getLogger(__name__)


class Timers:
    """At most one pending timer per name.

    Setting a name that is already pending cancels the old timer first,
    so a stale callback can never fire after it has been superseded.
    """

    def __init__(self) -> None:
        self._pending: dict[str, Timer] = {}

    def set(self, name: str, delay_ms: float, callback: Callable[[], None]) -> Timer:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        if name in self._pending:
            logger.debug("timer %r replaced", name)
        timer = Timer(name=name, remaining_ms=delay_ms, callback=callback)
        self._pending[name] = timer
        return timer

    def cancel(self, name: str) -> bool:
        return self._pending.pop(name, None) is not None

    def pending(self, name: str) -> bool:
        return name in self._pending

    def remaining(self, name: str) -> float | None:
        timer = self._pending.get(name)
        return timer.remaining_ms if timer is not None else None

    def __len__(self) -> int:
        return len(self._pending)

    def advance(self, elapsed_ms: float) -> list[str]:
        """Count every timer down by ``elapsed_ms`` and fire the ones that ran out."""
        fired: list[str] = []
        for name, timer in list(self._pending.items()):
            timer.remaining_ms -= elapsed_ms
            if timer.remaining_ms <= 0 and self._pending.get(name) is timer:
                del self._pending[name]
                fired.append(name)
                timer.callback()
        return fired

    def clear(self) -> None:
        self._pending.clear()


def make_timer_system(
    timers: Callable[[Any], Timers] = lambda c: c.timers,
) -> Callable[[Any, "TickContext"], None]:
    """Return a system that advances timers by the wall time between frames.

    Uses frame timestamps rather than dt, so a message shown for two
    seconds stays up for two seconds even when dt is clamped.
    """
    last_now: list[float | None] = [None]

    def timer_system(context: Any, ctx: "TickContext") -> None:
        previous = last_now[0]
        last_now[0] = ctx.now_ms
        if previous is None:
            return
        timers(context).advance(max(0.0, ctx.now_ms - previous))

    return timer_system
