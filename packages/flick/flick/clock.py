"""Frame clock: converts refresh timestamps into a clamped dt."""

import time

from flick.types import NOMINAL_FRAME_MS


class MonotonicClock:
    """Millisecond wall clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class VirtualClock:
    """Manually advanced millisecond clock for headless, deterministic runs."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("cannot advance a clock backwards")
        self._now += ms
        return self._now

    def set(self, now_ms: float) -> None:
        self._now = now_ms


class FrameClock:
    """Tracks the last frame timestamp and hands out dt in 60 Hz tick units.

    A dt of 1.0 means exactly one nominal frame elapsed. Long gaps (tab
    resume, debugger pause) are clamped to ``max_dt`` so one frame never
    applies several ticks worth of physics.
    """

    def __init__(self, max_dt: float = 2.0) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._last_ms: float | None = None
        self._tick_number = 0
        self._elapsed_ms = 0.0

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def advance(self, now_ms: float) -> float:
        """Record a frame at ``now_ms`` and return its dt."""
        if self._last_ms is None:
            dt = 1.0
            delta = NOMINAL_FRAME_MS
        else:
            delta = max(0.0, now_ms - self._last_ms)
            dt = min(delta / NOMINAL_FRAME_MS, self._max_dt)
        self._last_ms = now_ms
        self._tick_number += 1
        self._elapsed_ms += delta
        return dt

    def resume(self) -> None:
        """Forget the last timestamp so the next frame counts as a fresh start."""
        self._last_ms = None

    def reset(self) -> None:
        self._last_ms = None
        self._tick_number = 0
        self._elapsed_ms = 0.0
