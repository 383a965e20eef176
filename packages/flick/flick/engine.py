"""Engine - frame loop, dt scaling, pacing, and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Any, Callable, Generic, TypeVar

from flick.clock import FrameClock, MonotonicClock
from flick.types import NOMINAL_FRAME_MS, System, TickContext

logger = logging.getLogger(__name__)

C = TypeVar("C")

Hook = Callable[[Any, TickContext], None]


class Engine(Generic[C]):
    """Drives one simulation+render frame per display refresh.

    The engine owns the simulation context and runs its systems, in
    registration order, once per frame. ``step``/``run`` drive it by hand
    (headless, against whatever timestamps the caller supplies);
    ``run_forever`` paces it against the time source until stopped.
    """

    def __init__(
        self,
        context: C,
        fps: int = 60,
        max_dt: float = 2.0,
        seed: int | None = None,
        clock: Any = None,
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._context = context
        self._fps = fps
        self._frame_clock = FrameClock(max_dt)
        self._clock = clock if clock is not None else MonotonicClock()
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._running: bool = False
        self._last_ctx: TickContext | None = None

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def context(self) -> C:
        return self._context

    @property
    def frame_clock(self) -> FrameClock:
        return self._frame_clock

    @property
    def clock(self) -> Any:
        return self._clock

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def running(self) -> bool:
        return self._running

    @property
    def last_tick(self) -> TickContext | None:
        return self._last_ctx

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _hook_context(self) -> TickContext:
        return TickContext(
            tick_number=self._frame_clock.tick_number,
            dt=0.0,
            now_ms=self._clock.now(),
            elapsed_ms=self._frame_clock.elapsed_ms,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _tick(self, now_ms: float) -> TickContext:
        dt = self._frame_clock.advance(now_ms)
        ctx = TickContext(
            tick_number=self._frame_clock.tick_number,
            dt=dt,
            now_ms=now_ms,
            elapsed_ms=self._frame_clock.elapsed_ms,
            request_stop=self._request_stop,
            random=self._rng,
        )
        self._last_ctx = ctx
        for system in self._systems:
            system(self._context, ctx)
            if self._stop_requested:
                break
        return ctx

    def step(self, now_ms: float | None = None) -> TickContext:
        """Run exactly one frame stamped ``now_ms`` (default: the clock's now)."""
        self._stop_requested = False
        if now_ms is None:
            now_ms = self._clock.now()
        return self._tick(now_ms)

    def run(self, n: int, frame_ms: float = NOMINAL_FRAME_MS) -> None:
        """Run ``n`` frames spaced ``frame_ms`` apart without sleeping."""
        self.start()
        advance = getattr(self._clock, "advance", None)
        now = self._clock.now()
        for _ in range(n):
            if advance is not None:
                now = advance(frame_ms)
            else:
                now += frame_ms
            self._tick(now)
            if self._stop_requested:
                break
        self.stop()

    def run_forever(self, wait: Callable[[], Any] | None = None) -> None:
        """Run frames until ``stop`` or ``request_stop`` is called.

        ``wait`` blocks until the next display refresh (e.g. a pygame
        clock's ``tick``). Without it the loop sleeps off the remainder
        of each nominal frame.
        """
        self.start()
        frame_s = 1.0 / self._fps
        while not self._stop_requested:
            start = time.monotonic()
            if wait is not None:
                wait()
                if self._stop_requested:
                    break
            self._tick(self._clock.now())
            if self._stop_requested:
                break
            if wait is None:
                sleep_time = frame_s - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        self.stop()

    def start(self) -> None:
        if self._running:
            return
        self._stop_requested = False
        self._running = True
        self._frame_clock.resume()
        logger.debug("engine started (fps=%d, max_dt=%.2f)", self._fps, self._frame_clock.max_dt)
        ctx = self._hook_context()
        for hook in self._start_hooks:
            hook(self._context, ctx)

    def stop(self) -> None:
        self._stop_requested = True
        if not self._running:
            return
        self._running = False
        logger.debug("engine stopped after %d frames", self._frame_clock.tick_number)
        ctx = self._hook_context()
        for hook in self._stop_hooks:
            hook(self._context, ctx)


def gated(predicate: Callable[[Any], bool], *systems: System) -> System:
    """Run ``systems`` in order only on frames where ``predicate(context)`` holds."""

    def gated_system(context: Any, ctx: TickContext) -> None:
        if predicate(context):
            for system in systems:
                system(context, ctx)

    return gated_system
