"""flick - A small frame-driven simulation core for 2D canvas games."""

from flick.bus import SignalBus
from flick.clock import FrameClock, MonotonicClock, VirtualClock
from flick.engine import Engine, gated
from flick.input import Keyboard, make_press_reset_system
from flick.surface import RecordingSurface, Surface
from flick.types import (
    NOMINAL_FRAME_MS,
    Color,
    TickContext,
    UnknownParticleKindError,
    UnknownStateError,
)

__all__ = [
    "Engine",
    "gated",
    "FrameClock",
    "MonotonicClock",
    "VirtualClock",
    "TickContext",
    "Keyboard",
    "make_press_reset_system",
    "SignalBus",
    "Surface",
    "RecordingSurface",
    "Color",
    "NOMINAL_FRAME_MS",
    "UnknownStateError",
    "UnknownParticleKindError",
]
