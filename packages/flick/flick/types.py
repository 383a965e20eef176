"""Shared type aliases and error types for the frame driver."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any, Callable

Color = tuple[int, ...]

NOMINAL_FRAME_MS = 1000.0 / 60.0


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    now_ms: float
    elapsed_ms: float
    request_stop: Callable[[], None]
    random: _random.Random


class UnknownStateError(KeyError):
    """Raised when forcing a state machine into a state it does not define."""

    def __init__(self, state: str, message: str) -> None:
        self.state = state
        super().__init__(message)


class UnknownParticleKindError(KeyError):
    """Raised when spawning a particle kind with no parameter table entry."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)


System = Callable[[Any, TickContext], None]
