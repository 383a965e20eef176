"""Simulation context shared by both games."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from flick import Keyboard, SignalBus, Surface
from flick.bus import SCORE
from flick_fsm import FSM
from flick_fx import Particle
from flick_schedule import Timers

from flick_games.status import StatusLine

PLAYING = "playing"
MENU = "menu"
DEAD = "dead"
WON = "won"


@dataclass
class Scene:
    """Everything one frame reads and writes. Owned by the engine.

    ``launch`` and ``lethal`` are raised by the simulation systems and
    consumed by the state machine at the end of the same frame.
    """

    width: float
    height: float
    fsm: FSM
    status: StatusLine
    bus: SignalBus
    timers: Timers
    rng: random.Random = field(default_factory=random.Random)
    keyboard: Keyboard = field(default_factory=Keyboard)
    particles: list[Particle] = field(default_factory=list)
    score: int = 0
    scroll: float = 0.0
    launch: bool = False
    lethal: bool = False
    surface: Surface | None = None

    @property
    def state(self) -> str:
        return self.fsm.state

    @property
    def playing(self) -> bool:
        return self.fsm.state == PLAYING

    def add_score(self, points: int = 1) -> None:
        self.score += points
        self.bus.publish(SCORE, value=self.score)

    def clear_score(self) -> None:
        self.score = 0
        self.bus.publish(SCORE, value=0)
