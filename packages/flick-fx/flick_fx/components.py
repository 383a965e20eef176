"""Particle component and the per-kind parameter table."""
from __future__ import annotations

import math
from dataclasses import dataclass

from flick.types import Color


@dataclass(frozen=True)
class ParticleKind:
    """Spawn ranges for one particle kind. Every range is ``(low, high)``."""

    name: str
    speed: tuple[float, float]
    angle: tuple[float, float]
    life: tuple[float, float]
    fade: float
    gravity: float
    size: tuple[float, float]
    spin: tuple[float, float] = (0.0, 0.0)
    colors: tuple[Color, ...] = ((255, 255, 255),)


@dataclass
class Particle:
    """Ephemeral effect particle. ``life`` counts down in tick units."""

    kind: str
    x: float
    y: float
    vx: float
    vy: float
    gravity: float
    life: float
    fade: float
    size: float
    color: Color
    rotation: float = 0.0
    spin: float = 0.0

    @property
    def alpha(self) -> float:
        """Linear fade over the last ``fade`` ticks of life."""
        if self.fade <= 0:
            return 1.0 if self.life > 0 else 0.0
        return max(0.0, min(1.0, self.life / self.fade))


CONFETTI = ParticleKind(
    name="confetti",
    speed=(2.0, 7.0),
    angle=(math.pi, 2 * math.pi),
    life=(90.0, 160.0),
    fade=40.0,
    gravity=0.12,
    size=(4.0, 8.0),
    spin=(-0.2, 0.2),
    colors=(
        (255, 123, 47),
        (47, 179, 255),
        (82, 210, 115),
        (255, 191, 60),
        (244, 114, 182),
    ),
)

SHARD = ParticleKind(
    name="shard",
    speed=(3.0, 9.0),
    angle=(0.0, 2 * math.pi),
    life=(60.0, 140.0),
    fade=40.0,
    gravity=0.25,
    size=(2.0, 5.0),
    spin=(-0.3, 0.3),
    colors=((255, 191, 60), (255, 123, 47)),
)

TRAIL = ParticleKind(
    name="trail",
    speed=(0.5, 2.0),
    angle=(math.pi - 0.6, math.pi + 0.6),
    life=(20.0, 40.0),
    fade=20.0,
    gravity=0.05,
    size=(2.0, 4.0),
    colors=((255, 231, 150),),
)

KINDS: dict[str, ParticleKind] = {k.name: k for k in (CONFETTI, SHARD, TRAIL)}
