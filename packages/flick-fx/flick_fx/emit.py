"""Event-triggered particle spawning."""
from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING

from flick.types import UnknownParticleKindError

from flick_fx.components import KINDS, Color, Particle, ParticleKind

if TYPE_CHECKING:
    from collections.abc import Mapping


def make_particle(
    kind: ParticleKind,
    x: float,
    y: float,
    rng: random.Random,
    color: Color | None = None,
) -> Particle:
    """Draw one particle's kinematics and looks from ``kind``'s ranges."""
    speed = rng.uniform(*kind.speed)
    angle = rng.uniform(*kind.angle)
    return Particle(
        kind=kind.name,
        x=x,
        y=y,
        vx=math.cos(angle) * speed,
        vy=math.sin(angle) * speed,
        gravity=kind.gravity,
        life=rng.uniform(*kind.life),
        fade=kind.fade,
        size=rng.uniform(*kind.size),
        color=color if color is not None else rng.choice(kind.colors),
        rotation=rng.uniform(0.0, 2 * math.pi),
        spin=rng.uniform(*kind.spin),
    )


def spawn(
    pool: list[Particle],
    kind: str,
    x: float,
    y: float,
    rng: random.Random,
    count: int = 1,
    color: Color | None = None,
    kinds: Mapping[str, ParticleKind] = KINDS,
) -> list[Particle]:
    """Append ``count`` particles of ``kind`` at (x, y) and return them."""
    params = kinds.get(kind)
    if params is None:
        raise UnknownParticleKindError(kind, f"No particle kind named {kind!r}")
    born = [make_particle(params, x, y, rng, color) for _ in range(count)]
    pool.extend(born)
    return born
