"""Particle aging: integrate, count down, prune."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from flick_fx.components import Particle

if TYPE_CHECKING:
    from flick import TickContext

OFFSCREEN_MARGIN = 200.0


def step_particle(p: Particle, dt: float) -> None:
    p.x += p.vx * dt
    p.y += p.vy * dt
    p.vy += p.gravity * dt
    p.life -= dt
    p.rotation += p.spin * dt


def age_particles(
    pool: list[Particle], dt: float, floor_y: float, margin: float = OFFSCREEN_MARGIN,
) -> int:
    """Advance every particle by ``dt`` and drop the expired ones in place.

    A particle is removed once its life runs out or it has fallen more
    than ``margin`` below ``floor_y``. Returns the number removed.
    """
    limit = floor_y + margin
    for p in pool:
        step_particle(p, dt)
    before = len(pool)
    pool[:] = [p for p in pool if p.life > 0 and p.y <= limit]
    return before - len(pool)


def make_effects_system(
    pool: Callable[[Any], list[Particle]] = lambda c: c.particles,
    floor_y: Callable[[Any], float] = lambda c: c.height,
    margin: float = OFFSCREEN_MARGIN,
) -> Callable[[Any, "TickContext"], None]:
    """Age the context's particle pool every frame, whatever the game state."""

    def effects_system(context: Any, ctx: "TickContext") -> None:
        age_particles(pool(context), ctx.dt, floor_y(context), margin)

    return effects_system
