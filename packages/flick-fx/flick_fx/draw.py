"""Particle rendering, dispatched on the particle kind."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Iterable

from flick.types import UnknownParticleKindError

from flick_fx.components import Particle

if TYPE_CHECKING:
    from flick.surface import Surface


def _with_alpha(p: Particle) -> tuple[int, ...]:
    r, g, b = p.color[:3]
    return (r, g, b, int(255 * p.alpha))


def _draw_confetti(surface: "Surface", p: Particle) -> None:
    # Flat ribbon tumbling about its long axis.
    w = max(1.0, abs(math.cos(p.rotation)) * p.size)
    h = p.size * 0.6
    surface.fill_rect(p.x - w / 2, p.y - h / 2, w, h, _with_alpha(p))


def _draw_shard(surface: "Surface", p: Particle) -> None:
    surface.fill_rect(p.x - p.size / 2, p.y - p.size / 2, p.size, p.size, _with_alpha(p))


def _draw_trail(surface: "Surface", p: Particle) -> None:
    surface.fill_circle(p.x, p.y, p.size * (0.4 + 0.6 * p.alpha), _with_alpha(p))


_DRAWERS: dict[str, Callable[["Surface", Particle], None]] = {
    "confetti": _draw_confetti,
    "shard": _draw_shard,
    "trail": _draw_trail,
}


def draw_particles(surface: "Surface", pool: Iterable[Particle]) -> None:
    for p in pool:
        drawer = _DRAWERS.get(p.kind)
        if drawer is None:
            raise UnknownParticleKindError(p.kind, f"No drawer for particle kind {p.kind!r}")
        drawer(surface, p)
