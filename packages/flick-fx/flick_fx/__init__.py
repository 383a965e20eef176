"""flick-fx - Confetti, explosion shards, and trail sparks for flick games."""
from __future__ import annotations

from flick_fx.components import CONFETTI, KINDS, SHARD, TRAIL, Particle, ParticleKind
from flick_fx.draw import draw_particles
from flick_fx.emit import make_particle, spawn
from flick_fx.systems import OFFSCREEN_MARGIN, age_particles, make_effects_system, step_particle

__all__ = [
    "CONFETTI",
    "KINDS",
    "OFFSCREEN_MARGIN",
    "SHARD",
    "TRAIL",
    "Particle",
    "ParticleKind",
    "age_particles",
    "draw_particles",
    "make_effects_system",
    "make_particle",
    "spawn",
    "step_particle",
]
