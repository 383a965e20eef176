"""The course: hard-coded geometry for a 960x540 surface."""
from __future__ import annotations

from flick_physics import Gate, Rect, Switch, Zone

from flick_games.platformer.components import Controls

SPARK_COLOR = (255, 123, 47)
WAVE_COLOR = (47, 179, 255)
SPARK_ACCENT = (249, 213, 190)
WAVE_ACCENT = (181, 229, 255)

# (kind, spawn x, spawn y, controls, color, accent)
ROBOTS = [
    ("spark", 90.0, 430.0, Controls("KeyA", "KeyD", "KeyW"), SPARK_COLOR, SPARK_ACCENT),
    ("wave", 180.0, 430.0, Controls("ArrowLeft", "ArrowRight", "ArrowUp"), WAVE_COLOR, WAVE_ACCENT),
]

PLATFORMS = [
    (60, 480, 260, 32),
    (380, 430, 160, 24),
    (620, 470, 280, 28),
    (100, 360, 140, 22),
    (320, 320, 160, 20),
    (540, 300, 140, 20),
    (740, 280, 140, 20),
    (70, 240, 140, 18),
    (260, 200, 140, 18),
    (520, 190, 140, 18),
]

HAZARDS = [
    (320, 488, 60, 52, "fire"),
    (480, 488, 60, 52, "water"),
    (860, 496, 60, 44, "fire"),
]

GATES = [(560, 430, 20, 70, "A")]

SWITCHES = [(430, 404, 12, "A")]

GOALS = [
    (770, 240, 60, 12, "spark"),
    (610, 160, 60, 12, "wave"),
]


def platforms() -> list[Rect]:
    return [Rect(*p) for p in PLATFORMS]


def hazards() -> list[Zone]:
    return [Zone(*h) for h in HAZARDS]


def gates() -> list[Gate]:
    return [Gate(*g) for g in GATES]


def switches() -> list[Switch]:
    return [Switch(*s) for s in SWITCHES]


def goals() -> list[Zone]:
    return [Zone(*g) for g in GOALS]
