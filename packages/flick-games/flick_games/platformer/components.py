"""Platformer-specific components and scene."""
from __future__ import annotations

from dataclasses import dataclass, field

from flick_physics import Body, Gate, Rect, Switch, Zone

from flick_games.scene import Scene


@dataclass(frozen=True)
class Controls:
    """Key codes driving one robot."""

    left: str
    right: str
    jump: str


@dataclass
class Robot:
    body: Body
    controls: Controls
    color: tuple[int, int, int]
    accent: tuple[int, int, int]


@dataclass
class PlatformerScene(Scene):
    robots: list[Robot] = field(default_factory=list)
    platforms: list[Rect] = field(default_factory=list)
    hazards: list[Zone] = field(default_factory=list)
    gates: list[Gate] = field(default_factory=list)
    switches: list[Switch] = field(default_factory=list)
    goals: list[Zone] = field(default_factory=list)
    goals_met: bool = False
    casualty: Robot | None = None

    @property
    def bodies(self) -> list[Body]:
        return [r.body for r in self.robots]

    @property
    def jump_keys(self) -> tuple[str, ...]:
        return tuple(r.controls.jump for r in self.robots)
