"""Dodger-specific components and scene."""
from __future__ import annotations

from dataclasses import dataclass, field

from flick_physics import Body, Rect

from flick_games.config import DodgerConfig
from flick_games.scene import Scene


@dataclass
class Pipe:
    """Obstacle column with an open gap. ``gap_y`` is the gap's top edge."""

    x: float
    gap_y: float
    w: float
    gap: float
    scored: bool = False

    def segments(self, height: float) -> tuple[Rect, Rect]:
        """Top and bottom solid segments for a surface of ``height``."""
        bottom_y = self.gap_y + self.gap
        return (
            Rect(self.x, 0.0, self.w, self.gap_y),
            Rect(self.x, bottom_y, self.w, max(0.0, height - bottom_y)),
        )


def glider_body(cfg: DodgerConfig) -> Body:
    """The glider at its spawn point, vertically centred on the surface."""
    return Body(
        x=cfg.glider_x,
        y=cfg.height / 2 - cfg.glider_h / 2,
        w=cfg.glider_w,
        h=cfg.glider_h,
        kind="glider",
    )


@dataclass
class DodgerScene(Scene):
    glider: Body = field(default_factory=lambda: glider_body(DodgerConfig()))
    pipes: list[Pipe] = field(default_factory=list)
    spawn_clock: float = 0.0
    best: int = 0

    @property
    def bodies(self) -> list[Body]:
        return [self.glider]
