"""Dodger draw pass."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flick_fx import draw_particles

from flick_games.dodger.components import DodgerScene
from flick_games.render import HUD_DIM, draw_backdrop, draw_overlay
from flick_games.scene import DEAD

if TYPE_CHECKING:
    from flick import Surface, TickContext

PIPE = (82, 210, 115)
PIPE_LIP = (49, 150, 80)
GLIDER = (255, 191, 60)
GLIDER_WING = (255, 123, 47)
LIP_H = 10.0

PROMPT = "Press Space to launch"


def draw_dodger(surface: "Surface", scene: DodgerScene) -> None:
    draw_backdrop(surface, scene)
    for pipe in scene.pipes:
        top, bottom = pipe.segments(surface.height)
        surface.fill_rect(top.x, top.y, top.w, top.h, PIPE)
        surface.fill_rect(top.x - 3, top.y + top.h - LIP_H, top.w + 6, LIP_H, PIPE_LIP)
        surface.fill_rect(bottom.x, bottom.y, bottom.w, bottom.h, PIPE)
        surface.fill_rect(bottom.x - 3, bottom.y, bottom.w + 6, LIP_H, PIPE_LIP)
    if scene.state != DEAD:
        g = scene.glider
        surface.fill_rect(g.x, g.y, g.w, g.h, GLIDER)
        # Wing tilts with vertical speed.
        tilt = max(-6.0, min(6.0, g.vy))
        surface.fill_rect(g.x + 4, g.y + g.h / 2 - 3 + tilt / 2, g.w - 12, 6, GLIDER_WING)
    draw_particles(surface, scene.particles)
    draw_overlay(surface, scene, PROMPT, show_score=True)
    if scene.best:
        surface.draw_text(f"Best {scene.best}", 16, 16, HUD_DIM, size=16)


def make_draw_system() -> Callable[[DodgerScene, "TickContext"], None]:
    def draw_system(scene: DodgerScene, ctx: TickContext) -> None:
        if scene.surface is not None:
            draw_dodger(scene.surface, scene)

    return draw_system
