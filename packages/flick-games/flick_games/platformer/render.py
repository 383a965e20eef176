"""Platformer draw pass: geometry, robots, particles, overlay."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flick_fx import draw_particles

from flick_games.platformer.components import PlatformerScene, Robot
from flick_games.platformer.level import SPARK_COLOR, WAVE_COLOR
from flick_games.render import draw_backdrop, draw_overlay
from flick_games.scene import DEAD

if TYPE_CHECKING:
    from flick import Surface, TickContext

PLATFORM = (30, 43, 79)
PLATFORM_EDGE = (49, 66, 109)
FIRE = (194, 29, 93)
WATER = (36, 99, 179)
SHEEN = (255, 255, 255, 51)
GATE = (217, 182, 74)
GATE_OPEN = (217, 182, 74, 51)
GATE_SHADE = (0, 0, 0, 89)
SWITCH_IDLE = (110, 127, 176)
SWITCH_HELD = (255, 191, 60)
GOAL = (82, 210, 115)
FEET = (0, 0, 0, 64)

PROMPT = "Press W or Up to boot the robots"


def draw_robot(surface: "Surface", robot: Robot) -> None:
    b = robot.body
    surface.fill_rect(b.x, b.y, b.w, b.h, robot.color)
    surface.fill_rect(b.x + 6, b.y + 8, b.w - 12, 10, robot.accent)
    surface.fill_rect(b.x + 8, b.y + b.h - 10, b.w - 16, 6, FEET)


def draw_level(surface: "Surface", scene: PlatformerScene) -> None:
    for p in scene.platforms:
        surface.fill_rect(p.x, p.y, p.w, p.h, PLATFORM)
        surface.fill_rect(p.x, p.y, p.w, 6, PLATFORM_EDGE)
    for z in scene.hazards:
        surface.fill_rect(z.x, z.y, z.w, z.h, FIRE if z.kind == "fire" else WATER)
        surface.fill_rect(z.x, z.y, z.w, 6, SHEEN)
    for g in scene.gates:
        if g.open:
            surface.fill_rect(g.x, g.y, g.w, g.h, GATE_OPEN)
        else:
            surface.fill_rect(g.x, g.y, g.w, g.h, GATE)
            surface.fill_rect(g.x, g.y, g.w, 6, GATE_SHADE)
    for s in scene.switches:
        surface.fill_circle(s.x, s.y, s.radius, SWITCH_HELD if s.held else SWITCH_IDLE)
    for pad in scene.goals:
        surface.fill_rect(pad.x, pad.y, pad.w, pad.h, GOAL)
        surface.fill_rect(pad.x, pad.y - 4, pad.w, 4, SPARK_COLOR if pad.kind == "spark" else WAVE_COLOR)


def draw_platformer(surface: "Surface", scene: PlatformerScene) -> None:
    draw_backdrop(surface, scene)
    draw_level(surface, scene)
    for robot in scene.robots:
        if scene.state == DEAD and robot is scene.casualty:
            continue
        draw_robot(surface, robot)
    draw_particles(surface, scene.particles)
    draw_overlay(surface, scene, PROMPT)


def make_draw_system() -> Callable[[PlatformerScene, "TickContext"], None]:
    """Render the frame if a surface is attached; headless runs skip it."""

    def draw_system(scene: PlatformerScene, ctx: TickContext) -> None:
        if scene.surface is not None:
            draw_platformer(scene.surface, scene)

    return draw_system
