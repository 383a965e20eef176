"""Platformer system factories: controls, hazards, goals, scroll."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flick_fx import spawn
from flick_physics import hazard_is_lethal, on_goal

from flick_games.platformer.components import PlatformerScene

if TYPE_CHECKING:
    from flick import TickContext

STRIPE_SPACING = 80.0

_System = Callable[[PlatformerScene, "TickContext"], None]


def make_scroll_system(speed: float, period: float = STRIPE_SPACING) -> _System:
    """Drift the background stripes; runs in every state."""

    def scroll_system(scene: PlatformerScene, ctx: TickContext) -> None:
        scene.scroll = (scene.scroll + speed * ctx.dt) % period

    return scroll_system


def make_launch_system() -> _System:
    """In the menu, pressing any robot's jump key starts the run.

    Only fresh key-down edges count, so a jump key still held through the
    dead-to-menu reset does not relaunch straight away.
    """

    def launch_system(scene: PlatformerScene, ctx: TickContext) -> None:
        jump_keys = scene.jump_keys
        if any(k in jump_keys for k in scene.keyboard.consume_presses()):
            scene.launch = True

    return launch_system


def make_control_system(run_accel: float, jump_impulse: float) -> _System:
    """Held direction keys accelerate; the jump key fires only when grounded.

    Every applied jump leaves one trail spark at the robot's feet.
    """

    def control_system(scene: PlatformerScene, ctx: TickContext) -> None:
        kb = scene.keyboard
        kb.consume_presses()
        for robot in scene.robots:
            body = robot.body
            c = robot.controls
            if kb.held(c.left):
                body.vx -= run_accel * ctx.dt
            if kb.held(c.right):
                body.vx += run_accel * ctx.dt
            if kb.held(c.jump) and body.grounded:
                body.vy = jump_impulse
                body.grounded = False
                spawn(
                    scene.particles, "trail", body.x + body.w / 2, body.y + body.h,
                    scene.rng, color=robot.accent,
                )

    return control_system


def make_hazard_system() -> _System:
    """Flag the first robot standing in a hazard of the wrong element."""

    def hazard_system(scene: PlatformerScene, ctx: TickContext) -> None:
        if scene.lethal:
            return
        for robot in scene.robots:
            for zone in scene.hazards:
                if hazard_is_lethal(robot.body, zone):
                    scene.lethal = True
                    scene.casualty = robot
                    return

    return hazard_system


def make_goal_system() -> _System:
    """Both robots must sit on their own pads in the same frame."""

    def goal_system(scene: PlatformerScene, ctx: TickContext) -> None:
        scene.goals_met = bool(scene.robots) and all(
            any(on_goal(robot.body, pad) for pad in scene.goals)
            for robot in scene.robots
        )

    return goal_system
