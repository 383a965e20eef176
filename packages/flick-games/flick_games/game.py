"""Frame assembly and the handle a front-end drives a game through."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from flick import Engine, Surface, TickContext, gated, make_press_reset_system
from flick.bus import STATE
from flick.types import System
from flick_fsm import FSMGuards, force_state, make_fsm_system
from flick_fx import make_effects_system
from flick_schedule import make_timer_system

from flick_games.scene import DEAD, MENU, PLAYING, Scene

if TYPE_CHECKING:
    from flick_fsm.systems import OnTransition

logger = logging.getLogger(__name__)

GAME_STATES = {
    MENU: [["launch", PLAYING]],
    PLAYING: [["lethal", DEAD], ["goals", "won"]],
    DEAD: [["drained", MENU]],
}

ENDLESS_STATES = {
    MENU: [["launch", PLAYING]],
    PLAYING: [["lethal", DEAD]],
    DEAD: [["drained", MENU]],
}


def reset_button(scene: Scene) -> tuple[float, float, float, float]:
    """On-canvas reset control, pinned to the top-right corner."""
    return (scene.width - 108.0, 12.0, 96.0, 28.0)


def base_guards(goals: Callable[[Scene], bool] | None = None) -> FSMGuards:
    guards = FSMGuards()
    guards.register("launch", lambda s: s.launch)
    guards.register("lethal", lambda s: s.lethal)
    guards.register("drained", lambda s: not s.particles)
    if goals is not None:
        guards.register("goals", goals)
    return guards


def reset_scene(scene: Scene) -> None:
    """Shared part of the unconditional reset. Safe to call repeatedly."""
    scene.particles.clear()
    scene.clear_score()
    scene.launch = False
    scene.lethal = False
    scene.keyboard.consume_presses()
    if not scene.status.transient:
        scene.status.show_idle()


def make_transition_handler(
    reset: Callable[[Scene], None],
    on_enter: dict[str, Callable[[Scene], None]],
) -> "OnTransition":
    """Entering the menu always resets; other states run their enter hook."""

    def on_transition(scene: Scene, ctx: TickContext | None, old: str, new: str) -> None:
        scene.launch = False
        scene.lethal = False
        if new == MENU:
            reset(scene)
        enter = on_enter.get(new)
        if enter is not None:
            enter(scene)
        scene.bus.publish(STATE, state=new, previous=old)

    return on_transition


def assemble(
    engine: Engine,
    guards: FSMGuards,
    on_transition: "OnTransition",
    scroll: System,
    launch: System,
    simulate: list[System],
    collide: list[System],
    draw: System,
) -> None:
    """Register the per-frame systems in their fixed order.

    scroll, launch detection (menu only), simulation and collision
    (playing only), effect aging, status timers, draw, then the state
    machine, which also performs the dead-to-menu reset once the effect
    pool has drained. Unconsumed key-down edges are dropped and signals
    are delivered last.
    """
    engine.add_system(scroll)
    engine.add_system(gated(lambda s: s.state == MENU, launch))
    engine.add_system(gated(lambda s: s.playing, *simulate))
    engine.add_system(gated(lambda s: s.playing, *collide))
    engine.add_system(make_effects_system())
    engine.add_system(make_timer_system())
    engine.add_system(draw)
    engine.add_system(make_fsm_system(guards, on_transition=on_transition))
    engine.add_system(make_press_reset_system())
    engine.add_system(engine.context.bus.make_flush_system())


class Game:
    """A built game: the engine, its scene, and front-end entry points."""

    def __init__(
        self,
        name: str,
        engine: Engine,
        on_transition: "OnTransition",
        reset_message: str,
    ) -> None:
        self.name = name
        self.engine = engine
        self._on_transition = on_transition
        self._reset_message = reset_message

    @property
    def scene(self) -> Scene:
        return self.engine.context

    @property
    def state(self) -> str:
        return self.scene.state

    def key_down(self, code: str) -> None:
        self.scene.keyboard.press(code)

    def key_up(self, code: str) -> None:
        self.scene.keyboard.release(code)

    def click(self, x: float, y: float) -> bool:
        """Pointer press. Returns True if it hit the reset control."""
        bx, by, bw, bh = reset_button(self.scene)
        if bx <= x <= bx + bw and by <= y <= by + bh:
            self.manual_reset()
            return True
        return False

    def manual_reset(self) -> None:
        """Force the menu state from anywhere, with its own status message."""
        logger.info("%s: manual reset from %s", self.name, self.state)
        force_state(
            self.scene, self.scene.fsm, MENU, self._on_transition, self.engine.last_tick,
        )
        self.scene.status.flash(self._reset_message)

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.scene.width = width
        self.scene.height = height

    def attach(self, surface: Surface) -> None:
        self.scene.surface = surface
        self.resize(surface.width, surface.height)

    def step(self, now_ms: float | None = None) -> TickContext:
        return self.engine.step(now_ms)
