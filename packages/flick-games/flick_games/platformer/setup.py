"""Build the complete twin-robot platformer."""
from __future__ import annotations

import logging
from typing import Any

from flick import Engine, SignalBus, TickContext
from flick_fsm import FSM
from flick_fx import spawn
from flick_physics import (
    Body,
    Gate,
    make_bounds_system,
    make_landing_system,
    make_physics_system,
    make_switch_system,
)
from flick_schedule import Timers

from flick_games.config import FPS, MAX_DT, PlatformerConfig
from flick_games.game import (
    GAME_STATES,
    Game,
    assemble,
    base_guards,
    make_transition_handler,
    reset_scene,
)
from flick_games.platformer import level
from flick_games.platformer.components import PlatformerScene, Robot
from flick_games.platformer.render import make_draw_system
from flick_games.platformer.systems import (
    make_control_system,
    make_goal_system,
    make_hazard_system,
    make_launch_system,
    make_scroll_system,
)
from flick_games.scene import DEAD, MENU, WON
from flick_games.status import StatusLine

logger = logging.getLogger(__name__)


def _robots(cfg: PlatformerConfig) -> list[Robot]:
    return [
        Robot(
            body=Body(x=x, y=y, w=cfg.robot_w, h=cfg.robot_h, kind=kind),
            controls=controls,
            color=color,
            accent=accent,
        )
        for kind, x, y, controls, color, accent in level.ROBOTS
    ]


def reset_platformer(scene: PlatformerScene) -> None:
    """Robots home, gates shut, switches released, effects and flags cleared."""
    for robot in scene.robots:
        robot.body.reset()
    for gate in scene.gates:
        gate.open = False
    for switch in scene.switches:
        switch.held = False
    scene.goals_met = False
    scene.casualty = None
    reset_scene(scene)


def build_platformer(
    config: PlatformerConfig | None = None,
    seed: int | None = None,
    clock: Any = None,
    fps: int = FPS,
    max_dt: float = MAX_DT,
) -> Game:
    cfg = config or PlatformerConfig()
    bus = SignalBus()
    timers = Timers()
    scene = PlatformerScene(
        width=cfg.width,
        height=cfg.height,
        fsm=FSM(state=MENU, transitions=GAME_STATES),
        status=StatusLine(bus, timers, cfg.idle_message, cfg.status_hold_ms),
        bus=bus,
        timers=timers,
        robots=_robots(cfg),
        platforms=level.platforms(),
        hazards=level.hazards(),
        gates=level.gates(),
        switches=level.switches(),
        goals=level.goals(),
    )
    engine = Engine(scene, fps=fps, max_dt=max_dt, seed=seed, clock=clock)
    scene.rng = engine.rng

    def on_dead(s: PlatformerScene) -> None:
        robot = s.casualty or s.robots[0]
        cx, cy = robot.body.center
        spawn(s.particles, "shard", cx, cy, s.rng, count=cfg.death_shards, color=robot.color)
        s.status.flash(cfg.hazard_message)
        logger.info("%s robot lost in a hazard", robot.body.kind)

    def on_won(s: PlatformerScene) -> None:
        per_pad = max(1, cfg.win_confetti // max(1, len(s.goals)))
        for pad in s.goals:
            spawn(s.particles, "confetti", pad.x + pad.w / 2, pad.y, s.rng, count=per_pad)
        s.status.show(cfg.win_message)
        logger.info("course cleared")

    def on_gate_change(s: PlatformerScene, ctx: TickContext, gate: Gate) -> None:
        template = cfg.gate_open_message if gate.open else cfg.gate_closed_message
        s.status.flash(template.format(id=gate.id))

    on_transition = make_transition_handler(
        reset_platformer, {DEAD: on_dead, WON: on_won},
    )

    assemble(
        engine,
        base_guards(goals=lambda s: s.goals_met),
        on_transition,
        scroll=make_scroll_system(cfg.scroll_speed),
        launch=make_launch_system(),
        simulate=[
            make_switch_system(
                lambda s: s.switches, lambda s: s.gates, on_change=on_gate_change,
            ),
            make_control_system(cfg.run_accel, cfg.jump_impulse),
            make_physics_system(cfg.gravity, cfg.friction),
            make_landing_system(lambda s: s.platforms, lambda s: s.gates),
            make_bounds_system(lambda s: (s.width, s.height), floor=True),
        ],
        collide=[make_hazard_system(), make_goal_system()],
        draw=make_draw_system(),
    )
    reset_platformer(scene)
    return Game("platformer", engine, on_transition, cfg.reset_message)
