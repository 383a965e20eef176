"""Build the side-scrolling glider dodger."""
from __future__ import annotations

import logging
from typing import Any

from flick import Engine, SignalBus
from flick_fsm import FSM
from flick_fx import spawn
from flick_physics import make_physics_system
from flick_schedule import Timers

from flick_games.config import FPS, MAX_DT, DodgerConfig
from flick_games.dodger.components import DodgerScene, glider_body
from flick_games.dodger.render import make_draw_system
from flick_games.dodger.systems import (
    flap,
    make_crash_system,
    make_flap_system,
    make_launch_system,
    make_pipe_system,
    make_scroll_system,
)
from flick_games.game import ENDLESS_STATES, Game, assemble, base_guards, make_transition_handler, reset_scene
from flick_games.scene import DEAD, MENU, PLAYING
from flick_games.status import StatusLine

logger = logging.getLogger(__name__)


def reset_dodger(scene: DodgerScene) -> None:
    """Glider home, pipes cleared, spawn clock rewound, effects and score zeroed."""
    scene.glider.reset()
    scene.pipes.clear()
    scene.spawn_clock = 0.0
    reset_scene(scene)


def build_dodger(
    config: DodgerConfig | None = None,
    seed: int | None = None,
    clock: Any = None,
    fps: int = FPS,
    max_dt: float = MAX_DT,
) -> Game:
    cfg = config or DodgerConfig()
    bus = SignalBus()
    timers = Timers()
    scene = DodgerScene(
        width=cfg.width,
        height=cfg.height,
        fsm=FSM(state=MENU, transitions=ENDLESS_STATES),
        status=StatusLine(bus, timers, cfg.idle_message, cfg.status_hold_ms),
        bus=bus,
        timers=timers,
        glider=glider_body(cfg),
    )
    engine = Engine(scene, fps=fps, max_dt=max_dt, seed=seed, clock=clock)
    scene.rng = engine.rng

    def on_playing(s: DodgerScene) -> None:
        flap(s, cfg.flap_impulse)

    def on_dead(s: DodgerScene) -> None:
        cx, cy = s.glider.center
        spawn(s.particles, "shard", cx, cy, s.rng, count=cfg.death_shards)
        s.best = max(s.best, s.score)
        s.status.flash(cfg.crash_message)
        logger.info("glider crashed with score %d", s.score)

    on_transition = make_transition_handler(
        reset_dodger, {PLAYING: on_playing, DEAD: on_dead},
    )

    assemble(
        engine,
        base_guards(),
        on_transition,
        scroll=make_scroll_system(cfg.scroll_speed),
        launch=make_launch_system(cfg.launch_keys),
        simulate=[
            make_flap_system(cfg.launch_keys, cfg.flap_impulse),
            make_physics_system(cfg.gravity, bodies=lambda s: s.bodies),
            make_pipe_system(
                cfg.pipe_w, cfg.pipe_gap, cfg.pipe_margin, cfg.pipe_speed, cfg.pipe_interval,
            ),
        ],
        collide=[make_crash_system()],
        draw=make_draw_system(),
    )
    reset_dodger(scene)
    return Game("dodger", engine, on_transition, cfg.reset_message)
