"""Tests for the glider dodger: launch, flap, pipes, scoring, crash, reset."""
from __future__ import annotations

import random

import pytest

from flick import RecordingSurface, SignalBus, TickContext, VirtualClock
from flick.bus import SCORE, STATE
from flick.types import UnknownStateError
from flick_fsm import FSM, force_state
from flick_schedule import Timers

from flick_games import DEAD, MENU, PLAYING, WON, DodgerConfig, Pipe, build_dodger
from flick_games.dodger.components import DodgerScene, glider_body
from flick_games.dodger.systems import crashed, make_pipe_system
from flick_games.status import StatusLine

CFG = DodgerConfig()


def _game():
    return build_dodger(seed=11, clock=VirtualClock())


def _launched():
    game = _game()
    game.key_down("Space")
    game.engine.run(1)
    game.key_up("Space")
    assert game.state == PLAYING
    return game


def _ctx(dt: float = 1.0) -> TickContext:
    return TickContext(
        tick_number=1,
        dt=dt,
        now_ms=0.0,
        elapsed_ms=0.0,
        request_stop=lambda: None,
        random=random.Random(0),
    )


def _snapshot(game):
    s = game.scene
    g = s.glider
    return (
        s.state,
        s.score,
        (g.x, g.y, g.vx, g.vy),
        len(s.pipes),
        s.spawn_clock,
        len(s.particles),
        s.status.text,
    )


class TestLaunch:
    def test_initial_state(self):
        game = _game()
        assert game.state == MENU
        assert game.scene.score == 0
        assert game.scene.pipes == []
        assert game.scene.status.text == CFG.idle_message

    def test_glider_hovers_in_menu(self):
        game = _game()
        before = _snapshot(game)
        game.engine.run(60)
        assert _snapshot(game) == before

    @pytest.mark.parametrize("key", ["Space", "ArrowUp", "KeyW"])
    def test_launch_keys(self, key):
        game = _game()
        game.key_down(key)
        game.engine.run(1)
        assert game.state == PLAYING

    def test_launch_flaps(self):
        game = _launched()
        assert game.scene.glider.vy == CFG.flap_impulse
        trails = [p for p in game.scene.particles if p.kind == "trail"]
        assert len(trails) == 1

    def test_other_keys_do_not_launch(self):
        game = _game()
        game.key_down("KeyD")
        game.engine.run(3)
        assert game.state == MENU


class TestFlap:
    def test_each_press_flaps_once(self):
        game = _launched()
        game.engine.run(5)
        before = len(game.scene.particles)
        game.key_down("Space")
        game.engine.run(1)
        assert game.scene.glider.vy < 0
        assert len(game.scene.particles) == before + 1
        # Holding the key is not a second press.
        game.engine.run(1)
        assert len(game.scene.particles) == before + 1

    def test_gravity_pulls_down(self):
        game = _launched()
        game.engine.run(30)
        assert game.scene.glider.vy > 0


class TestPipes:
    def test_spawn_interval_and_gap_range(self):
        scene = _game().scene
        system = make_pipe_system(
            CFG.pipe_w, CFG.pipe_gap, CFG.pipe_margin, CFG.pipe_speed, CFG.pipe_interval,
        )
        for _ in range(89):
            system(scene, _ctx())
        assert scene.pipes == []
        system(scene, _ctx())
        assert len(scene.pipes) == 1
        pipe = scene.pipes[0]
        assert pipe.x == pytest.approx(scene.width - CFG.pipe_speed)
        assert CFG.pipe_margin <= pipe.gap_y <= scene.height - CFG.pipe_margin - CFG.pipe_gap

    def test_offscreen_pipes_are_pruned(self):
        scene = _game().scene
        system = make_pipe_system(
            CFG.pipe_w, CFG.pipe_gap, CFG.pipe_margin, CFG.pipe_speed, CFG.pipe_interval,
        )
        for _ in range(2000):
            system(scene, _ctx())
        assert 0 < len(scene.pipes) <= 4
        assert all(p.x + p.w > 0 for p in scene.pipes)

    def test_segments_leave_the_gap_open(self):
        top, bottom = Pipe(x=100, gap_y=150, w=70, gap=170).segments(540)
        assert (top.y, top.h) == (0.0, 150)
        assert bottom.y == 320
        assert bottom.h == 220


class TestCrash:
    def test_fall_from_top_dies_once(self):
        game = _launched()
        states = []
        game.scene.bus.subscribe(STATE, lambda n, d: states.append(d["state"]))
        s = game.scene
        s.glider.y, s.glider.vy = 0.0, 1.0
        s.pipes.append(Pipe(x=800.0, gap_y=100.0, w=CFG.pipe_w, gap=CFG.pipe_gap))
        game.engine.run(80)
        assert game.state == DEAD
        assert s.score == 0
        assert 0.0 <= s.glider.y <= s.height - s.glider.h
        game.engine.run(250)
        assert states == [DEAD, MENU]
        assert s.pipes == []
        assert s.particles == []

    def test_pipe_contact_is_fatal_same_tick(self):
        game = _launched()
        game.scene.pipes.append(Pipe(x=150.0, gap_y=400.0, w=70.0, gap=100.0))
        game.engine.run(1)
        assert game.state == DEAD
        assert game.scene.status.text == CFG.crash_message
        shards = [p for p in game.scene.particles if p.kind == "shard"]
        assert len(shards) == CFG.death_shards

    def test_leaving_the_top_is_fatal(self):
        game = _launched()
        game.scene.glider.y = -5.0
        game.engine.run(1)
        assert game.state == DEAD
        assert game.scene.glider.y == 0.0

    def test_crashed_inside_gap_is_false(self):
        scene = _game().scene
        scene.pipes.append(Pipe(x=150.0, gap_y=150.0, w=70.0, gap=250.0))
        assert not crashed(scene)


class TestScore:
    def test_passing_a_pipe_scores_once(self):
        game = _launched()
        s = game.scene
        s.pipes.append(Pipe(x=92.0, gap_y=150.0, w=70.0, gap=250.0))
        game.engine.run(1)
        assert s.score == 1
        assert s.bus.latest(SCORE) == {"value": 1}
        game.engine.run(5)
        assert s.score == 1

    def test_crash_records_best_and_reset_clears_score(self):
        game = _launched()
        s = game.scene
        s.pipes.append(Pipe(x=92.0, gap_y=150.0, w=70.0, gap=250.0))
        game.engine.run(1)
        s.glider.y = -5.0
        game.engine.run(1)
        assert game.state == DEAD
        assert s.best == 1
        game.engine.run(250)
        assert game.state == MENU
        assert s.score == 0
        assert s.best == 1

    def test_score_is_drawn(self):
        game = _launched()
        surface = RecordingSurface()
        game.attach(surface)
        game.scene.pipes.append(Pipe(x=92.0, gap_y=150.0, w=70.0, gap=250.0))
        game.engine.run(1)
        assert "1" in surface.texts()


class TestStates:
    def test_dodger_has_no_won_state(self):
        game = _game()
        assert WON not in game.scene.fsm.states()
        with pytest.raises(UnknownStateError):
            force_state(game.scene, game.scene.fsm, WON)

    def test_manual_reset_is_idempotent(self):
        game = _launched()
        game.engine.run(20)
        game.manual_reset()
        once = _snapshot(game)
        game.manual_reset()
        assert _snapshot(game) == once
        assert once[0] == MENU
        assert once[2] == (CFG.glider_x, CFG.height / 2 - CFG.glider_h / 2, 0.0, 0.0)
        assert once[-1] == CFG.reset_message

    def test_glider_stays_on_surface(self):
        game = _launched()
        s = game.scene
        rng = random.Random(2)
        for frame in range(600):
            if rng.random() < 0.08:
                game.key_down("Space")
            else:
                game.key_up("Space")
            game.engine.run(1)
            assert 0.0 <= s.glider.y <= s.height - s.glider.h


class TestSlowFrames:
    def test_clamped_dt_keeps_glider_on_surface(self):
        game = _launched()
        engine = game.engine
        s = game.scene
        engine.start()
        engine.step(engine.clock.advance(5000.0))
        assert engine.last_tick.dt == 1.0
        for frame in range(60):
            if frame % 4 == 0:
                game.key_down("Space")
            else:
                game.key_up("Space")
            engine.step(engine.clock.advance(5000.0))
            assert engine.last_tick.dt == engine.frame_clock.max_dt == 2.0
            assert 0.0 <= s.glider.y <= s.height - s.glider.h
        engine.stop()


class TestKeyEdges:
    def test_press_while_dead_does_not_relaunch(self):
        game = _launched()
        game.scene.glider.y = -5.0
        game.engine.run(1)
        assert game.state == DEAD
        game.key_down("Space")
        game.engine.run(250)
        assert game.state == MENU
        game.key_up("Space")
        game.engine.run(10)
        assert game.state == MENU

    def test_default_scene_glider_matches_config(self):
        bus, timers = SignalBus(), Timers()
        scene = DodgerScene(
            width=CFG.width,
            height=CFG.height,
            fsm=FSM(state=MENU, transitions={}),
            status=StatusLine(bus, timers, CFG.idle_message),
            bus=bus,
            timers=timers,
        )
        assert scene.glider == glider_body(CFG)
        assert scene.glider == _game().scene.glider
