"""Tests for integration, landing, switch/gate, and bounds systems."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from flick import Engine, VirtualClock
from flick.types import NOMINAL_FRAME_MS
from flick_physics import (
    Body,
    Gate,
    Rect,
    Switch,
    integrate,
    make_bounds_system,
    make_landing_system,
    make_physics_system,
    make_switch_system,
)


@dataclass
class Level:
    bodies: list[Body] = field(default_factory=list)
    platforms: list[Rect] = field(default_factory=list)
    gates: list[Gate] = field(default_factory=list)
    switches: list[Switch] = field(default_factory=list)
    width: float = 960
    height: float = 540


def _engine(level: Level) -> Engine:
    return Engine(level, clock=VirtualClock(), seed=42)


class TestIntegrate:
    def test_full_tick(self) -> None:
        body = Body(0, 0, 10, 10, "glider", vx=2.0)
        integrate(body, 1.0, gravity=0.6, friction=0.75)
        assert abs(body.vy - 0.6) < 1e-9
        assert abs(body.y - 0.6) < 1e-9
        assert abs(body.dy - 0.6) < 1e-9
        assert body.x == 2.0
        assert abs(body.vx - 1.5) < 1e-9

    def test_half_tick_scales(self) -> None:
        body = Body(0, 0, 10, 10, "glider", vx=2.0)
        integrate(body, 0.5, gravity=0.6, friction=0.75)
        assert abs(body.vy - 0.3) < 1e-9
        assert abs(body.y - 0.15) < 1e-9
        assert abs(body.x - 1.0) < 1e-9
        assert abs(body.vx - 2.0 * 0.75 ** 0.5) < 1e-9

    def test_no_friction_keeps_vx(self) -> None:
        body = Body(0, 0, 10, 10, "glider", vx=3.2)
        integrate(body, 1.0, gravity=0.45)
        assert body.vx == 3.2


class TestPhysicsSystem:
    def test_moves_all_bodies(self) -> None:
        level = Level(bodies=[Body(0, 0, 10, 10, "a"), Body(50, 0, 10, 10, "b")])
        engine = _engine(level)
        engine.add_system(make_physics_system(gravity=1.0))
        engine.run(3)
        for body in level.bodies:
            # vy: 1, 2, 3 -> y = 6
            assert abs(body.y - 6.0) < 1e-9

    def test_slow_frame_is_clamped_to_two_ticks(self) -> None:
        level = Level(bodies=[Body(0, 0, 10, 10, "a", vx=1.0)])
        engine = _engine(level)
        engine.add_system(make_physics_system(gravity=0.0))
        engine.step(0.0)
        engine.step(10_000.0)
        assert abs(level.bodies[0].x - 3.0) < 1e-9


class TestLandingSystem:
    def test_body_comes_to_rest_on_platform(self) -> None:
        level = Level(
            bodies=[Body(20, 0, 34, 46, "spark")],
            platforms=[Rect(0, 200, 300, 20)],
        )
        engine = _engine(level)
        engine.add_system(make_physics_system(gravity=0.6, friction=0.75))
        engine.add_system(make_landing_system(lambda c: c.platforms, lambda c: c.gates))
        engine.run(120)
        body = level.bodies[0]
        assert body.y == 200 - 46
        assert body.vy == 0.0
        assert body.grounded

    def test_walking_off_ledge_clears_grounded(self) -> None:
        body = Body(400, 154, 34, 46, "spark", grounded=True)
        level = Level(bodies=[body], platforms=[Rect(0, 200, 300, 20)])
        engine = _engine(level)
        engine.add_system(make_physics_system(gravity=0.6))
        engine.add_system(make_landing_system(lambda c: c.platforms, lambda c: c.gates))
        engine.step(0.0)
        assert not body.grounded

    def test_closed_gate_blocks(self) -> None:
        body = Body(200, 154, 34, 46, "spark", vx=4.0)
        level = Level(
            bodies=[body],
            platforms=[Rect(0, 200, 600, 20)],
            gates=[Gate(250, 130, 20, 70, "A")],
        )
        engine = _engine(level)
        engine.add_system(make_physics_system(gravity=0.6))
        engine.add_system(make_landing_system(lambda c: c.platforms, lambda c: c.gates))
        engine.run(30)
        assert body.x + body.w <= 250


class TestSwitchSystem:
    def _level(self) -> Level:
        return Level(
            bodies=[Body(413, 381, 34, 46, "spark")],
            gates=[Gate(560, 430, 20, 70, "A"), Gate(700, 430, 20, 70, "B")],
            switches=[Switch(430, 404, 12, "A")],
        )

    def test_held_switch_opens_gate(self) -> None:
        level = self._level()
        engine = _engine(level)
        engine.add_system(make_switch_system(lambda c: c.switches, lambda c: c.gates))
        engine.step(0.0)
        assert level.switches[0].held
        assert level.gates[0].open
        assert not level.gates[1].open

    def test_release_recloses_without_latch(self) -> None:
        level = self._level()
        engine = _engine(level)
        engine.add_system(make_switch_system(lambda c: c.switches, lambda c: c.gates))
        engine.step(0.0)
        level.bodies[0].x = 0.0
        engine.step(NOMINAL_FRAME_MS)
        assert not level.switches[0].held
        assert not level.gates[0].open

    def test_on_change_reports_flips_only(self) -> None:
        level = self._level()
        changes = []
        engine = _engine(level)
        engine.add_system(make_switch_system(
            lambda c: c.switches,
            lambda c: c.gates,
            on_change=lambda c, t, g: changes.append((g.id, g.open)),
        ))
        engine.run(3)
        level.bodies[0].x = 0.0
        engine.run(2)
        assert changes == [("A", True), ("A", False)]

    def test_two_switches_one_gate_or(self) -> None:
        level = self._level()
        level.switches.append(Switch(100, 100, 12, "A"))
        engine = _engine(level)
        engine.add_system(make_switch_system(lambda c: c.switches, lambda c: c.gates))
        rng = random.Random(9)
        for i in range(50):
            level.bodies[0].x = rng.choice([0.0, 83.0, 413.0])
            level.bodies[0].y = rng.choice([77.0, 381.0])
            engine.step(i * NOMINAL_FRAME_MS)
            for gate in level.gates:
                expected = any(s.held for s in level.switches if s.id == gate.id)
                assert gate.open == expected


class TestBoundsSystem:
    def test_clamps_every_body(self) -> None:
        level = Level(bodies=[Body(-10, 900, 34, 46, "a"), Body(2000, -40, 34, 46, "b")])
        engine = _engine(level)
        engine.add_system(make_bounds_system(lambda c: (c.width, c.height)))
        engine.step(0.0)
        for body in level.bodies:
            assert 0 <= body.y <= 540 - 46
            assert 0 <= body.x <= 960 - 34

    def test_vertical_only(self) -> None:
        level = Level(bodies=[Body(-10, 900, 34, 24, "glider")])
        engine = _engine(level)
        engine.add_system(make_bounds_system(lambda c: (c.width, c.height), horizontal=False))
        engine.step(0.0)
        assert level.bodies[0].x == -10
        assert level.bodies[0].y == 540 - 24
