"""Tests for particle spawning from the parameter table."""
from __future__ import annotations

import math
import random

import pytest
from flick.types import Color, UnknownParticleKindError

from flick_fx import CONFETTI, KINDS, SHARD, TRAIL, spawn
from flick_fx import components


class TestSpawn:
    def test_spawns_count_into_pool(self) -> None:
        pool = []
        born = spawn(pool, "shard", 10.0, 20.0, random.Random(1), count=20)
        assert len(pool) == 20
        assert born == pool
        assert all(p.kind == "shard" and p.x == 10.0 and p.y == 20.0 for p in pool)

    def test_appends_to_existing_pool(self) -> None:
        pool = []
        spawn(pool, "trail", 0.0, 0.0, random.Random(1))
        spawn(pool, "confetti", 0.0, 0.0, random.Random(1), count=3)
        assert [p.kind for p in pool] == ["trail", "confetti", "confetti", "confetti"]

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownParticleKindError) as exc:
            spawn([], "smoke", 0.0, 0.0, random.Random(1))
        assert exc.value.kind == "smoke"

    def test_color_override(self) -> None:
        pool = []
        spawn(pool, "shard", 0.0, 0.0, random.Random(1), count=5, color=(1, 2, 3))
        assert {p.color for p in pool} == {(1, 2, 3)}

    def test_same_seed_same_particles(self) -> None:
        a, b = [], []
        spawn(a, "confetti", 5.0, 5.0, random.Random(99), count=10)
        spawn(b, "confetti", 5.0, 5.0, random.Random(99), count=10)
        assert a == b


@pytest.mark.parametrize("params", [CONFETTI, SHARD, TRAIL], ids=lambda k: k.name)
def test_ranges_respected(params) -> None:
    pool = []
    spawn(pool, params.name, 0.0, 0.0, random.Random(7), count=300)
    for p in pool:
        speed = math.hypot(p.vx, p.vy)
        assert params.speed[0] - 1e-9 <= speed <= params.speed[1] + 1e-9
        assert params.life[0] <= p.life <= params.life[1]
        assert params.size[0] <= p.size <= params.size[1]
        assert params.spin[0] <= p.spin <= params.spin[1]
        assert p.gravity == params.gravity
        assert p.fade == params.fade
        assert p.color in params.colors


def test_confetti_launches_upward() -> None:
    pool = []
    spawn(pool, "confetti", 0.0, 0.0, random.Random(3), count=100)
    assert all(p.vy <= 1e-9 for p in pool)


def test_trail_drifts_backward() -> None:
    pool = []
    spawn(pool, "trail", 0.0, 0.0, random.Random(3), count=100)
    assert all(p.vx < 0 for p in pool)


def test_table_has_three_kinds() -> None:
    assert set(KINDS) == {"confetti", "shard", "trail"}
    assert all(k.life[1] < math.inf for k in KINDS.values())


def test_particle_colors_use_the_core_color_type():
    assert components.Color is Color
