"""flick-physics - Platformer kinematics and AABB collision for flick games."""
from __future__ import annotations

from flick_physics.collision import (
    AFFINITY,
    LANDING_THRESHOLD,
    clamp_to_bounds,
    hazard_is_lethal,
    land_on,
    on_goal,
    overlaps,
    resolve_gate,
    switch_held,
    within_switch,
)
from flick_physics.components import Body, Gate, Rect, Switch, Zone
from flick_physics.systems import (
    integrate,
    make_bounds_system,
    make_landing_system,
    make_physics_system,
    make_switch_system,
)

__all__ = [
    "AFFINITY",
    "LANDING_THRESHOLD",
    "Body",
    "Gate",
    "Rect",
    "Switch",
    "Zone",
    "clamp_to_bounds",
    "hazard_is_lethal",
    "integrate",
    "land_on",
    "make_bounds_system",
    "make_landing_system",
    "make_physics_system",
    "make_switch_system",
    "on_goal",
    "overlaps",
    "resolve_gate",
    "switch_held",
    "within_switch",
]
