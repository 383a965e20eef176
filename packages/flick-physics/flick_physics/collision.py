"""Pure AABB collision tests and resolution policies."""
from __future__ import annotations

import math
from typing import Iterable, Protocol

from flick_physics.components import Body, Gate, Switch, Zone

LANDING_THRESHOLD = 6.0

# Body kind -> the hazard element it survives. Any other element is lethal.
AFFINITY: dict[str, str] = {"spark": "fire", "wave": "water"}


class Box(Protocol):
    x: float
    y: float
    w: float
    h: float


def overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap. Touching edges do not count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def land_on(body: Body, platform: Box, threshold: float = LANDING_THRESHOLD) -> bool:
    """One-sided landing test against a platform's top edge.

    The body lands when it overlaps the platform horizontally, its bottom
    edge is below the top, and before this tick's vertical displacement
    the bottom was no more than ``threshold`` below the top. Bodies
    entering from the side or from below do not snap on top.
    """
    if not (body.x < platform.x + platform.w and body.x + body.w > platform.x):
        return False
    bottom = body.y + body.h
    if bottom <= platform.y or bottom - body.dy > platform.y + threshold:
        return False
    body.y = platform.y - body.h
    body.vy = 0.0
    body.grounded = True
    return True


def resolve_gate(body: Body, gate: Gate) -> bool:
    """Push a body out of a closed gate along its direction of motion."""
    if gate.open or not overlaps(body, gate):
        return False
    if body.vx > 0:
        body.x = gate.x - body.w
    elif body.vx < 0:
        body.x = gate.x + gate.w
    if body.vy > 0:
        body.y = gate.y - body.h
        body.vy = 0.0
        body.grounded = True
    return True


def within_switch(body: Body, switch: Switch) -> bool:
    """Centre-distance proximity: closer than radius plus half the body's short side."""
    cx, cy = body.center
    dist = math.hypot(cx - switch.x, cy - switch.y)
    return dist < switch.radius + min(body.w, body.h) / 2


def switch_held(switch: Switch, bodies: Iterable[Body]) -> bool:
    return any(within_switch(b, switch) for b in bodies)


def hazard_is_lethal(body: Body, zone: Zone, affinity: dict[str, str] = AFFINITY) -> bool:
    """A hazard kills any body whose affinity does not match its element."""
    return overlaps(body, zone) and affinity.get(body.kind) != zone.kind


def on_goal(body: Body, zone: Zone) -> bool:
    """A goal only counts for the body kind it is assigned to."""
    return zone.kind == body.kind and overlaps(body, zone)


def clamp_to_bounds(
    body: Body,
    width: float,
    height: float,
    horizontal: bool = True,
    floor: bool = False,
) -> bool:
    """Keep a body inside the drawable surface. Returns True if it was moved.

    With ``floor`` the bottom edge acts as ground: vertical velocity is
    zeroed and the body becomes grounded, so velocity cannot grow
    without bound while pinned there.
    """
    moved = False
    max_y = max(0.0, height - body.h)
    if body.y > max_y:
        body.y = max_y
        moved = True
        if floor:
            body.vy = 0.0
            body.grounded = True
    elif body.y < 0.0:
        body.y = 0.0
        moved = True
        if body.vy < 0:
            body.vy = 0.0
    if horizontal:
        max_x = max(0.0, width - body.w)
        if body.x > max_x:
            body.x = max_x
            body.vx = 0.0
            moved = True
        elif body.x < 0.0:
            body.x = 0.0
            body.vx = 0.0
            moved = True
    # NaN compares false against every bound above.
    if not math.isfinite(body.y):
        body.y = max_y
        body.vy = 0.0
        moved = True
    if not math.isfinite(body.x):
        body.x = 0.0
        body.vx = 0.0
        moved = True
    return moved
