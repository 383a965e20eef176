"""System factories for integration, landing, gates, and bounds."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from flick_physics.collision import clamp_to_bounds, land_on, resolve_gate, switch_held
from flick_physics.components import Body, Gate, Rect, Switch

if TYPE_CHECKING:
    from flick import TickContext

_System = Callable[[Any, "TickContext"], None]


def integrate(body: Body, dt: float, gravity: float, friction: float = 1.0) -> None:
    """Semi-implicit Euler step in 60 Hz tick units: velocity, then position.

    Friction is a per-tick multiplier, so it is raised to ``dt`` to keep a
    half-length frame from braking as hard as a full one.
    """
    body.vy += gravity * dt
    body.x += body.vx * dt
    body.dy = body.vy * dt
    body.y += body.dy
    if friction != 1.0:
        body.vx *= friction ** dt


def make_physics_system(
    gravity: float,
    friction: float = 1.0,
    bodies: Callable[[Any], Iterable[Body]] = lambda c: c.bodies,
) -> _System:
    """Integrate every body returned by ``bodies`` once per frame."""

    def physics_system(context: Any, ctx: "TickContext") -> None:
        for body in bodies(context):
            integrate(body, ctx.dt, gravity, friction)

    return physics_system


def make_landing_system(
    platforms: Callable[[Any], Iterable[Rect]],
    gates: Callable[[Any], Iterable[Gate]],
    bodies: Callable[[Any], Iterable[Body]] = lambda c: c.bodies,
) -> _System:
    """Resolve bodies against platform tops, then against closed gates.

    ``grounded`` is cleared first so a body that walks off a ledge
    loses its jump on the same tick.
    """

    def landing_system(context: Any, ctx: "TickContext") -> None:
        for body in bodies(context):
            body.grounded = False
            for p in platforms(context):
                land_on(body, p)
            for g in gates(context):
                resolve_gate(body, g)

    return landing_system


def make_switch_system(
    switches: Callable[[Any], Iterable[Switch]],
    gates: Callable[[Any], Iterable[Gate]],
    bodies: Callable[[Any], Iterable[Body]] = lambda c: c.bodies,
    on_change: Callable[[Any, "TickContext", Gate], None] | None = None,
) -> _System:
    """Recompute switch ``held`` flags and bind each gate's ``open`` to them.

    A gate is open exactly while at least one switch with its id is held.
    There is no latch: releasing the switch closes the gate on the same
    tick. ``on_change`` fires for every gate whose state flipped.
    """

    def switch_system(context: Any, ctx: "TickContext") -> None:
        movers = list(bodies(context))
        held_ids: set[str] = set()
        for s in switches(context):
            s.held = switch_held(s, movers)
            if s.held:
                held_ids.add(s.id)
        for g in gates(context):
            was_open = g.open
            g.open = g.id in held_ids
            if g.open != was_open and on_change is not None:
                on_change(context, ctx, g)

    return switch_system


def make_bounds_system(
    size: Callable[[Any], tuple[float, float]],
    bodies: Callable[[Any], Iterable[Body]] = lambda c: c.bodies,
    horizontal: bool = True,
    floor: bool = False,
) -> _System:
    """Clamp bodies into the drawable surface after collision resolution."""

    def bounds_system(context: Any, ctx: "TickContext") -> None:
        width, height = size(context)
        for body in bodies(context):
            clamp_to_bounds(body, width, height, horizontal=horizontal, floor=floor)

    return bounds_system
