"""Dodger system factories: launch, flap, pipes, crash and scoring."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flick_fx import spawn
from flick_physics import clamp_to_bounds, overlaps

from flick_games.dodger.components import DodgerScene, Pipe

if TYPE_CHECKING:
    from flick import TickContext

_System = Callable[[DodgerScene, "TickContext"], None]


def make_scroll_system(speed: float, period: float = 80.0) -> _System:
    def scroll_system(scene: DodgerScene, ctx: TickContext) -> None:
        scene.scroll = (scene.scroll + speed * ctx.dt) % period

    return scroll_system


def make_launch_system(keys: tuple[str, ...]) -> _System:
    """In the menu, a launch key press starts the run."""

    def launch_system(scene: DodgerScene, ctx: TickContext) -> None:
        if any(k in keys for k in scene.keyboard.consume_presses()):
            scene.launch = True

    return launch_system


def flap(scene: DodgerScene, impulse: float) -> None:
    """Set the upward impulse and leave a trail spark behind the glider."""
    g = scene.glider
    g.vy = impulse
    spawn(scene.particles, "trail", g.x, g.y + g.h / 2, scene.rng)


def make_flap_system(keys: tuple[str, ...], impulse: float) -> _System:
    """Each launch-key press while playing is one flap."""

    def flap_system(scene: DodgerScene, ctx: TickContext) -> None:
        for code in scene.keyboard.consume_presses():
            if code in keys:
                flap(scene, impulse)

    return flap_system


def make_pipe_system(
    width: float,
    gap: float,
    margin: float,
    speed: float,
    interval: float,
) -> _System:
    """Spawn a pipe every ``interval`` ticks at the right edge and scroll all left."""

    def pipe_system(scene: DodgerScene, ctx: TickContext) -> None:
        scene.spawn_clock += ctx.dt
        if scene.spawn_clock >= interval:
            scene.spawn_clock -= interval
            top = scene.rng.uniform(margin, max(margin, scene.height - margin - gap))
            scene.pipes.append(Pipe(x=scene.width, gap_y=top, w=width, gap=gap))
        for pipe in scene.pipes:
            pipe.x -= speed * ctx.dt
        scene.pipes[:] = [p for p in scene.pipes if p.x + p.w > 0]

    return pipe_system


def crashed(scene: DodgerScene) -> bool:
    g = scene.glider
    if g.y < 0 or g.y + g.h >= scene.height:
        return True
    return any(overlaps(g, seg) for pipe in scene.pipes for seg in pipe.segments(scene.height))


def make_crash_system() -> _System:
    """Any pipe contact or leaving the vertical bounds is fatal. No push-back.

    Scoring stops on the frame of the crash. The glider is clamped after
    the check so it is always drawn on the surface.
    """

    def crash_system(scene: DodgerScene, ctx: TickContext) -> None:
        if not scene.lethal and crashed(scene):
            scene.lethal = True
        if not scene.lethal:
            g = scene.glider
            for pipe in scene.pipes:
                if not pipe.scored and pipe.x + pipe.w < g.x:
                    pipe.scored = True
                    scene.add_score()
        clamp_to_bounds(scene.glider, scene.width, scene.height, horizontal=False)

    return crash_system
