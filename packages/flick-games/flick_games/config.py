"""Tuning tables for both games. Units are pixels and 60 Hz ticks."""
from __future__ import annotations

from dataclasses import dataclass

# Surface
WIDTH, HEIGHT = 960, 540
FPS = 60
MAX_DT = 2.0
STATUS_HOLD_MS = 2000.0

# Front-end key codes
RESET_KEY = "KeyR"
FULLSCREEN_KEY = "KeyF"
QUIT_KEY = "Escape"


@dataclass(frozen=True)
class PlatformerConfig:
    width: int = WIDTH
    height: int = HEIGHT
    gravity: float = 0.6
    friction: float = 0.75
    run_accel: float = 0.5
    jump_impulse: float = -11.0
    robot_w: float = 34.0
    robot_h: float = 46.0
    scroll_speed: float = 0.2
    death_shards: int = 20
    win_confetti: int = 60
    status_hold_ms: float = STATUS_HOLD_MS
    idle_message: str = "Boot the prototypes and reach the pads."
    hazard_message: str = "Hazard shutdown! Rerouting power."
    reset_message: str = "Course reset: recalibrating motors."
    win_message: str = "Course cleared! Robots synced for the next decode season stage."
    gate_open_message: str = "Gate {id} opened."
    gate_closed_message: str = "Gate {id} sealed."

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)


@dataclass(frozen=True)
class DodgerConfig:
    width: int = WIDTH
    height: int = HEIGHT
    gravity: float = 0.45
    flap_impulse: float = -7.5
    glider_x: float = 160.0
    glider_w: float = 34.0
    glider_h: float = 24.0
    pipe_w: float = 70.0
    pipe_gap: float = 170.0
    pipe_margin: float = 60.0
    pipe_speed: float = 3.2
    pipe_interval: float = 90.0
    scroll_speed: float = 0.6
    death_shards: int = 20
    launch_keys: tuple[str, ...] = ("Space", "ArrowUp", "KeyW")
    status_hold_ms: float = STATUS_HOLD_MS
    idle_message: str = "Press Space to launch."
    crash_message: str = "Crash detected. Hangar doors reopened."
    reset_message: str = "Run reset."

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)
        if self.pipe_gap + 2 * self.pipe_margin > self.height:
            raise ValueError("pipe gap and margins do not fit the surface height")


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"surface size must be positive, got {width}x{height}")
