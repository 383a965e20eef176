"""Physics components: movable bodies and static level geometry."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Body:
    """Movable entity (robot, glider). Top-left origin, y grows downward.

    ``dy`` is the vertical displacement applied by the last integration
    step; the landing test uses it to find where the bottom edge was
    before the step.
    """

    x: float
    y: float
    w: float
    h: float
    kind: str
    vx: float = 0.0
    vy: float = 0.0
    grounded: bool = False
    dy: float = 0.0
    home: tuple[float, float] = field(init=False)

    def __post_init__(self) -> None:
        self.home = (self.x, self.y)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def reset(self) -> None:
        """Restore the spawn transform and zero all motion."""
        self.x, self.y = self.home
        self.vx = 0.0
        self.vy = 0.0
        self.dy = 0.0
        self.grounded = False


@dataclass(frozen=True)
class Rect:
    """Static platform or obstacle segment."""

    x: float
    y: float
    w: float
    h: float


@dataclass
class Gate:
    """Door that blocks bodies while closed. ``open`` follows its switches."""

    x: float
    y: float
    w: float
    h: float
    id: str
    open: bool = False


@dataclass
class Switch:
    """Pressure plate. ``held`` is recomputed from body proximity every tick."""

    x: float
    y: float
    radius: float
    id: str
    held: bool = False


@dataclass(frozen=True)
class Zone:
    """Hazard or goal rectangle. ``kind`` is an element ("fire") or a body kind."""

    x: float
    y: float
    w: float
    h: float
    kind: str
