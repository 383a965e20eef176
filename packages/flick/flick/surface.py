"""Render surface protocol and a headless recording implementation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from flick.types import Color


class Surface(Protocol):
    """The 2D drawing primitives the games render through."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: int = 1,
    ) -> None: ...

    def fill_gradient(
        self, x: float, y: float, w: float, h: float, top: Color, bottom: Color,
    ) -> None: ...

    def draw_text(
        self, text: str, x: float, y: float, color: Color, size: int = 16, align: str = "left",
    ) -> None: ...


@dataclass
class RecordingSurface:
    """Surface that records every draw call instead of rasterising it."""

    width: int = 960
    height: int = 540
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.calls.append(("fill_rect", (x, y, w, h, color)))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.calls.append(("fill_circle", (x, y, radius, color)))

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: int = 1,
    ) -> None:
        self.calls.append(("stroke_line", (x1, y1, x2, y2, color, width)))

    def fill_gradient(
        self, x: float, y: float, w: float, h: float, top: Color, bottom: Color,
    ) -> None:
        self.calls.append(("fill_gradient", (x, y, w, h, top, bottom)))

    def draw_text(
        self, text: str, x: float, y: float, color: Color, size: int = 16, align: str = "left",
    ) -> None:
        self.calls.append(("draw_text", (text, x, y, color, size, align)))

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)

    def texts(self) -> list[str]:
        return [args[0] for call, args in self.calls if call == "draw_text"]

    def clear(self) -> None:
        self.calls.clear()
