"""Draw helpers shared by both games: backdrop and HUD overlay."""
from __future__ import annotations

from typing import TYPE_CHECKING

from flick_games.game import reset_button
from flick_games.scene import DEAD, MENU, WON, Scene

if TYPE_CHECKING:
    from flick import Surface

BG_TOP = (16, 24, 51)
BG_BOTTOM = (7, 11, 23)
STRIPE = (255, 255, 255, 10)
HUD_COLOR = (230, 236, 255)
HUD_DIM = (150, 162, 200)
BUTTON = (49, 66, 109)
BUTTON_TEXT = (255, 191, 60)


def draw_backdrop(surface: "Surface", scene: Scene, spacing: float = 80.0, lean: float = 20.0) -> None:
    """Vertical gradient with slanted stripes offset by the scroll position."""
    w, h = surface.width, surface.height
    surface.fill_gradient(0, 0, w, h, BG_TOP, BG_BOTTOM)
    x = -(scene.scroll % spacing)
    while x < w + lean:
        surface.stroke_line(x, 0, x - lean, h, STRIPE)
        x += spacing


def draw_overlay(
    surface: "Surface",
    scene: Scene,
    prompt: str,
    show_score: bool = False,
) -> None:
    """Status line, optional score, state banner, and the reset control."""
    w, h = surface.width, surface.height
    surface.draw_text(scene.status.text, 16, h - 28, HUD_COLOR, size=16)
    if show_score:
        surface.draw_text(str(scene.score), w / 2, 24, HUD_COLOR, size=40, align="center")
    if scene.state == MENU:
        surface.draw_text(prompt, w / 2, h / 2 - 12, HUD_COLOR, size=24, align="center")
    elif scene.state == WON:
        surface.draw_text("COURSE CLEARED", w / 2, h / 2 - 12, BUTTON_TEXT, size=32, align="center")
    elif scene.state == DEAD:
        surface.draw_text("SYSTEM FAILURE", w / 2, h / 2 - 12, HUD_DIM, size=24, align="center")
    bx, by, bw, bh = reset_button(scene)
    surface.fill_rect(bx, by, bw, bh, BUTTON)
    surface.draw_text("Reset", bx + bw / 2, by + 6, BUTTON_TEXT, size=16, align="center")
