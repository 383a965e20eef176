"""pygame front-end: window, render surface adapter, and key mapping."""
from __future__ import annotations

import logging

import pygame

from flick.types import Color

from flick_games.config import FPS, FULLSCREEN_KEY, QUIT_KEY, RESET_KEY
from flick_games.display import Fullscreen
from flick_games.game import Game

logger = logging.getLogger(__name__)

TITLE = {
    "platformer": "flick - Twin Robots",
    "dodger": "flick - Glider",
}

_NAMED_KEYS = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_SPACE: "Space",
    pygame.K_ESCAPE: "Escape",
    pygame.K_RETURN: "Enter",
}


def key_code(key: int) -> str | None:
    """Translate a pygame key constant into a DOM-style code."""
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if pygame.K_a <= key <= pygame.K_z:
        return "Key" + chr(key).upper()
    if pygame.K_0 <= key <= pygame.K_9:
        return "Digit" + chr(key)
    return None


class PygameSurface:
    """Adapts a ``pygame.Surface`` to the flick render surface protocol.

    pygame's draw functions do not blend, so translucent shapes are drawn
    onto a scratch SRCALPHA surface and blitted.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self._target = target
        self._fonts: dict[int, pygame.font.Font] = {}
        self._gradients: dict[tuple, pygame.Surface] = {}

    @property
    def width(self) -> int:
        return self._target.get_width()

    @property
    def height(self) -> int:
        return self._target.get_height()

    def retarget(self, target: pygame.Surface) -> None:
        self._target = target
        self._gradients.clear()

    def _blit_alpha(self, x: float, y: float, w: int, h: int, draw) -> None:
        scratch = pygame.Surface((max(1, w), max(1, h)), pygame.SRCALPHA)
        draw(scratch)
        self._target.blit(scratch, (int(x), int(y)))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        iw, ih = max(0, int(w)), max(0, int(h))
        if iw == 0 or ih == 0:
            return
        if len(color) == 4 and color[3] < 255:
            self._blit_alpha(x, y, iw, ih, lambda s: s.fill(color))
        else:
            pygame.draw.rect(self._target, color[:3], pygame.Rect(int(x), int(y), iw, ih))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        r = max(1, int(radius))
        if len(color) == 4 and color[3] < 255:
            self._blit_alpha(
                x - r, y - r, 2 * r, 2 * r,
                lambda s: pygame.draw.circle(s, color, (r, r), r),
            )
        else:
            pygame.draw.circle(self._target, color[:3], (int(x), int(y)), r)

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: int = 1,
    ) -> None:
        if len(color) == 4 and color[3] < 255:
            left, top = min(x1, x2), min(y1, y2)
            w = int(abs(x2 - x1)) + width
            h = int(abs(y2 - y1)) + width
            self._blit_alpha(
                left, top, w, h,
                lambda s: pygame.draw.line(
                    s, color, (x1 - left, y1 - top), (x2 - left, y2 - top), width,
                ),
            )
        else:
            pygame.draw.line(self._target, color[:3], (x1, y1), (x2, y2), width)

    def fill_gradient(
        self, x: float, y: float, w: float, h: float, top: Color, bottom: Color,
    ) -> None:
        key = (int(w), int(h), tuple(top), tuple(bottom))
        cached = self._gradients.get(key)
        if cached is None:
            cached = pygame.Surface((max(1, key[0]), max(1, key[1])))
            span = max(1, key[1] - 1)
            for row in range(key[1]):
                t = row / span
                shade = tuple(int(a + (b - a) * t) for a, b in zip(top[:3], bottom[:3]))
                pygame.draw.line(cached, shade, (0, row), (key[0], row))
            self._gradients[key] = cached
        self._target.blit(cached, (int(x), int(y)))

    def draw_text(
        self, text: str, x: float, y: float, color: Color, size: int = 16, align: str = "left",
    ) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        rendered = font.render(text, True, color[:3])
        if align == "center":
            x -= rendered.get_width() / 2
        elif align == "right":
            x -= rendered.get_width()
        self._target.blit(rendered, (int(x), int(y)))


def run(game: Game, fps: int = FPS) -> None:
    """Open a resizable window and drive ``game`` until the window closes."""
    pygame.init()
    scene = game.scene
    screen = pygame.display.set_mode((int(scene.width), int(scene.height)), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE.get(game.name, "flick"))
    surface = PygameSurface(screen)
    game.attach(surface)
    pg_clock = pygame.time.Clock()
    fullscreen = Fullscreen(
        lambda want: pygame.display.toggle_fullscreen(), errors=(pygame.error,),
    )

    def pump() -> None:
        pg_clock.tick(fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.engine.stop()
            elif event.type == pygame.KEYDOWN:
                code = key_code(event.key)
                if code == QUIT_KEY:
                    game.engine.stop()
                elif code == RESET_KEY:
                    game.manual_reset()
                elif code == FULLSCREEN_KEY and game.name == "dodger":
                    fullscreen.toggle()
                elif code is not None:
                    game.key_down(code)
            elif event.type == pygame.KEYUP:
                code = key_code(event.key)
                if code is not None:
                    game.key_up(code)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                game.click(*event.pos)
            elif event.type == pygame.VIDEORESIZE:
                surface.retarget(pygame.display.get_surface())
                game.resize(surface.width, surface.height)

    game.engine.add_system(lambda s, t: pygame.display.flip())
    logger.info("starting %s at %d fps", game.name, fps)
    try:
        game.engine.run_forever(wait=pump)
    finally:
        pygame.quit()
