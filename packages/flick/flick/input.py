"""Keyboard state shared between native key events and the frame loop."""

from __future__ import annotations

from typing import Any, Callable


class Keyboard:
    """Held-key map keyed by DOM-style codes ("KeyA", "ArrowUp", "Space").

    Key-down events also queue an edge, so systems that react to a press
    (launch, flap) see it exactly once even if the key is released before
    the next frame.
    """

    def __init__(self) -> None:
        self._held: dict[str, bool] = {}
        self._pressed: list[str] = []

    def press(self, code: str) -> None:
        if not self._held.get(code, False):
            self._pressed.append(code)
        self._held[code] = True

    def release(self, code: str) -> None:
        self._held[code] = False

    def held(self, code: str) -> bool:
        return self._held.get(code, False)

    def any_held(self, *codes: str) -> bool:
        return any(self._held.get(c, False) for c in codes)

    def consume_presses(self) -> list[str]:
        """Return and clear the key-down edges queued since the last call."""
        pressed = self._pressed
        self._pressed = []
        return pressed

    def clear(self) -> None:
        self._held.clear()
        self._pressed.clear()


def make_press_reset_system(
    keyboard: Callable[[Any], Keyboard] = lambda c: c.keyboard,
) -> Callable[[Any, Any], None]:
    """Return a system that drops key-down edges nothing consumed this frame.

    Run it late in the frame so states without an edge consumer (dead,
    won) do not carry stale presses into the next state.
    """

    def press_reset_system(context: Any, ctx: Any) -> None:
        keyboard(context).consume_presses()

    return press_reset_system
