"""Best-effort fullscreen tracking."""
from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Fullscreen:
    """Tracks whether the window is fullscreen.

    ``request(want)`` asks the window system for the new mode. If it
    raises one of ``errors`` the failure is logged at debug level and the
    tracked state stays as it was.
    """

    def __init__(
        self,
        request: Callable[[bool], Any],
        errors: tuple[type[BaseException], ...] = (OSError,),
    ) -> None:
        self._request = request
        self._errors = errors
        self.active = False

    def toggle(self) -> bool:
        want = not self.active
        try:
            self._request(want)
        except self._errors as exc:
            logger.debug("fullscreen request (%s) ignored: %s", want, exc)
            return self.active
        self.active = want
        return self.active
