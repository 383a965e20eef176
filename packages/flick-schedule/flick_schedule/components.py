"""Timer component."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Timer:
    """One-shot countdown in milliseconds. Fires once when remaining reaches 0."""

    name: str
    remaining_ms: float
    callback: Callable[[], None]
