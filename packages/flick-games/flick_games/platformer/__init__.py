"""Twin-robot platformer: two robots, one course, elemental hazards."""
from __future__ import annotations

from flick_games.platformer.components import Controls, PlatformerScene, Robot
from flick_games.platformer.setup import build_platformer, reset_platformer

__all__ = ["Controls", "PlatformerScene", "Robot", "build_platformer", "reset_platformer"]
