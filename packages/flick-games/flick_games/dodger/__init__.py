"""Side-scrolling glider dodger: endless pipes, one life, a running score."""
from __future__ import annotations

from flick_games.dodger.components import DodgerScene, Pipe
from flick_games.dodger.setup import build_dodger, reset_dodger

__all__ = ["DodgerScene", "Pipe", "build_dodger", "reset_dodger"]
