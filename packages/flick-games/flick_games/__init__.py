"""flick-games - The twin-robot platformer and the glider dodger on the flick core."""
from __future__ import annotations

from flick_games.config import DodgerConfig, PlatformerConfig
from flick_games.dodger import DodgerScene, Pipe, build_dodger, reset_dodger
from flick_games.game import Game, reset_button
from flick_games.platformer import PlatformerScene, Robot, build_platformer, reset_platformer
from flick_games.scene import DEAD, MENU, PLAYING, WON, Scene
from flick_games.status import StatusLine

__all__ = [
    "DEAD",
    "MENU",
    "PLAYING",
    "WON",
    "DodgerConfig",
    "DodgerScene",
    "Game",
    "Pipe",
    "PlatformerConfig",
    "PlatformerScene",
    "Robot",
    "Scene",
    "StatusLine",
    "build_dodger",
    "build_platformer",
    "reset_button",
    "reset_dodger",
    "reset_platformer",
]
