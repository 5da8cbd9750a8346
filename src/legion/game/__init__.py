"""Game runtime built on legion Types: a Game and the Environment it loops on."""

from legion.game.environment import Environment
from legion.game.game import Game

__all__ = [
    "Game",
    "Environment",
]
