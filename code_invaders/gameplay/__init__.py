"""
Gameplay core for Code Invaders.
NO UI DEPENDENCIES.
"""

from code_invaders.gameplay.aliens import Alien
from code_invaders.gameplay.words import WordPool, build_word_pool
from code_invaders.gameplay.session import (
    GameSession,
    Score,
    GameEvent,
    AlienSpawnedEvent,
    AlienMatchedEvent,
    AlienMissedEvent,
)

__all__ = [
    "Alien",
    "WordPool",
    "build_word_pool",
    "GameSession",
    "Score",
    "GameEvent",
    "AlienSpawnedEvent",
    "AlienMatchedEvent",
    "AlienMissedEvent",
]
