"""
Alien spawner - creates new aliens inside the viewport.
NO UI DEPENDENCIES.
"""
import random
from typing import Callable, Optional

from .aliens import Alien
from .words import WordPool
from .constants import MARGIN, MAX_ANGULAR_VELOCITY, SPAWN_INTERVAL_MS


TextWidth = Callable[[str], float]


def spawn_due(now_ms: float, last_spawn_ms: Optional[float]) -> bool:
    """
    True when the spawn cadence allows a new alien.
    The very first call (no previous spawn) is always due.
    """
    if last_spawn_ms is None:
        return True
    return now_ms - last_spawn_ms > SPAWN_INTERVAL_MS


def spawn_x(viewport_width: float, text_width: float, rng: random.Random, margin: float = MARGIN) -> float:
    """
    Random x keeping the whole token on screen.
    Falls back to the left margin when the viewport is too narrow.
    """
    min_x = margin
    max_x = viewport_width - text_width - margin
    if max_x > min_x:
        return min_x + rng.random() * (max_x - min_x)
    return min_x


class AlienSpawner:
    """
    Produces aliens from a word pool.

    The text width callable measures a token under the game font;
    it comes from the renderer (or a fake in tests).
    """

    def __init__(
        self,
        pool: WordPool,
        rng: random.Random,
        text_width: TextWidth,
        margin: float = MARGIN
    ):
        self.pool = pool
        self.rng = rng
        self.text_width = text_width
        self.margin = margin

    def spawn(self, alien_id: int, viewport_width: float) -> Optional[Alien]:
        """
        Create one alien at the top of the viewport.
        Returns None for an empty catalog.
        """
        if self.pool.is_empty:
            return None

        code = self.rng.choice(self.pool.codes)
        x = spawn_x(viewport_width, self.text_width(code), self.rng, self.margin)
        angular_velocity = (self.rng.random() - 0.5) * 2 * MAX_ANGULAR_VELOCITY

        return Alien(
            alien_id=alien_id,
            code=code,
            x=x,
            y=0.0,
            speed=self.pool.speed_for(code),
            angle=0.0,
            angular_velocity=angular_velocity,
        )
