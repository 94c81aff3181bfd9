"""
Game session - orchestrates spawning, simulation and matching.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from .aliens import Alien
from .words import WordPool, build_word_pool
from .languages import get_words
from .spawner import AlienSpawner, spawn_due
from .simulation import simulation_step
from .matching import MatchEngine, InputState
from .constants import MARGIN, MISS_THRESHOLD

logger = logging.getLogger(__name__)


@dataclass
class Score:
    """Session counters. Never decremented."""
    spawned: int = 0
    matched: int = 0


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class AlienSpawnedEvent(GameEvent):
    """A new alien entered at the top."""
    alien: Alien


@dataclass
class AlienMatchedEvent(GameEvent):
    """The player finished typing an alien's code."""
    alien: Alien


@dataclass
class AlienMissedEvent(GameEvent):
    """An alien reached the bottom."""
    alien: Alien


class GameSession:
    """
    All state for one game, with no ambient globals.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        session = GameSession.for_language("Python", 800, 600, text_width)
        events = session.tick(now_ms)
        events = session.type_key("d", now_ms)
        # UI reads session state and renders
    """

    def __init__(
        self,
        pool: WordPool,
        width: float,
        height: float,
        text_width: Callable[[str], float],
        rng: Optional[random.Random] = None,
        language: str = ""
    ):
        self.pool = pool
        self.width = width
        self.height = height
        self.text_width = text_width
        self.rng = rng if rng is not None else random.Random()
        self.language = language

        self.spawner = AlienSpawner(pool, self.rng, text_width)
        self.match_engine = MatchEngine()

        # Alien arena, always in spawn order
        self.aliens: List[Alien] = []
        self.score = Score()
        self.last_spawn_ms: Optional[float] = None
        self._next_alien_id = 0

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        if pool.is_empty:
            logger.warning(f"Empty word catalog for '{language}'; no aliens will spawn")

    @classmethod
    def for_language(
        cls,
        language: str,
        width: float,
        height: float,
        text_width: Callable[[str], float],
        rng: Optional[random.Random] = None
    ) -> "GameSession":
        """Build the word pool for a language and start a session on it."""
        rng = rng if rng is not None else random.Random()
        words = get_words(language)
        pool = build_word_pool(words.keywords, words.primitives, rng)
        logger.info(
            f"Session started for {language}: {len(pool)} tokens, "
            f"{len(pool.fast_speeds)} in the fast lane"
        )
        return cls(pool, width, height, text_width, rng=rng, language=language)

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self, now_ms: float) -> List[GameEvent]:
        """
        Advance the game by one frame.
        Returns list of events that occurred.
        """
        self._events = []

        if spawn_due(now_ms, self.last_spawn_ms):
            self._spawn(now_ms)

        result = simulation_step(self.aliens, now_ms, self.height, MISS_THRESHOLD)
        self.aliens = result.aliens

        if result.missed:
            # One clear for the whole tick, one event per alien
            self.match_engine.clear()
            for alien in result.missed:
                logger.debug(f"Missed '{alien.code}' (#{alien.alien_id})")
                self._events.append(AlienMissedEvent(alien))

        return self._events

    def _spawn(self, now_ms: float) -> None:
        alien = self.spawner.spawn(self._next_alien_id, self.width)
        if alien is None:
            return

        self._next_alien_id += 1
        self.aliens.append(alien)
        self.score.spawned += 1
        self.last_spawn_ms = now_ms
        logger.debug(f"Spawned '{alien.code}' (#{alien.alien_id}) at x={alien.x:.1f}")
        self._events.append(AlienSpawnedEvent(alien))

    # =========================================================================
    # INPUT COMMANDS
    # =========================================================================

    def type_key(self, key: str, now_ms: float) -> List[GameEvent]:
        """
        Feed one key event to the match engine.
        Multi-character and control keys are ignored.
        """
        matched = self.match_engine.feed(key, self.aliens, now_ms)
        if matched is None:
            return []

        self.score.matched += 1
        logger.debug(f"Matched '{matched.code}' (#{matched.alien_id})")
        return [AlienMatchedEvent(matched)]

    def resize(self, width: float, height: float) -> None:
        """
        Rescale alien x positions to a new viewport width,
        clamped so every token stays inside the margins.
        """
        scale = width / self.width if self.width else 1.0

        for alien in self.aliens:
            text_width = self.text_width(alien.code)
            new_x = alien.x * scale
            if new_x < MARGIN:
                new_x = MARGIN
            if new_x + text_width > width - MARGIN:
                new_x = width - text_width - MARGIN
            alien.x = new_x

        self.width = width
        self.height = height

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def input_buffer(self) -> str:
        return self.match_engine.buffer

    @property
    def input_state(self) -> InputState:
        return self.match_engine.state

    def get_score(self) -> tuple:
        """Get (matched, spawned)."""
        return (self.score.matched, self.score.spawned)

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, duration_ms: float, frame_ms: float = 1000.0 / 60, start_ms: float = 0.0) -> List[GameEvent]:
        """
        Run ticks from start_ms for duration_ms.
        Returns all events that occurred.
        """
        all_events = []
        now = start_ms
        while now < start_ms + duration_ms:
            all_events.extend(self.tick(now))
            now += frame_ms
        return all_events
