"""
Word pool - the token catalog and its fast-lane speeds.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from .constants import DEFAULT_SPEED, FAST_LANE_COUNT, FAST_SPEED_MIN, FAST_SPEED_RANGE


@dataclass(frozen=True)
class WordPool:
    """
    The candidate tokens for one session.

    `codes` keeps first-seen order so a seeded random source
    always produces the same game.
    """
    codes: Tuple[str, ...]
    fast_speeds: Dict[str, float] = field(default_factory=dict)

    def speed_for(self, code: str) -> float:
        """Fall speed for a token (fast lane or default)."""
        return self.fast_speeds.get(code, DEFAULT_SPEED)

    @property
    def is_empty(self) -> bool:
        return len(self.codes) == 0

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __len__(self) -> int:
        return len(self.codes)


def unique_codes(*word_lists: Iterable[str]) -> Tuple[str, ...]:
    """Union of several word lists, duplicates dropped, order kept."""
    return tuple(dict.fromkeys(word for words in word_lists for word in words))


def pick_fast_speeds(
    codes: Sequence[str],
    rng: random.Random,
    count: int = FAST_LANE_COUNT
) -> Dict[str, float]:
    """
    Sample `count` tokens (or all of them, if fewer) without replacement
    and give each an elevated speed from [FAST_SPEED_MIN, FAST_SPEED_MIN + FAST_SPEED_RANGE).
    """
    selected = rng.sample(list(codes), min(count, len(codes)))
    return {word: FAST_SPEED_MIN + rng.random() * FAST_SPEED_RANGE for word in selected}


def build_word_pool(
    keywords: Iterable[str],
    primitives: Iterable[str],
    rng: random.Random,
    fast_count: int = FAST_LANE_COUNT
) -> WordPool:
    """Build the catalog and speed assignment once per session."""
    codes = unique_codes(keywords, primitives)
    return WordPool(codes=codes, fast_speeds=pick_fast_speeds(codes, rng, fast_count))
