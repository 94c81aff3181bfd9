"""
Match engine - turns keystrokes into destroyed aliens.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto
from typing import Iterable, Optional

from .aliens import Alien
from .constants import FLASH_DURATION_MS


class InputState(Enum):
    """State of the input buffer."""
    IDLE = auto()           # Nothing typed since the last clear
    ACCUMULATING = auto()   # Characters typed, no match yet


def is_typeable(key: str) -> bool:
    """Only single printable characters reach the buffer."""
    return len(key) == 1 and key.isprintable()


class MatchEngine:
    """
    Incremental typing state machine.

    Each accepted character is appended to the buffer. As soon as the
    whole buffer equals the code of a live alien, that alien is
    flash-armed and the buffer is cleared. Prefixes never match, and
    there is no rejection of wrong characters: the buffer just keeps
    growing until a match or a miss clears it.
    """

    def __init__(self, flash_duration_ms: float = FLASH_DURATION_MS):
        self.flash_duration_ms = flash_duration_ms
        self.buffer = ""

    @property
    def state(self) -> InputState:
        return InputState.ACCUMULATING if self.buffer else InputState.IDLE

    def clear(self) -> None:
        self.buffer = ""

    def find_target(self, aliens: Iterable[Alien]) -> Optional[Alien]:
        """First live alien, in spawn order, whose code equals the buffer."""
        for alien in aliens:
            if not alien.is_flash_armed and alien.code == self.buffer:
                return alien
        return None

    def feed(self, key: str, aliens: Iterable[Alien], now_ms: float) -> Optional[Alien]:
        """
        Consume one key event.
        Returns the alien destroyed by it, if any.
        """
        if not is_typeable(key):
            return None

        self.buffer += key
        target = self.find_target(aliens)
        if target is None:
            return None

        target.arm_flash(now_ms, self.flash_duration_ms)
        self.clear()
        return target
