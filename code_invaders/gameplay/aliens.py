"""
Aliens - the falling tokens the player has to type.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Alien:
    """
    A single falling token.

    `alien_id` is the spawn order within a session; lower ids
    were spawned earlier and win ties when matching.
    """
    alien_id: int
    code: str
    x: float
    y: float
    speed: float
    angle: float = 0.0
    angular_velocity: float = 0.0
    flash_expiry_ms: Optional[float] = None

    @property
    def is_flash_armed(self) -> bool:
        """Matched and waiting out its flash before removal."""
        return self.flash_expiry_ms is not None

    def is_flashing(self, now_ms: float) -> bool:
        """Flash-armed and still inside the flash window."""
        return self.flash_expiry_ms is not None and now_ms < self.flash_expiry_ms

    def flash_expired(self, now_ms: float) -> bool:
        return self.flash_expiry_ms is not None and now_ms > self.flash_expiry_ms

    def arm_flash(self, now_ms: float, duration_ms: float) -> None:
        self.flash_expiry_ms = now_ms + duration_ms
