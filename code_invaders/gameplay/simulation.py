"""
Simulation step - advances every alien by one tick.
NO UI DEPENDENCIES.

The step is a pure transform: it never touches the records it is
given, it returns new ones. Misses are reported back to the caller
instead of being acted on here.
"""
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from .aliens import Alien
from .constants import MISS_THRESHOLD


@dataclass
class StepResult:
    """Outcome of one simulation tick."""
    aliens: List[Alien] = field(default_factory=list)
    missed: List[Alien] = field(default_factory=list)
    expired: List[Alien] = field(default_factory=list)


def simulation_step(
    aliens: Sequence[Alien],
    now_ms: float,
    height: float,
    miss_threshold: float = MISS_THRESHOLD
) -> StepResult:
    """
    Advance all aliens, in spawn order.

    - flash expired: dropped
    - still above the bottom line: kept with new y and angle
    - crossed the bottom line: dropped and reported as missed
    """
    result = StepResult()
    bottom = height - miss_threshold

    for alien in aliens:
        if alien.flash_expired(now_ms):
            result.expired.append(alien)
            continue

        new_y = alien.y + alien.speed
        new_angle = alien.angle + alien.angular_velocity

        if new_y < bottom:
            result.aliens.append(replace(alien, y=new_y, angle=new_angle))
        else:
            result.missed.append(alien)

    return result
