"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# TIMING (all in milliseconds)
# =============================================================================
SPAWN_INTERVAL_MS = 2000.0    # minimum gap between two spawns
FLASH_DURATION_MS = 150.0     # how long a matched alien stays visible

# =============================================================================
# SPEEDS (pixels per tick)
# =============================================================================
DEFAULT_SPEED = 1.5
FAST_LANE_COUNT = 10          # tokens sampled into the fast lane
FAST_SPEED_MIN = 4.0
FAST_SPEED_RANGE = 2.0        # fast speeds fall in [4.0, 6.0)

# =============================================================================
# ROTATION (radians per tick)
# =============================================================================
MAX_ANGULAR_VELOCITY = 0.05   # spin drawn from [-0.05, 0.05)

# =============================================================================
# LAYOUT (pixels)
# =============================================================================
MARGIN = 10                   # horizontal gap kept from both window edges
MISS_THRESHOLD = 20           # rendered alien height; crossing it is a miss
