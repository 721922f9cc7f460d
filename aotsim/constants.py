"""Game-wide constants and the small timing rules derived from them."""

GAME_TIME_MINUTES = 480
GAME_MINUTES_PER_FRAME = 2
ATTACKER_RESTRICTED_FRAMES = 30
NO_OF_FRAMES = GAME_TIME_MINUTES // GAME_MINUTES_PER_FRAME
MAP_SIZE = 40
TOTAL_ATTACKS_PER_LEVEL = 4
TOTAL_ATTACKS_ON_A_BASE = 4
ROAD_ID = 0
INITIAL_RATING = 1000
WIN_THRESHOLD = 50
SCALE_FACTOR = 20.0
HIGHEST_TROPHY = 2_000.0
BONUS_SCALE = 2


def attacker_allowed(frames_passed: int) -> bool:
    """Return True once attackers are allowed to move."""
    return frames_passed > ATTACKER_RESTRICTED_FRAMES


def get_minute(frames_passed: int) -> int:
    """Return the in-game minute reached after ``frames_passed`` frames."""
    return frames_passed * GAME_MINUTES_PER_FRAME