import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Profile:
    name: str
    base_speed: float
    starting_lives: int
    obstacle_spawn_prob: float
    collectible_spawn_prob: float
    powerup_spawn_prob: float
    bonus_can_spawn_prob: float
    score_multiplier: float
    speed_ramp_per_10s: float
    spawn_interval_seconds: float


EASY = Profile(
    name="easy",
    base_speed=150.0,
    starting_lives=5,
    obstacle_spawn_prob=0.45,
    collectible_spawn_prob=0.40,
    powerup_spawn_prob=0.12,
    bonus_can_spawn_prob=0.10,
    score_multiplier=1.0,
    speed_ramp_per_10s=8.0,
    spawn_interval_seconds=0.7,
)

NORMAL = Profile(
    name="normal",
    base_speed=180.0,
    starting_lives=3,
    obstacle_spawn_prob=0.60,
    collectible_spawn_prob=0.35,
    powerup_spawn_prob=0.08,
    bonus_can_spawn_prob=0.06,
    score_multiplier=1.0,
    speed_ramp_per_10s=12.0,
    spawn_interval_seconds=0.6,
)

HARD = Profile(
    name="hard",
    base_speed=220.0,
    starting_lives=2,
    obstacle_spawn_prob=0.70,
    collectible_spawn_prob=0.30,
    powerup_spawn_prob=0.06,
    bonus_can_spawn_prob=0.04,
    score_multiplier=2.0,
    speed_ramp_per_10s=18.0,
    spawn_interval_seconds=0.5,
)

PROFILES = {p.name: p for p in (EASY, NORMAL, HARD)}
DEFAULT_PROFILE = NORMAL


def resolve_profile(label) -> Profile:
    """
    Map a difficulty label to its profile.

    Labels are matched case-insensitively; anything unrecognized
    (including None) gets the default profile.
    """
    key = str(label).strip().lower() if label is not None else ""
    profile = PROFILES.get(key)
    if profile is None:
        logger.debug("Unknown difficulty %r, using %s", label, DEFAULT_PROFILE.name)
        return DEFAULT_PROFILE
    return profile
