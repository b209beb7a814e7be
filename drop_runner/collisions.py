import logging
from enum import Enum

from drop_runner import powerups, scoring
from drop_runner.collaborators import Cue
from drop_runner.entities import ObstacleKind, PowerupKind
from drop_runner.run_state import end_game
from drop_runner.settings import (
    BONUS_CONFETTI_POINTS,
    BONUS_POINTS,
    COLLECT_POINTS,
    JUMP_IMPULSE,
    STOMP_BOUNCE,
    STOMP_POINTS,
    STOMP_TOLERANCE,
)

logger = logging.getLogger(__name__)


class BonusOutcome(Enum):
    EXTRA_LIFE = "extra_life"
    SCORE = "score"
    FILTER = "filter"
    SPEED_BOOST = "speed_boost"
    SCORE_CONFETTI = "score_confetti"


def overlaps(a, b) -> bool:
    # strict on every edge: touching rectangles do not collide
    return (
        a.x < b.x + b.w and
        a.x + a.w > b.x and
        a.y < b.y + b.h and
        a.y + a.h > b.y
    )


def is_stomp(player, ob) -> bool:
    return player.vy > 0 and player.prev_bottom <= ob.y + STOMP_TOLERANCE


def apply_bonus(state, outcome=None):
    if outcome is None:
        outcome = state.rng.choice(list(BonusOutcome))

    if outcome is BonusOutcome.EXTRA_LIFE:
        state.lives += 1
    elif outcome is BonusOutcome.SCORE:
        scoring.award(state, scoring.scaled(state, BONUS_POINTS))
    elif outcome is BonusOutcome.FILTER:
        powerups.activate(state, PowerupKind.FILTER)
    elif outcome is BonusOutcome.SPEED_BOOST:
        powerups.activate(state, PowerupKind.SPEED_BOOST)
    elif outcome is BonusOutcome.SCORE_CONFETTI:
        scoring.award(state, scoring.scaled(state, BONUS_CONFETTI_POINTS))
        p = state.player
        state.effects.confetti_burst(p.x + p.w / 2, p.y + p.h / 2)
    else:
        raise ValueError(f"Unknown bonus outcome: {outcome!r}")

    if outcome not in (BonusOutcome.FILTER, BonusOutcome.SPEED_BOOST):
        state.queue(Cue.POWERUP)
    logger.debug("Bonus can: %s", outcome.value)
    return outcome


def _resolve_obstacles(state) -> bool:
    player = state.player
    obstacles = state.pools.obstacles

    for i in range(len(obstacles) - 1, -1, -1):
        ob = obstacles[i]
        if not overlaps(player, ob):
            continue

        if ob.kind is ObstacleKind.HAZARD and is_stomp(player, ob):
            del obstacles[i]
            scoring.award(state, scoring.scaled(state, STOMP_POINTS))
            player.vy = JUMP_IMPULSE * STOMP_BOUNCE
            player.grounded = False
            state.queue(Cue.STOMP)
            logger.debug("Stomp at x=%.1f", ob.x)

        elif ob.kind is ObstacleKind.BONUS_CAN:
            del obstacles[i]
            apply_bonus(state)

        elif ob.kind is ObstacleKind.HAZARD:
            del obstacles[i]
            if powerups.filter_active(state):
                continue
            state.lives = max(0, state.lives - 1)
            state.queue(Cue.HIT)
            logger.debug("Hit, lives=%d", state.lives)
            if state.lives == 0:
                end_game(state)
                return False

        else:
            raise ValueError(f"Unknown obstacle kind: {ob.kind!r}")

    return True


def resolve(state) -> bool:
    """
    Resolve every player overlap for this tick.

    Returns False when a hit ended the game; the caller must then skip
    the rest of the tick.
    """
    if not _resolve_obstacles(state):
        return False

    player = state.player

    collectibles = state.pools.collectibles
    for i in range(len(collectibles) - 1, -1, -1):
        if overlaps(player, collectibles[i]):
            del collectibles[i]
            scoring.award(state, scoring.scaled(state, COLLECT_POINTS))
            state.queue(Cue.COLLECT)

    pool = state.pools.powerups
    for i in range(len(pool) - 1, -1, -1):
        pu = pool[i]
        if overlaps(player, pu):
            del pool[i]
            powerups.activate(state, pu.kind)

    return True
