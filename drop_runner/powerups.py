import logging

from drop_runner.collaborators import Cue
from drop_runner.entities import PowerupKind
from drop_runner.settings import FILTER_DURATION, SPEED_BOOST_DELTA, SPEED_BOOST_DURATION

logger = logging.getLogger(__name__)


class ActivePowerup:
    def __init__(self, kind, remaining, revert_speed=None):
        self.kind = kind
        self.remaining = float(remaining)
        # speed to restore when a speed boost ends; filters need nothing
        self.revert_speed = revert_speed

    def __repr__(self):
        return f"<ActivePowerup {self.kind.value} {self.remaining:.2f}s>"


def filter_active(state) -> bool:
    ap = state.active_powerup
    return ap is not None and ap.kind is PowerupKind.FILTER


def _center(player):
    return player.x + player.w / 2, player.y + player.h / 2


def _revert(state, ap):
    if ap.kind is PowerupKind.FILTER:
        state.player.filter_active = False
    elif ap.kind is PowerupKind.SPEED_BOOST:
        state.game_speed = ap.revert_speed
    state.active_powerup = None


def activate(state, kind):
    """
    Apply a powerup pickup.

    Extra life is instantaneous. Filter and speed boost occupy the single
    active slot; an effect already in the slot is reverted before the new
    one is applied.
    """
    if not isinstance(kind, PowerupKind):
        raise ValueError(f"Unknown powerup kind: {kind!r}")

    player = state.player
    state.queue(Cue.POWERUP)

    if kind is PowerupKind.EXTRA_LIFE:
        state.lives += 1
        state.effects.confetti_burst(*_center(player))
        logger.debug("Extra life -> %d", state.lives)
        return

    if state.active_powerup is not None:
        _revert(state, state.active_powerup)

    if kind is PowerupKind.FILTER:
        player.filter_active = True
        state.effects.aura.start(player.w / 2)
        state.active_powerup = ActivePowerup(kind, FILTER_DURATION)
    else:
        state.active_powerup = ActivePowerup(kind, SPEED_BOOST_DURATION, revert_speed=state.game_speed)
        state.game_speed += SPEED_BOOST_DELTA
        state.effects.speed_lines_burst(*_center(player))

    logger.debug("Powerup %s active", kind.value)


def update(state, dt):
    ap = state.active_powerup
    if ap is None:
        return
    ap.remaining -= dt
    if ap.remaining <= 0:
        _revert(state, ap)
        logger.debug("Powerup %s expired", ap.kind.value)
