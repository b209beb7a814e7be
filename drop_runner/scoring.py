import logging
import math

from drop_runner.collaborators import Cue
from drop_runner.settings import MILESTONES, RAMP_INTERVAL

logger = logging.getLogger(__name__)


def scaled(state, base_points):
    return int(round(base_points * state.profile.score_multiplier))


def award(state, points):
    if points <= 0:
        return
    state.score += points
    check_milestones(state)
    if state.score > state.high_score:
        state.high_score = state.score
        state.high_score_dirty = True


def check_milestones(state):
    for threshold in MILESTONES:
        if state.score >= threshold and threshold not in state.milestones_fired:
            state.milestones_fired.add(threshold)
            state.milestone_events.append(threshold)
            state.queue(Cue.MILESTONE)
            logger.debug("Milestone %d reached", threshold)


def update(state, dt):
    # Whole-second accrual. Whatever is left above 1.0 is dropped, not carried.
    state.second_timer += dt
    if state.second_timer >= 1.0:
        award(state, math.floor(state.second_timer * state.profile.score_multiplier))
        state.second_timer = 0.0

    state.ramp_timer += dt
    if state.ramp_timer >= RAMP_INTERVAL:
        state.game_speed += state.profile.speed_ramp_per_10s
        state.ramp_timer = 0.0
        logger.debug("Speed ramp -> %.1f", state.game_speed)
