import logging

from drop_runner.effects import Effects
from drop_runner.entities import EntityPools
from drop_runner.physics import Player

logger = logging.getLogger(__name__)


class RunState:
    """
    Everything one run owns. Components receive this object explicitly;
    a reset replaces it wholesale.
    """
    def __init__(self, profile, rng, high_score=0):
        self.profile = profile
        self.rng = rng

        self.player = Player()
        self.pools = EntityPools(rng)
        self.effects = Effects(rng)

        self.running = False
        self.paused = False
        self.game_over = False

        self.score = 0
        self.lives = profile.starting_lives
        self.high_score = int(high_score)
        self.high_score_dirty = False
        self.milestones_fired = set()

        self.second_timer = 0.0
        self.ramp_timer = 0.0
        self.game_speed = float(profile.base_speed)
        self.active_powerup = None

        # drained by the simulation at the end of each tick
        self.cues = []
        self.milestone_events = []

    @property
    def spawn_timer(self):
        return self.pools.spawn_timer

    def queue(self, cue):
        self.cues.append(cue)


def end_game(state):
    state.running = False
    state.game_over = True
    state.player.distressed = True
    logger.info("Game over: score=%d high=%d", state.score, state.high_score)
