import logging
import random
from dataclasses import dataclass
from typing import Optional

from drop_runner import collisions, powerups, scoring
from drop_runner.collaborators import AudioCues, Cue, ScreenController, Store
from drop_runner.profiles import resolve_profile
from drop_runner.run_state import RunState
from drop_runner.settings import MAX_DT, WATER_FACTS

logger = logging.getLogger(__name__)


def clamp_dt(raw) -> float:
    """Coerce a raw frame delta (seconds) into [0, MAX_DT]. Never rejects."""
    try:
        dt = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if dt != dt or dt <= 0:  # NaN or backwards clock
        return 0.0
    return min(MAX_DT, dt)


# ------------ Render snapshot ------------
@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    w: float
    h: float
    vy: float
    grounded: bool
    filter_active: bool
    distressed: bool


@dataclass(frozen=True)
class PowerupView:
    kind: object
    remaining: float


@dataclass(frozen=True)
class Snapshot:
    player: PlayerView
    obstacles: tuple
    collectibles: tuple
    powerups: tuple
    active_powerup: Optional[PowerupView]
    confetti: tuple  # (x, y, w, h, color, angle)
    speed_lines: tuple  # (x, y, length, opacity)
    aura: Optional[tuple]  # (radius, opacity) while the aura is showing
    score: int
    lives: int
    high_score: int
    game_speed: float
    difficulty: str
    running: bool
    paused: bool
    game_over: bool


class Simulation:
    """
    Owns the current RunState and sequences one update per tick:
    physics, entity pools, collisions, powerups, scoring, effects.
    """
    def __init__(self, audio=None, screens=None, store=None, rng=None, seed=None):
        self.audio = audio if audio is not None else AudioCues()
        self.screens = screens if screens is not None else ScreenController()
        self.store = store if store is not None else Store()
        self.rng = rng if rng is not None else random.Random(seed)

        self.difficulty = resolve_profile(self.store.load_difficulty()).name
        self.state = RunState(resolve_profile(self.difficulty), self.rng, self.store.load_high_score())
        self.last_fact_index = None

    # ----- Lifecycle -----
    def start(self, difficulty=None):
        if difficulty is not None:
            self.difficulty = resolve_profile(difficulty).name
        profile = resolve_profile(self.difficulty)
        self.state = RunState(profile, self.rng, self.state.high_score)
        self.state.running = True
        self.last_fact_index = None
        logger.info("Run started: difficulty=%s speed=%.0f lives=%d",
                    profile.name, profile.base_speed, profile.starting_lives)
        self.screens.game_started()

    def reset(self):
        self.state = RunState(resolve_profile(self.difficulty), self.rng, self.state.high_score)
        self.last_fact_index = None
        logger.info("Run reset")
        self.screens.reset()

    @property
    def running(self):
        return self.state.running

    # ----- Input -----
    def jump(self) -> bool:
        st = self.state
        if not st.running or st.paused:
            return False
        if not st.player.jump():
            return False
        st.queue(Cue.JUMP)
        self._flush()
        return True

    # ----- Tick -----
    def tick(self, dt):
        st = self.state
        if not st.running or st.paused:
            return
        dt = clamp_dt(dt)

        st.player.prev_y = st.player.y
        st.player.update(dt)
        st.pools.update(dt, st.game_speed, st.profile)

        if collisions.resolve(st):
            powerups.update(st, dt)
            scoring.update(st, dt)
            st.effects.update(dt)

        self._flush()
        if st.game_over:
            self._finish()

    def _flush(self):
        st = self.state
        cues, st.cues = st.cues, []
        for cue in cues:
            self.audio.play(cue)

        events, st.milestone_events = st.milestone_events, []
        for threshold in events:
            self.screens.milestone(threshold)

        if st.high_score_dirty:
            st.high_score_dirty = False
            self.store.save_high_score(st.high_score)

    def _finish(self):
        self.last_fact_index = self.rng.randrange(len(WATER_FACTS))
        self.screens.game_over(self.state.score, self.last_fact_index)

    # ----- Presentation -----
    def snapshot(self) -> Snapshot:
        st = self.state
        p = st.player
        ap = st.active_powerup
        fx = st.effects
        return Snapshot(
            player=PlayerView(p.x, p.y, p.w, p.h, p.vy, p.grounded, p.filter_active, p.distressed),
            obstacles=tuple(e.copy() for e in st.pools.obstacles),
            collectibles=tuple(e.copy() for e in st.pools.collectibles),
            powerups=tuple(e.copy() for e in st.pools.powerups),
            active_powerup=PowerupView(ap.kind, ap.remaining) if ap is not None else None,
            confetti=tuple((c.x, c.y, c.w, c.h, c.color, c.angle) for c in fx.confetti),
            speed_lines=tuple((s.x, s.y, s.length, s.opacity) for s in fx.speed_lines),
            aura=(fx.aura.radius, fx.aura.opacity) if fx.aura.active else None,
            score=st.score,
            lives=st.lives,
            high_score=st.high_score,
            game_speed=st.game_speed,
            difficulty=st.profile.name,
            running=st.running,
            paused=st.paused,
            game_over=st.game_over,
        )
