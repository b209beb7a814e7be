import logging

from drop_runner.collaborators import FrameScheduler
from drop_runner.profiles import resolve_profile
from drop_runner.settings import FPS

logger = logging.getLogger(__name__)


class FixedStepScheduler(FrameScheduler):
    """
    Headless scheduler driven by hand: every `advance()` moves a fake clock
    forward by `step` seconds and fires the pending frame, if any.
    """
    def __init__(self, step=1.0 / FPS, start=0.0):
        self.step = float(step)
        self.now = float(start)
        self.pending = None

    def schedule_next_frame(self, callback):
        self.pending = callback

    def cancel(self):
        self.pending = None

    def advance(self, frames=1):
        fired = 0
        for _ in range(frames):
            self.now += self.step
            cb, self.pending = self.pending, None
            if cb is None:
                continue
            cb(self.now)
            fired += 1
        return fired


class LoopDriver:
    """
    Turns a stream of frame timestamps into simulation ticks.

    One update (and one optional render) per scheduled frame. Pausing stops
    scheduling altogether, so nothing moves until resume re-anchors the
    clock.
    """
    def __init__(self, sim, scheduler, render=None):
        self.sim = sim
        self.scheduler = scheduler
        self.render = render
        self.last_time = 0.0

    @property
    def running(self):
        return self.sim.state.running

    @property
    def paused(self):
        return self.sim.state.paused

    def select_difficulty(self, label):
        """Takes effect at the next start, never mid-run."""
        name = resolve_profile(label).name
        if name != self.sim.difficulty:
            logger.info("Difficulty set to %s", name)
        self.sim.difficulty = name
        self.sim.store.save_difficulty(name)
        return name

    def start(self, now):
        self.scheduler.cancel()
        self.sim.start()
        self.last_time = float(now)
        self.scheduler.schedule_next_frame(self.frame)

    def reset(self):
        self.scheduler.cancel()
        self.sim.reset()

    def toggle_pause(self, now):
        st = self.sim.state
        if not st.running:
            return False
        st.paused = not st.paused
        if st.paused:
            self.scheduler.cancel()
            logger.info("Paused")
        else:
            # re-anchor so the first frame after resume sees a small delta
            self.last_time = float(now)
            self.scheduler.schedule_next_frame(self.frame)
            logger.info("Resumed")
        return st.paused

    def jump(self):
        return self.sim.jump()

    def frame(self, timestamp):
        st = self.sim.state
        if not st.running or st.paused:
            return
        dt = timestamp - self.last_time
        self.last_time = timestamp

        self.sim.tick(dt)
        if self.render is not None:
            self.render(self.sim.snapshot())

        if self.sim.state.running:
            self.scheduler.schedule_next_frame(self.frame)
