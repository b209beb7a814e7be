import logging
import sys

import pygame

from drop_runner.collaborators import AudioCues, FrameScheduler, ScreenController
from drop_runner.loop import LoopDriver
from drop_runner.render import Renderer
from drop_runner.settings import FPS, SCREEN_H, SCREEN_W
from drop_runner.simulation import Simulation
from drop_runner.state import JsonStore

logger = logging.getLogger(__name__)

DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "normal",
    pygame.K_3: "hard",
}


def _now():
    return pygame.time.get_ticks() / 1000.0


class PygameScheduler(FrameScheduler):
    """Fires the pending frame once per pass of the pygame main loop."""

    def __init__(self):
        self.pending = None

    def schedule_next_frame(self, callback):
        self.pending = callback

    def cancel(self):
        self.pending = None

    def pump(self) -> bool:
        cb, self.pending = self.pending, None
        if cb is None:
            return False
        cb(_now())
        return True


class LogAudio(AudioCues):
    # Sound playback lives outside the simulation; cues are only logged here.
    def play(self, cue):
        logger.debug("cue: %s", cue.value)


class Screens(ScreenController):
    def __init__(self):
        self.fact_index = None

    def game_started(self):
        self.fact_index = None

    def game_over(self, final_score, fact_index):
        self.fact_index = fact_index

    def reset(self):
        self.fact_index = None

    def milestone(self, threshold):
        logger.info("Milestone: %d", threshold)


class Game:
    def __init__(self, difficulty=None, seed=None, store=None):
        pygame.init()
        pygame.display.set_caption("Clean Drop Runner")
        self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)

        self.screens = Screens()
        self.scheduler = PygameScheduler()
        self.sim = Simulation(
            audio=LogAudio(),
            screens=self.screens,
            store=store if store is not None else JsonStore(),
            seed=seed,
        )
        self.driver = LoopDriver(self.sim, self.scheduler, render=self.draw)
        if difficulty is not None:
            self.driver.select_difficulty(difficulty)

    def draw(self, snap):
        self.renderer.draw(snap, self.screens.fact_index)

    def quit(self):
        pygame.quit()
        sys.exit()

    def handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.quit()

        if key in (pygame.K_SPACE, pygame.K_UP):
            if self.driver.running:
                self.driver.jump()
            else:
                self.driver.start(_now())
        elif key == pygame.K_p:
            self.driver.toggle_pause(_now())
        elif key == pygame.K_r:
            self.driver.reset()
        elif key in DIFFICULTY_KEYS and not self.driver.running:
            self.driver.select_difficulty(DIFFICULTY_KEYS[key])
            self.driver.reset()

    def run(self, smoke=False):
        started = _now()
        if smoke:
            self.driver.start(started)

        while True:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quit()
                if event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
                if event.type == pygame.MOUSEBUTTONDOWN:
                    if self.driver.running:
                        self.driver.jump()
                    else:
                        self.driver.start(_now())

            # the frame callback draws while a run is live; idle screens draw here
            if not self.scheduler.pump():
                self.draw(self.sim.snapshot())

            if smoke and _now() - started > 0.25:
                logger.info("Smoke run finished: score=%d", self.sim.state.score)
                self.quit()
