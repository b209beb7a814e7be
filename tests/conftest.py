import random

import pytest

from drop_runner.collaborators import AudioCues, ScreenController, Store
from drop_runner.loop import FixedStepScheduler, LoopDriver
from drop_runner.simulation import Simulation


class FixedRandom(random.Random):
    """random() always returns `value`; choice() can be pinned to one element."""

    def __init__(self, value=0.99, forced=None, seed=0):
        super().__init__(seed)
        self.value = value
        self.forced = forced

    def random(self):
        return self.value

    def choice(self, seq):
        if self.forced is not None and self.forced in seq:
            return self.forced
        return super().choice(seq)


class RecordingAudio(AudioCues):
    def __init__(self):
        self.cues = []

    def play(self, cue):
        self.cues.append(cue)


class RecordingScreens(ScreenController):
    def __init__(self):
        self.calls = []

    def game_started(self):
        self.calls.append(("started",))

    def game_over(self, final_score, fact_index):
        self.calls.append(("game_over", final_score, fact_index))

    def reset(self):
        self.calls.append(("reset",))

    def milestone(self, threshold):
        self.calls.append(("milestone", threshold))


class MemoryStore(Store):
    def __init__(self, high_score=0, difficulty=None):
        self.high_score = high_score
        self.difficulty = difficulty
        self.high_score_writes = []

    def load_high_score(self):
        return self.high_score

    def save_high_score(self, value):
        self.high_score = value
        self.high_score_writes.append(value)

    def load_difficulty(self):
        return self.difficulty

    def save_difficulty(self, label):
        self.difficulty = label


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def screens():
    return RecordingScreens()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def quiet_rng():
    # every spawn roll fails
    return FixedRandom(0.99)


@pytest.fixture
def sim(audio, screens, store, quiet_rng):
    return Simulation(audio=audio, screens=screens, store=store, rng=quiet_rng)


@pytest.fixture
def scheduler():
    return FixedStepScheduler(step=1.0 / 32)


@pytest.fixture
def driver(sim, scheduler):
    return LoopDriver(sim, scheduler)
