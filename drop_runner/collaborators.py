"""
Narrow interfaces between the simulation and the outside world.

Every method here is a no-op so a headless run (tests, --smoke) can pass
the base classes straight in. The pygame front-end subclasses what it needs.
"""
from enum import Enum


class Cue(Enum):
    JUMP = "jump"
    COLLECT = "collect"
    HIT = "hit"
    STOMP = "stomp"
    POWERUP = "powerup"
    MILESTONE = "milestone"


class AudioCues:
    """Fire-and-forget sound cues. The core never waits on or queries audio."""

    def play(self, cue: Cue):
        pass


class ScreenController:
    """Owns screen visibility. The core only tells it what happened."""

    def game_started(self):
        pass

    def game_over(self, final_score: int, fact_index: int):
        pass

    def reset(self):
        pass

    def milestone(self, threshold: int):
        pass


class Store:
    """High score and difficulty persistence."""

    def load_high_score(self) -> int:
        return 0

    def save_high_score(self, value: int):
        pass

    def load_difficulty(self):
        return None

    def save_difficulty(self, label: str):
        pass


class FrameScheduler:
    """
    Requests one callback per display refresh.

    `schedule_next_frame(cb)` arranges for `cb(timestamp_seconds)` to run
    once; the callback reschedules itself if it wants another frame.
    """

    def schedule_next_frame(self, callback):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError
