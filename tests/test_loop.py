import math

import pytest

from drop_runner import powerups
from drop_runner.collaborators import Cue
from drop_runner.entities import Category, Entity, ObstacleKind, PowerupKind
from drop_runner.loop import FixedStepScheduler, LoopDriver
from drop_runner.settings import GROUND_OFFSET, MAX_DT, PLAYER_X, SCREEN_H, WATER_FACTS
from drop_runner.simulation import Simulation, clamp_dt


def _state_numbers(sim):
    st = sim.state
    return (
        st.running, st.game_over, st.score, st.lives, st.second_timer, st.ramp_timer,
        st.spawn_timer, st.game_speed, st.player.y, st.player.vy, st.player.grounded,
        [(e.x, e.y) for e in st.pools.obstacles],
    )


def _hazard_on_player():
    return Entity(Category.OBSTACLE, PLAYER_X + 10, SCREEN_H - GROUND_OFFSET - 40, 30, 40, kind=ObstacleKind.HAZARD)


@pytest.mark.parametrize(
    "raw, expected",
    [(0.016, 0.016), (0.05, 0.05), (1.5, MAX_DT), (-0.2, 0.0), (math.nan, 0.0), (None, 0.0), ("x", 0.0)],
)
def test_clamp_dt(raw, expected) -> None:
    assert clamp_dt(raw) == expected


def test_start_schedules_first_frame(driver, scheduler, screens) -> None:
    driver.start(scheduler.now)
    assert driver.running
    assert scheduler.pending is not None
    assert screens.calls == [("started",)]


def test_each_frame_reschedules_while_running(driver, scheduler) -> None:
    driver.start(scheduler.now)
    assert scheduler.advance(32) == 32
    assert driver.sim.state.score == 1
    assert scheduler.pending is not None


def test_stall_is_clamped(sim) -> None:
    sched = FixedStepScheduler(step=2.0)
    drv = LoopDriver(sim, sched)
    drv.start(sched.now)
    sched.advance()
    assert sim.state.second_timer == pytest.approx(MAX_DT)
    assert sim.state.score == 0


def test_render_receives_snapshot_each_frame(sim, scheduler) -> None:
    frames = []
    drv = LoopDriver(sim, scheduler, render=frames.append)
    drv.start(scheduler.now)
    scheduler.advance(3)
    assert len(frames) == 3
    assert frames[-1].running


def test_pause_freezes_everything(driver, scheduler) -> None:
    driver.start(scheduler.now)
    scheduler.advance(5)
    before = _state_numbers(driver.sim)

    assert driver.toggle_pause(scheduler.now)
    assert scheduler.pending is None
    assert scheduler.advance(100) == 0
    assert _state_numbers(driver.sim) == before
    assert not driver.jump()


def test_resume_reanchors_clock(driver, scheduler) -> None:
    driver.start(scheduler.now)
    scheduler.advance(2)
    driver.toggle_pause(scheduler.now)
    scheduler.advance(300)  # nearly ten seconds go by while paused
    timer = driver.sim.state.second_timer

    assert not driver.toggle_pause(scheduler.now)
    scheduler.advance()
    assert driver.sim.state.second_timer == pytest.approx(timer + scheduler.step)


def test_double_toggle_is_idempotent(driver, scheduler) -> None:
    driver.start(scheduler.now)
    scheduler.advance(7)
    before = _state_numbers(driver.sim)
    driver.toggle_pause(scheduler.now)
    driver.toggle_pause(scheduler.now)
    assert _state_numbers(driver.sim) == before
    assert not driver.paused


def test_pause_ignored_when_not_running(driver, scheduler) -> None:
    assert not driver.toggle_pause(scheduler.now)
    assert not driver.paused
    assert scheduler.pending is None


def test_jump_only_while_running(driver, scheduler, audio) -> None:
    assert not driver.jump()
    driver.start(scheduler.now)
    assert driver.jump()
    assert not driver.jump()
    assert audio.cues == [Cue.JUMP]


def test_game_over_stops_the_loop(driver, scheduler, screens, store) -> None:
    driver.start(scheduler.now)
    sim = driver.sim
    sim.state.lives = 1
    sim.state.score = 7
    sim.state.pools.obstacles.append(_hazard_on_player())

    scheduler.advance()

    st = sim.state
    assert st.game_over and not st.running
    assert st.lives == 0
    assert st.player.distressed
    assert scheduler.pending is None
    name, final_score, fact_index = screens.calls[-1]
    assert name == "game_over"
    assert final_score == 7
    assert 0 <= fact_index < len(WATER_FACTS)

    # frozen: further frames and input change nothing
    assert scheduler.advance(10) == 0
    assert not driver.jump()


def test_losing_the_last_life_skips_the_rest_of_the_tick(sim) -> None:
    sim.start()
    st = sim.state
    st.lives = 1
    st.second_timer = 0.99
    powerups.activate(st, PowerupKind.SPEED_BOOST)
    boost = st.active_powerup
    boost.remaining = 0.01
    speed = st.game_speed
    lines = [s.x for s in st.effects.speed_lines]
    st.pools.obstacles.append(_hazard_on_player())

    sim.tick(0.02)

    assert st.game_over
    assert st.score == 0
    assert st.second_timer == 0.99
    assert st.game_speed == speed
    assert st.active_powerup is boost
    assert boost.remaining == 0.01
    assert [s.x for s in st.effects.speed_lines] == lines


def test_reset_returns_to_idle(driver, scheduler, screens) -> None:
    driver.start(scheduler.now)
    scheduler.advance(40)
    driver.reset()
    st = driver.sim.state
    assert not st.running and not st.paused
    assert st.score == 0
    assert len(st.pools) == 0
    assert scheduler.pending is None
    assert screens.calls[-1] == ("reset",)


def test_reset_keeps_high_score(driver, scheduler) -> None:
    driver.start(scheduler.now)
    scheduler.advance(64)
    driver.reset()
    assert driver.sim.state.high_score == 2


def test_difficulty_applies_at_next_start(driver, scheduler, store) -> None:
    driver.start(scheduler.now)
    assert driver.select_difficulty("HARD") == "hard"
    assert store.difficulty == "hard"
    assert driver.sim.state.profile.name == "normal"
    assert driver.sim.state.game_speed == 180

    driver.start(scheduler.now)
    st = driver.sim.state
    assert st.profile.name == "hard"
    assert st.game_speed == 220
    assert st.lives == 2


def test_unknown_difficulty_selects_default(driver) -> None:
    assert driver.select_difficulty("impossible") == "normal"


def test_session_reads_store(audio, screens, quiet_rng) -> None:
    from conftest import MemoryStore

    store = MemoryStore(high_score=42, difficulty="easy")
    sim = Simulation(audio=audio, screens=screens, store=store, rng=quiet_rng)
    assert sim.state.high_score == 42
    sim.start()
    assert sim.state.profile.name == "easy"
    assert sim.state.lives == 5
    assert sim.state.high_score == 42


def test_high_score_is_persisted_when_beaten(driver, scheduler, store) -> None:
    driver.start(scheduler.now)
    scheduler.advance(32)
    assert store.high_score_writes == [1]
    scheduler.advance(32)
    assert store.high_score_writes == [1, 2]


def test_milestone_notifies_screens_once(driver, scheduler, screens, audio) -> None:
    driver.start(scheduler.now)
    driver.sim.state.score = 99
    scheduler.advance(96)
    assert screens.calls.count(("milestone", 100)) == 1
    assert audio.cues.count(Cue.MILESTONE) == 1
