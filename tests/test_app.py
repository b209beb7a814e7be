import pygame

from drop_runner.app import Game


def _game(driver):
    # skip __init__: no window needed to route keys
    game = Game.__new__(Game)
    game.driver = driver
    game.sim = driver.sim
    return game


def test_difficulty_key_resets_through_the_driver(driver, scheduler, screens, store) -> None:
    game = _game(driver)
    scheduler.schedule_next_frame(lambda now: None)

    game.handle_key(pygame.K_3)

    assert store.difficulty == "hard"
    assert driver.sim.state.profile.name == "hard"
    assert scheduler.pending is None
    assert screens.calls[-1] == ("reset",)


def test_difficulty_key_ignored_mid_run(driver, scheduler, store) -> None:
    game = _game(driver)
    driver.start(scheduler.now)

    game.handle_key(pygame.K_1)

    assert store.difficulty is None
    assert driver.sim.state.profile.name == "normal"
    assert scheduler.pending is not None
