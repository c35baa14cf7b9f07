import logging

from gridsnake.game import SnakeGame
from gridsnake.provider import RandomProvider


def test_random_provider_is_seeded():
    first = RandomProvider(seed=7)
    second = RandomProvider(seed=7)
    values = [first.random_in_range(10) for _ in range(50)]
    assert values == [second.random_in_range(10) for _ in range(50)]
    assert all(0 <= value < 10 for value in values)


def test_same_seed_same_game():
    games = [SnakeGame(8, RandomProvider(seed=3)) for _ in range(2)]
    for game in games:
        for _ in range(30):
            game.tick()
    assert games[0].snake == games[1].snake
    assert games[0].current_food == games[1].current_food


def test_debug_log_goes_to_logger(caplog):
    provider = RandomProvider(seed=0)
    with caplog.at_level(logging.DEBUG, logger="gridsnake.provider"):
        provider.debug_log("Ate some food! new length 2")
    assert "Ate some food! new length 2" in caplog.text
