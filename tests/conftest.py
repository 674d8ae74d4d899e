import random

import pytest

from swisstools import Tournament


def report_all(tournament, wins=2, losses=1, draws=0):
    """Record the same result for player A of every open match of the round."""
    for pairing in tournament.get_round():
        if not pairing.is_bye:
            tournament.add_result(pairing.player_a, wins, losses, draws)


def build_tournament(names, seed=1):
    tournament = Tournament(rng=random.Random(seed))
    for name in names:
        tournament.add_player(name)
    return tournament


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tournament(rng):
    return Tournament(rng=rng)


@pytest.fixture
def three_players(rng):
    t = Tournament(rng=rng)
    for name in ("Alice", "Bob", "Charlie"):
        t.add_player(name)
    return t


@pytest.fixture
def eight_players(rng):
    t = Tournament(rng=rng)
    for number in range(1, 9):
        t.add_player(f"Player {number}")
    return t
