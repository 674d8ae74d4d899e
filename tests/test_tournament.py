import pytest

from swisstools import Tournament
from swisstools.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    NoPlayersException,
    PlayerNotFoundException,
    RoundNotInitializedException,
    TournamentStateException,
)
from swisstools.models import Decklist, GameResult, TournamentConfig, TournamentStatus

from conftest import report_all


def test_new_tournament_is_in_setup(tournament):
    assert tournament.status is TournamentStatus.SETUP
    assert tournament.current_round == 1
    assert not tournament.started
    assert not tournament.finished
    assert tournament.player_count == 0


def test_start_without_players_is_rejected(tournament):
    with pytest.raises(NoPlayersException):
        tournament.start_tournament()
    assert tournament.status is TournamentStatus.SETUP


def test_start_pairs_round_one(three_players):
    pairings = three_players.start_tournament()

    assert three_players.status is TournamentStatus.IN_PROGRESS
    assert three_players.get_round() == pairings
    with pytest.raises(TournamentStateException, match="already started"):
        three_players.start_tournament()


def test_pair_in_setup_starts_the_tournament(three_players):
    three_players.pair()
    assert three_players.started


def test_three_player_scenario_totals(three_players):
    assert [p.id for p in three_players.players] == [1, 2, 3]
    three_players.start_tournament()
    report_all(three_players, 2, 1, 0)
    three_players.update_standings()

    players = three_players.players
    assert sum(p.wins for p in players) == 2
    assert sum(p.losses for p in players) == 1
    assert sum(p.points for p in players) == 6


def test_custom_points():
    config = TournamentConfig(points_for_win=2, points_for_draw=1, points_for_loss=0)
    tournament = Tournament(config=config, seed=4)
    tournament.add_player("Alice")
    tournament.add_player("Bob")
    (pairing,) = tournament.start_tournament()
    tournament.add_result(pairing.player_a, 2, 0, 0)
    tournament.update_standings()

    assert tournament.get_player(pairing.player_a).points == 2


def test_negative_config_is_rejected():
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(points_for_win=-1)


def test_advance_round_applies_and_moves_on(eight_players):
    eight_players.start_tournament()
    report_all(eight_players)

    assert eight_players.advance_round() == 2
    assert eight_players.get_round_data(1).is_completed
    assert eight_players.get_round() == []
    assert sum(p.points for p in eight_players.players) == 12


def test_get_round_of_unknown_round(eight_players):
    with pytest.raises(RoundNotInitializedException):
        eight_players.get_round(3)


def test_finish_locks_rounds(eight_players):
    with pytest.raises(TournamentStateException):
        eight_players.finish()

    eight_players.start_tournament()
    report_all(eight_players)
    eight_players.update_standings()
    eight_players.finish()

    assert eight_players.status is TournamentStatus.FINISHED
    with pytest.raises(TournamentStateException):
        eight_players.pair(allow_repair=True)
    with pytest.raises(TournamentStateException):
        eight_players.advance_round()
    with pytest.raises(TournamentStateException):
        eight_players.finish()
    assert len(eight_players.get_standings()) == 8


def test_late_entry_joins_next_round(three_players):
    three_players.start_tournament()
    dave = three_players.add_player("Dave")

    assert dave.notes == ["late entry in round 1"]
    assert dave.id not in three_players.get_round_data().player_ids()
    assert len(three_players.get_round()) == 2

    report_all(three_players)
    three_players.advance_round()
    pairings = three_players.pair()
    assert dave.id in [pid for p in pairings for pid in p.player_ids]
    assert not any(p.is_bye for p in pairings)


def test_late_entry_is_included_when_round_is_repaired(three_players):
    three_players.start_tournament()
    dave = three_players.add_player("Dave")

    pairings = three_players.pair(allow_repair=True)
    assert len(pairings) == 2
    assert dave.id in three_players.get_round_data().player_ids()
    assert not any(p.is_bye for p in pairings)


def test_removing_bye_holder_deletes_the_bye(three_players):
    pairings = three_players.start_tournament()
    bye = next(p for p in pairings if p.is_bye)

    removed = three_players.remove_player(bye.player_a)

    assert removed.removed
    assert removed.removed_in_round == 1
    assert removed.notes == ["removed in round 1"]
    assert len(three_players.get_round()) == 1
    assert not any(p.is_bye for p in three_players.get_round())


def test_removing_player_with_opponent_converts_to_bye(eight_players):
    pairings = eight_players.start_tournament()
    target = pairings[0]
    opponent = eight_players.get_player(target.player_b)

    eight_players.remove_player(target.player_a)

    current = eight_players.get_round()
    assert len(current) == 4
    assert current[0].is_bye
    assert current[0].player_a == opponent.id
    assert current[0].result == GameResult(2, 0, 0)
    assert opponent.notes == [
        f"opponent {eight_players.get_player(target.player_a).name} removed in round 1, bye awarded"
    ]

    report_all(eight_players)
    eight_players.update_standings()
    assert opponent.wins == 1
    assert eight_players.get_player(target.player_a).matches_played == 0


def test_removal_after_round_applied_keeps_history(eight_players):
    eight_players.start_tournament()
    report_all(eight_players)
    eight_players.update_standings()
    before = list(eight_players.get_round())
    player = eight_players.get_player(before[0].player_a)

    eight_players.remove_player(player.id)

    assert eight_players.get_round() == before
    assert player.wins == 1
    assert player.id not in [s.player_id for s in eight_players.get_standings()]
    assert player.id in [
        s.player_id for s in eight_players.get_standings(include_removed=True)
    ]


def test_remove_before_start(three_players):
    three_players.remove_player_by_name("Bob")

    bob = three_players.get_player_by_name("Bob")
    assert bob.notes == ["removed before the tournament started"]
    assert three_players.player_count == 3
    assert len(three_players.active_players) == 2


def test_remove_unknown_player(three_players):
    with pytest.raises(PlayerNotFoundException):
        three_players.remove_player(42)
    with pytest.raises(PlayerNotFoundException):
        three_players.remove_player_by_name("bob")
    three_players.remove_player(2)
    with pytest.raises(PlayerNotFoundException):
        three_players.remove_player_by_name("Bob")
    with pytest.raises(InvalidPlayerDataException):
        three_players.remove_player(2)


def test_external_id(three_players):
    three_players.set_external_id(1, 5001)
    assert three_players.get_external_id(1) == 5001
    assert three_players.get_external_id(2) is None

    with pytest.raises(InvalidPlayerDataException):
        three_players.set_external_id(1, "5001")
    three_players.clear_external_id(1)
    assert three_players.get_external_id(1) is None
    with pytest.raises(PlayerNotFoundException):
        three_players.set_external_id(9, 1)


def test_decklist(three_players):
    three_players.set_decklist(1, {"main": {"Island ": 4}, "sideboard": {"Negate": 2}})
    deck = three_players.get_decklist(1)

    assert deck.main == {"Island": 4}
    assert deck.card_count() == 6
    deck.add_card("Island", 2)
    deck.remove_card("Negate", 1, section="sideboard")
    assert deck.card_count("main") == 6
    assert deck.sideboard == {"Negate": 1}

    three_players.clear_decklist(1)
    assert three_players.get_decklist(1) is None


def test_decklist_is_copied_on_set(three_players):
    deck = Decklist(main={"Forest": 20})
    three_players.set_decklist(2, deck)
    deck.add_card("Forest", 1)
    assert three_players.get_decklist(2).main == {"Forest": 20}


@pytest.mark.parametrize(
    "entry",
    [{"": 1}, {"Island": 0}, {"Island": -2}, {"Island": "4"}],
)
def test_invalid_decklist_entries(three_players, entry):
    with pytest.raises(InvalidPlayerDataException):
        three_players.set_decklist(1, {"main": entry})
    assert three_players.get_decklist(1) is None


def test_unknown_decklist_section():
    deck = Decklist()
    with pytest.raises(InvalidPlayerDataException):
        deck.add_card("Island", 1, section="maybeboard")
