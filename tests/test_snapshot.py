import json
import random

import pytest

from swisstools import Tournament, dump_tournament, load_tournament
from swisstools.exceptions import SnapshotException, TournamentStateException
from swisstools.models import TournamentConfig, TournamentStatus
from swisstools.snapshot import tournament_from_dict, tournament_to_dict

from conftest import build_tournament, report_all


def _played_tournament():
    tournament = build_tournament([f"Player {n}" for n in range(7)], seed=21)
    tournament.set_external_id(1, 777)
    tournament.set_decklist(2, {"main": {"Mountain": 17}, "sideboard": {"Shock": 3}})
    tournament.start_tournament()
    report_all(tournament, 2, 1, 0)
    tournament.advance_round()
    tournament.pair()
    report_all(tournament, 1, 1, 1)
    tournament.advance_round()
    tournament.remove_player(3)
    tournament.add_player("Latecomer")
    pairings = tournament.pair()
    match = next(p for p in pairings if not p.is_bye)
    tournament.add_result(match.player_b, 2, 0, 0)
    return tournament


def test_snapshot_keys():
    data = tournament_to_dict(_played_tournament())

    assert data["version"] == "1.0.0"
    assert data["config"] == TournamentConfig().to_dict()
    assert data["lastId"] == 8
    assert data["currentRound"] == 3
    assert data["started"] is True
    assert data["finished"] is False
    assert [p["id"] for p in data["players"]] == list(range(1, 9))
    assert len(data["rounds"]) == 3
    assert data["players"][0]["externalID"] == 777
    assert "externalID" not in data["players"][1]
    assert data["players"][1]["decklist"] == {
        "main": {"Mountain": 17},
        "sideboard": {"Shock": 3},
    }


def test_byes_and_unset_results_are_null():
    tournament = build_tournament(["Alice", "Bob", "Charlie"])
    tournament.start_tournament()
    data = json.loads(dump_tournament(tournament))

    (round_one,) = data["rounds"]
    bye = next(p for p in round_one if p["playerB"] is None)
    match = next(p for p in round_one if p["playerB"] is not None)
    assert (bye["playerAWins"], bye["playerBWins"], bye["draws"]) == (2, 0, 0)
    assert (match["playerAWins"], match["playerBWins"], match["draws"]) == (None, None, None)


def test_round_trip_is_lossless():
    original = _played_tournament()
    restored = load_tournament(dump_tournament(original))

    assert restored.to_dict() == original.to_dict()
    assert restored.status is TournamentStatus.IN_PROGRESS
    assert restored.get_standings() == original.get_standings()
    assert restored.get_player(3).removed
    assert restored.get_decklist(2).sideboard == {"Shock": 3}


def test_restored_tournament_continues_identically():
    original = _played_tournament()
    restored = load_tournament(dump_tournament(original), rng=random.Random(5))
    original.pairing_engine.rng = random.Random(5)

    for tournament in (original, restored):
        report_all(tournament, 2, 0, 0)
        tournament.advance_round()

    assert restored.get_standings() == original.get_standings()
    assert restored.pair() == original.pair()
    assert restored.last_id == original.last_id
    assert restored.add_player("Another").id == original.add_player("Another").id


def test_finalized_round_is_not_applied_twice_after_reload():
    tournament = build_tournament(["Alice", "Bob"])
    tournament.start_tournament()
    report_all(tournament)
    tournament.update_standings()

    restored = load_tournament(dump_tournament(tournament))
    with pytest.raises(TournamentStateException):
        restored.update_standings()
    restored.advance_round()
    assert sum(p.points for p in restored.players) == 3


def test_finished_flag_round_trips():
    tournament = build_tournament(["Alice", "Bob"])
    tournament.start_tournament()
    report_all(tournament)
    tournament.update_standings()
    tournament.finish()

    restored = load_tournament(dump_tournament(tournament, indent=2))
    assert restored.finished


def test_unsupported_version_is_rejected():
    data = tournament_to_dict(_played_tournament())
    data["version"] = "2.0.0"
    with pytest.raises(SnapshotException, match="unsupported snapshot version"):
        tournament_from_dict(data)


@pytest.mark.parametrize("text", ["", "not json", "[]", '{"version": "1.0.0"}'])
def test_malformed_snapshots_are_rejected(text):
    with pytest.raises(SnapshotException):
        load_tournament(text)


def test_partial_result_is_rejected():
    data = tournament_to_dict(_played_tournament())
    data["rounds"][0][0]["draws"] = None
    with pytest.raises(SnapshotException, match="malformed snapshot"):
        tournament_from_dict(data)


def test_last_id_below_existing_ids_is_rejected():
    data = tournament_to_dict(build_tournament(["Alice", "Bob", "Charlie"]))
    data["lastId"] = 1
    with pytest.raises(SnapshotException, match="last id 1"):
        tournament_from_dict(data)


def test_duplicate_player_ids_are_rejected():
    data = tournament_to_dict(build_tournament(["Alice", "Bob"]))
    data["players"][1]["id"] = 1
    with pytest.raises(SnapshotException, match="duplicate player id 1"):
        tournament_from_dict(data)


def test_pairing_with_unknown_player_is_rejected():
    tournament = build_tournament(["Alice", "Bob", "Charlie"])
    tournament.start_tournament()
    data = tournament_to_dict(tournament)
    data["rounds"][0][0]["playerA"] = 42
    with pytest.raises(SnapshotException, match="unknown player 42"):
        tournament_from_dict(data)


def test_ids_keep_growing_after_reload():
    tournament = build_tournament(["Alice", "Bob", "Charlie"])
    tournament.remove_player(3)
    restored = load_tournament(dump_tournament(tournament))

    dave = restored.add_player("Dave")
    assert dave.id == 4
    assert [p.name for p in restored.players] == ["Alice", "Bob", "Charlie", "Dave"]


def test_invalid_config_is_reported_as_snapshot_error():
    data = tournament_to_dict(Tournament())
    data["config"]["pointsForWin"] = -3
    with pytest.raises(SnapshotException, match="invalid snapshot"):
        tournament_from_dict(data)
