"""Random Tournament Generator (RTG) - simulation harness for the Swiss engine.

This module plays complete seeded tournaments through the public Tournament
API, with late entries and drops, and reports pairing quality figures.
"""

# Swiss Tools
# Copyright (C) 2025  Swiss Tools developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from swisstools.models.pairing import Pairing
from swisstools.models.standings import PlayerStanding
from swisstools.snapshot import dump_tournament
from swisstools.tournament import Tournament
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger

logger = setup_logger(__name__)


class ResultPattern(Enum):
    """Result generation patterns for tournaments."""

    REALISTIC = "realistic"
    BALANCED = "balanced"
    PREDICTABLE = "predictable"
    RANDOM = "random"


@dataclass
class SimulationConfig:
    """Configuration for Random Tournament Generator."""

    num_players: int
    num_rounds: int
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    games_per_match: int = 3
    draw_percentage: int = 5
    drop_rate: float = 0.0
    late_entry_rate: float = 0.0
    skill_range: Tuple[int, int] = (1, 100)

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ValueError("num_players must be at least 1")
        if self.num_rounds < 1:
            raise ValueError("num_rounds must be at least 1")
        if self.games_per_match < 1:
            raise ValueError("games_per_match must be at least 1")


@dataclass
class SimulationReport:
    """Outcome of one simulated tournament."""

    tournament: Tournament
    rounds_played: int = 0
    rematches: int = 0
    byes: int = 0
    late_entries: int = 0
    drops: int = 0
    integrity_errors: List[str] = field(default_factory=list)

    @property
    def standings(self) -> List[PlayerStanding]:
        return self.tournament.get_standings()

    def summary(self) -> Dict[str, int]:
        return {
            "players": self.tournament.player_count,
            "active_players": len(self.tournament.active_players),
            "rounds": self.rounds_played,
            "rematches": self.rematches,
            "byes": self.byes,
            "late_entries": self.late_entries,
            "drops": self.drops,
            "integrity_errors": len(self.integrity_errors),
        }


class ResultSimulator:
    """Simulates game-level match results for tournaments."""

    def __init__(self, config: SimulationConfig, rng: random.Random):
        self.config = config
        self.random = rng

    def simulate_match(self, skill_a: int, skill_b: int) -> Tuple[int, int, int]:
        """Return games won by A, games won by B and drawn games.

        A match ends when one side has won a majority of ``games_per_match``
        or every game has been played.
        """
        needed = self.config.games_per_match // 2 + 1
        wins_a = wins_b = draws = 0
        for _ in range(self.config.games_per_match):
            if wins_a >= needed or wins_b >= needed:
                break
            outcome = self._game_outcome(skill_a, skill_b)
            if outcome > 0:
                wins_a += 1
            elif outcome < 0:
                wins_b += 1
            else:
                draws += 1
        return wins_a, wins_b, draws

    def _game_outcome(self, skill_a: int, skill_b: int) -> int:
        if self.random.random() * 100 < self.config.draw_percentage:
            return 0
        pattern = self.config.result_pattern
        if pattern == ResultPattern.RANDOM:
            return self.random.choice([1, -1])
        if pattern == ResultPattern.BALANCED:
            return 1 if self.random.random() < 0.5 else -1
        if pattern == ResultPattern.PREDICTABLE:
            if skill_a == skill_b:
                return self.random.choice([1, -1])
            return 1 if skill_a > skill_b else -1
        # Logistic expectation on the skill gap
        expected_a = 1.0 / (1.0 + 10 ** ((skill_b - skill_a) / 40.0))
        return 1 if self.random.random() < expected_a else -1


class RandomTournamentGenerator:
    """Main tournament generator orchestrating players, rounds and results."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.result_simulator = ResultSimulator(config, self.random)
        self.skills: Dict[PlayerId, int] = {}

    def generate_complete_tournament(self) -> SimulationReport:
        """Play every configured round and return the report."""
        logger.info(
            "Generating tournament: %s players, %s rounds",
            self.config.num_players,
            self.config.num_rounds,
        )
        tournament = Tournament(rng=random.Random(self.random.getrandbits(64)))
        report = SimulationReport(tournament=tournament)

        for number in range(1, self.config.num_players + 1):
            self._register(tournament, f"Player-{number:03d}")

        tournament.start_tournament()
        for round_number in range(1, self.config.num_rounds + 1):
            if round_number > 1:
                self._apply_churn(tournament, report)
                if not tournament.active_players:
                    logger.warning("Every player dropped before round %s", round_number)
                    break
                tournament.pair()
            self._play_round(tournament, report)
            report.rounds_played += 1
            if round_number < self.config.num_rounds:
                tournament.advance_round()
            else:
                tournament.update_standings()

        logger.info("Tournament generation complete")
        return report

    def _register(self, tournament: Tournament, name: str) -> None:
        player = tournament.add_player(name)
        self.skills[player.id] = self.random.randint(*self.config.skill_range)

    def _apply_churn(self, tournament: Tournament, report: SimulationReport) -> None:
        for player in tournament.active_players:
            if self.random.random() < self.config.drop_rate:
                tournament.remove_player(player.id)
                report.drops += 1
        if self.random.random() < self.config.late_entry_rate:
            self._register(tournament, f"Late-{tournament.last_id + 1:03d}")
            report.late_entries += 1

    def _play_round(self, tournament: Tournament, report: SimulationReport) -> None:
        pairings = tournament.get_round()
        report.integrity_errors.extend(self.check_round_integrity(tournament, pairings))

        for pairing in pairings:
            if pairing.is_bye:
                report.byes += 1
                continue
            if tournament.round_manager.have_played(pairing.player_a, pairing.player_b):
                report.rematches += 1
            wins_a, wins_b, draws = self.result_simulator.simulate_match(
                self.skills[pairing.player_a], self.skills[pairing.player_b]
            )
            tournament.add_result(pairing.player_a, wins_a, wins_b, draws)

    @staticmethod
    def check_round_integrity(
        tournament: Tournament, pairings: List[Pairing]
    ) -> List[str]:
        """List violations of 'every active player appears exactly once'."""
        errors = []
        seen: Dict[PlayerId, int] = {}
        for pairing in pairings:
            for pid in pairing.player_ids:
                seen[pid] = seen.get(pid, 0) + 1
        active = {p.id for p in tournament.active_players}
        round_number = tournament.current_round
        for pid in sorted(active - set(seen)):
            errors.append(f"round {round_number}: player {pid} is not paired")
        for pid, count in sorted(seen.items()):
            if count > 1:
                errors.append(f"round {round_number}: player {pid} paired {count} times")
            if pid not in active:
                errors.append(f"round {round_number}: removed player {pid} is paired")
        return errors

    def export_json_format(self, report: SimulationReport) -> str:
        return dump_tournament(report.tournament, indent=2)


def create_league_night(
    num_players: int = 24, seed: Optional[int] = None
) -> RandomTournamentGenerator:
    """Create a realistic event with drops and late entries."""
    config = SimulationConfig(
        num_players=num_players,
        num_rounds=5,
        seed=seed,
        drop_rate=0.05,
        late_entry_rate=0.2,
    )
    return RandomTournamentGenerator(config)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Random Tournament Generator (RTG)")
    parser.add_argument("--players", type=int, default=16, help="Number of players")
    parser.add_argument("--rounds", type=int, default=5, help="Number of rounds")
    parser.add_argument("--seed", type=int, help="Random seed")
    args = parser.parse_args()

    generator = RandomTournamentGenerator(
        SimulationConfig(num_players=args.players, num_rounds=args.rounds, seed=args.seed)
    )
    print(generator.generate_complete_tournament().summary())
