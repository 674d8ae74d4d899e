"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
registry, pairing engine, result ledger and standings components.
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

import random
from typing import Any, Dict, List, Optional, Union

from swisstools.constants import (
    FIRST_ROUND,
    NOTE_OPPONENT_REMOVED,
    SNAPSHOT_VERSION,
)
from swisstools.exceptions import (
    InvalidPlayerDataException,
    NoPlayersException,
    TournamentStateException,
)
from swisstools.models.enums import TournamentStatus
from swisstools.models.pairing import Pairing
from swisstools.models.player import Decklist, Player
from swisstools.models.round_data import RoundData
from swisstools.models.standings import PlayerStanding, TiebreakerData
from swisstools.models.tournament_config import TournamentConfig
from swisstools.pairing.swiss import PairingEngine
from swisstools.tournament.player_registry import PlayerRegistry
from swisstools.tournament.result_ledger import ResultLedger
from swisstools.tournament.round_manager import RoundManager
from swisstools.tournament.standings import StandingsAggregator
from swisstools.tournament.tiebreak_calculator import TiebreakCalculator
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - PlayerRegistry: player ids, lookups, late entry and removal
    - RoundManager: round storage and the current round index
    - PairingEngine: random first round, Swiss pairing afterwards
    - ResultLedger: result entry for the current round
    - StandingsAggregator: all-or-nothing application of a round's results
    - TiebreakCalculator: tiebreak percentages and ranking

    A tournament moves from ``setup`` to ``in_progress`` when round 1 is
    paired and to ``finished`` only through :meth:`finish`. The instance is
    not thread safe; callers serialize access.
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize a new, empty tournament.

        Args:
            config: Points and bye values, defaults to 3/1/0 and 2-0-0 byes
            rng: Random source used for pairing
            seed: Seed for a private random source when ``rng`` is not given
        """
        self.config = config if config is not None else TournamentConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self.status = TournamentStatus.SETUP

        self.registry = PlayerRegistry()
        self.round_manager = RoundManager()
        self.pairing_engine = PairingEngine(
            self.registry, self.round_manager, self.config, self.rng
        )
        self.result_ledger = ResultLedger(self.round_manager)
        self.standings_aggregator = StandingsAggregator(
            self.registry, self.round_manager, self.config
        )
        self.tiebreak_calculator = TiebreakCalculator()

    # ========== Properties ==========

    @property
    def current_round(self) -> int:
        """Get the current round number (1-indexed)."""
        return self.round_manager.current_round_number

    @property
    def started(self) -> bool:
        return self.status.started

    @property
    def finished(self) -> bool:
        return self.status.finished

    @property
    def player_count(self) -> int:
        """Number of registered players, removed ones included."""
        return self.registry.count

    @property
    def last_id(self) -> int:
        return self.registry.last_id

    @property
    def players(self) -> List[Player]:
        """Every player in ascending id order."""
        return self.registry.all_players()

    @property
    def active_players(self) -> List[Player]:
        return self.registry.active_players()

    # ========== Player Management ==========

    def add_player(self, name: str) -> Player:
        """Add a player to the tournament.

        Players added after the start are marked as late entries and join
        from the next pairing on; past rounds are untouched. A player added
        while the current round is paired and not yet applied is therefore
        absent from that round until it is re-paired or the next round is
        paired.

        Raises:
            InvalidPlayerDataException: Empty name or name used by an active player
        """
        late_round = self.current_round if self.started else None
        return self.registry.add_player(name, late_entry_round=late_round)

    def get_player(self, player_id: PlayerId) -> Player:
        return self.registry.get(player_id)

    def get_player_by_name(self, name: str) -> Player:
        return self.registry.get_by_name(name)

    def remove_player(self, player_id: PlayerId) -> Player:
        """Remove a player from future pairings, keeping their history.

        If the current round is paired and not yet applied, the player's
        bye is deleted, or their opponent's pairing becomes a bye.

        Raises:
            PlayerNotFoundException: No player has that id
            InvalidPlayerDataException: The player was already removed
        """
        player = self.registry.get(player_id)
        self.registry.mark_removed(player, self.current_round, self.started)
        self._detach_from_current_round(player)
        return player

    def remove_player_by_name(self, name: str) -> Player:
        """Remove the active player with exactly ``name``.

        Raises:
            PlayerNotFoundException: No active player has that name
        """
        player = self.registry.get_active_by_name(name)
        return self.remove_player(player.id)

    def _detach_from_current_round(self, player: Player) -> None:
        rounds = self.round_manager.rounds
        if not FIRST_ROUND <= self.current_round <= len(rounds):
            return
        round_data = rounds[self.current_round - 1]
        # Applied rounds are history and stay as they were played
        if not round_data.is_paired or round_data.is_completed:
            return

        for index, pairing in enumerate(round_data.pairings):
            if not pairing.involves(player.id):
                continue
            if pairing.is_bye:
                del round_data.pairings[index]
                logger.info(
                    "Deleted bye of removed player %s in round %s",
                    player.name,
                    round_data.round_number,
                )
                return
            opponent = self.registry.get(pairing.opponent_of(player.id))
            round_data.pairings[index] = Pairing.bye(
                opponent.id, self.config.bye_result()
            )
            opponent.add_note(
                NOTE_OPPONENT_REMOVED.format(
                    opponent=player.name, round=round_data.round_number
                )
            )
            logger.info(
                "Converted pairing of %s to a bye after %s was removed",
                opponent.name,
                player.name,
            )
            return

    # ========== Player Metadata ==========

    def set_external_id(self, player_id: PlayerId, external_id: int) -> None:
        if isinstance(external_id, bool) or not isinstance(external_id, int):
            raise InvalidPlayerDataException(
                f"external id must be an integer, got {external_id!r}"
            )
        self.registry.get(player_id).external_id = external_id

    def get_external_id(self, player_id: PlayerId) -> Optional[int]:
        return self.registry.get(player_id).external_id

    def clear_external_id(self, player_id: PlayerId) -> None:
        self.registry.get(player_id).external_id = None

    def set_decklist(
        self, player_id: PlayerId, decklist: Union[Decklist, Dict[str, Any]]
    ) -> None:
        """Attach a decklist, given as a Decklist or as its dictionary form."""
        player = self.registry.get(player_id)
        if isinstance(decklist, Decklist):
            player.decklist = decklist.copy()
        else:
            player.decklist = Decklist.from_dict(decklist)

    def get_decklist(self, player_id: PlayerId) -> Optional[Decklist]:
        return self.registry.get(player_id).decklist

    def clear_decklist(self, player_id: PlayerId) -> None:
        self.registry.get(player_id).decklist = None

    # ========== Lifecycle ==========

    def start_tournament(self) -> List[Pairing]:
        """Pair round 1 and move to ``in_progress``.

        Raises:
            TournamentStateException: Tournament already started
            NoPlayersException: No active players
        """
        if self.started:
            raise TournamentStateException("tournament already started")
        if not self.registry.active_players():
            raise NoPlayersException("cannot start tournament with no players")
        return self.pair()

    def finish(self) -> None:
        """Mark the tournament as finished. No further rounds can be played."""
        if self.status is not TournamentStatus.IN_PROGRESS:
            raise TournamentStateException(
                f"cannot finish a tournament in state {self.status.value!r}"
            )
        self.status = TournamentStatus.FINISHED
        logger.info("Tournament finished after round %s", self.current_round)

    def _ensure_not_finished(self) -> None:
        if self.finished:
            logger.warning("Rejected round operation on a finished tournament")
            raise TournamentStateException("tournament is finished")

    # ========== Rounds and Results ==========

    def pair(self, allow_repair: bool = False) -> List[Pairing]:
        """Generate pairings for the current round.

        Args:
            allow_repair: Replace existing pairings of the round

        Returns:
            The round's pairings
        """
        self._ensure_not_finished()
        pairings = self.pairing_engine.pair(allow_repair=allow_repair)
        if self.status is TournamentStatus.SETUP:
            self.status = TournamentStatus.IN_PROGRESS
            logger.info("Tournament started with %s players", len(self.active_players))
        return list(pairings)

    def get_round(self, round_number: Optional[int] = None) -> List[Pairing]:
        """Get the pairings of a round, the current one by default."""
        if round_number is None:
            round_number = self.current_round
        return list(self.round_manager.get_round(round_number).pairings)

    def get_round_data(self, round_number: Optional[int] = None) -> RoundData:
        if round_number is None:
            round_number = self.current_round
        return self.round_manager.get_round(round_number)

    def add_result(
        self, player_id: PlayerId, wins: int, losses: int, draws: int
    ) -> Pairing:
        """Record ``player_id``'s games for the current round."""
        self._ensure_not_finished()
        return self.result_ledger.add_result(player_id, wins, losses, draws)

    def clear_result(self, player_id: PlayerId) -> Pairing:
        """Reset ``player_id``'s match in the current round to unreported."""
        self._ensure_not_finished()
        return self.result_ledger.clear_result(player_id)

    def update_standings(self) -> None:
        """Apply the current round's results to every player, atomically."""
        self._ensure_not_finished()
        self.standings_aggregator.update_standings()

    def advance_round(self) -> int:
        """Finalize the current round if needed and move to the next one.

        Returns:
            The new current round number
        """
        self._ensure_not_finished()
        round_data = self.round_manager.current_round
        if not round_data.is_completed:
            self.standings_aggregator.update_standings()
        return self.round_manager.advance()

    # ========== Standings and Tiebreaks ==========

    def compute_tiebreakers(self) -> Dict[PlayerId, TiebreakerData]:
        """Calculate tiebreak data for every player."""
        return self.tiebreak_calculator.calculate_all_tiebreaks(
            self.registry.players, self.round_manager.completed_rounds()
        )

    def get_standings(self, include_removed: bool = False) -> List[PlayerStanding]:
        """Get current tournament standings, best first."""
        return self.tiebreak_calculator.rank(
            self.registry.players,
            self.round_manager.completed_rounds(),
            include_removed=include_removed,
        )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing the complete tournament state
        """
        current = self.round_manager.current_round_number
        rounds = self.round_manager.rounds
        current_finalized = (
            FIRST_ROUND <= current <= len(rounds) and rounds[current - 1].is_completed
        )
        return {
            "version": SNAPSHOT_VERSION,
            "config": self.config.to_dict(),
            "lastId": self.registry.last_id,
            "currentRound": current,
            "started": self.started,
            "finished": self.finished,
            "currentRoundFinalized": current_finalized,
            "players": [p.to_dict() for p in self.registry.all_players()],
            "rounds": [[p.to_dict() for p in r.pairings] for r in rounds],
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], rng: Optional[random.Random] = None
    ) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary produced by :meth:`to_dict`
            rng: Random source for future pairings

        Returns:
            Reconstructed Tournament object

        Raises:
            ValueError: Inconsistent player ids, or a pairing naming an
                unknown player
        """
        tournament = cls(config=TournamentConfig.from_dict(data["config"]), rng=rng)
        tournament.status = TournamentStatus.from_flags(
            data.get("started", False), data.get("finished", False)
        )

        tournament.registry.restore(
            [Player.from_dict(p) for p in data["players"]], data["lastId"]
        )

        current = data["currentRound"]
        finalized = data.get("currentRoundFinalized", False)
        rounds = []
        for index, pairings in enumerate(data["rounds"]):
            number = index + 1
            round_pairings = [Pairing.from_dict(p) for p in pairings]
            for pairing in round_pairings:
                for pid in pairing.player_ids:
                    if pid not in tournament.registry.players:
                        raise ValueError(f"round {number} references unknown player {pid}")
            rounds.append(
                RoundData(
                    round_number=number,
                    pairings=round_pairings,
                    is_completed=number < current or (number == current and finalized),
                )
            )
        tournament.round_manager.restore(rounds, current)

        logger.info(
            "Loaded tournament: %s players, round %s",
            tournament.player_count,
            current,
        )
        return tournament
