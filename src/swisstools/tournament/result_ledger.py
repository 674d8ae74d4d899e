"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from swisstools.exceptions import (
    InvalidResultException,
    PlayerNotFoundException,
    TournamentStateException,
)
from swisstools.models.pairing import GameResult, Pairing
from swisstools.models.round_data import RoundData
from swisstools.tournament.round_manager import RoundManager
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger
from swisstools.utils.validation import validate_game_counts_strict

logger = setup_logger(__name__)


class ResultLedger:
    """Records per-pairing game results for the current round.

    Results are always stored from the pairing's point of view: a result
    reported by the second player is swapped before it is written, so
    ``wins_a`` is always ``player_a``'s games.
    """

    def __init__(self, round_manager: RoundManager) -> None:
        self.round_manager = round_manager

    def add_result(
        self, player_id: PlayerId, wins: int, losses: int, draws: int
    ) -> Pairing:
        """Record the games of ``player_id``'s match in the current round.

        Args:
            player_id: Player reporting the result
            wins: Games won by ``player_id``
            losses: Games lost by ``player_id``
            draws: Drawn games

        Returns:
            The updated pairing

        Raises:
            RoundNotInitializedException: Current round has no storage
            NoPairingsException: Current round not paired yet
            TournamentStateException: Round results were already applied
            InvalidResultException: Negative counts, or a result for a bye
            PlayerNotFoundException: Player is not in any pairing of the round
        """
        round_data = self.round_manager.paired_current_round()
        validate_game_counts_strict(wins, losses, draws)
        self._ensure_open(round_data)

        pairing = round_data.find_pairing(player_id)
        if pairing is None:
            logger.warning(
                "Result rejected: player %s not paired in round %s",
                player_id,
                round_data.round_number,
            )
            raise PlayerNotFoundException("player not found")
        if pairing.is_bye:
            raise InvalidResultException(
                f"player {player_id} has a bye in round {round_data.round_number}"
            )

        result = GameResult(wins_a=wins, wins_b=losses, draws=draws)
        if pairing.player_b == player_id:
            result = result.swapped()
        pairing.result = result

        logger.debug(
            "Round %s: %s vs %s recorded %s-%s-%s",
            round_data.round_number,
            pairing.player_a,
            pairing.player_b,
            result.wins_a,
            result.wins_b,
            result.draws,
        )
        return pairing

    def clear_result(self, player_id: PlayerId) -> Pairing:
        """Reset ``player_id``'s match in the current round to unreported."""
        round_data = self.round_manager.paired_current_round()
        self._ensure_open(round_data)
        pairing = round_data.find_pairing(player_id)
        if pairing is None:
            raise PlayerNotFoundException("player not found")
        if pairing.is_bye:
            raise InvalidResultException(
                f"player {player_id} has a bye in round {round_data.round_number}"
            )
        pairing.result = None
        return pairing

    @staticmethod
    def _ensure_open(round_data: RoundData) -> None:
        if round_data.is_completed:
            raise TournamentStateException(
                f"round {round_data.round_number} results were already applied"
            )
