"""Round storage and round index progression.

This module keeps the ordered list of rounds and answers history questions
such as whether two players have already met.
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

from typing import List

from swisstools.constants import FIRST_ROUND
from swisstools.exceptions import (
    NoPairingsException,
    RoundNotInitializedException,
    TournamentStateException,
)
from swisstools.models.pairing import Pairing
from swisstools.models.round_data import RoundData
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages the round list and the current round index.

    This class is responsible for:
    - Storing every round's pairings in round order
    - Tracking the current round number (1-indexed)
    - Answering rematch questions from past rounds
    - Advancing the index once a round has been finalized
    """

    def __init__(self) -> None:
        self.current_round_number: int = FIRST_ROUND
        self.rounds: List[RoundData] = [RoundData(round_number=FIRST_ROUND)]

    def get_round(self, round_number: int) -> RoundData:
        """Get data for a specific round.

        Raises:
            RoundNotInitializedException: The round has no storage yet
        """
        if round_number < FIRST_ROUND or round_number > len(self.rounds):
            raise RoundNotInitializedException(
                f"round {round_number} not initialized - call advance_round() first"
            )
        return self.rounds[round_number - 1]

    @property
    def current_round(self) -> RoundData:
        if self.current_round_number < FIRST_ROUND:
            raise TournamentStateException(
                "invalid tournament state: current round must be >= 1"
            )
        return self.get_round(self.current_round_number)

    def paired_current_round(self) -> RoundData:
        """Return the current round, requiring it to have pairings.

        Raises:
            RoundNotInitializedException: The current round has no storage
            NoPairingsException: The current round is not paired yet
        """
        round_data = self.current_round
        if not round_data.is_paired:
            raise NoPairingsException("round has no pairings - call pair() first")
        return round_data

    def set_pairings(self, pairings: List[Pairing]) -> RoundData:
        round_data = self.current_round
        round_data.pairings = pairings
        round_data.is_completed = False
        return round_data

    def previous_rounds(self) -> List[RoundData]:
        """Rounds 1..current-1, the history used for rematch avoidance."""
        return self.rounds[: max(0, self.current_round_number - 1)]

    def completed_rounds(self) -> List[RoundData]:
        return [r for r in self.rounds if r.is_completed]

    def have_played(self, player1_id: PlayerId, player2_id: PlayerId) -> bool:
        """Check if two players met in any round before the current one."""
        for round_data in self.previous_rounds():
            for pairing in round_data.pairings:
                if pairing.involves(player1_id) and pairing.involves(player2_id):
                    return True
        return False

    def advance(self) -> int:
        """Move to the next round, extending storage as needed.

        Returns:
            The new current round number
        """
        self.current_round_number += 1
        while len(self.rounds) < self.current_round_number:
            self.rounds.append(RoundData(round_number=len(self.rounds) + 1))
        logger.info("Advanced to round %s", self.current_round_number)
        return self.current_round_number

    def restore(self, rounds: List[RoundData], current_round_number: int) -> None:
        """Load previously serialized rounds (snapshot import)."""
        self.rounds = rounds
        self.current_round_number = current_round_number
