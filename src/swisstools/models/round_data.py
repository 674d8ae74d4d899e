"""Data model for tournament round."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from swisstools.models.pairing import Pairing
from swisstools.type_hints import PlayerId


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of Pairing
        Pairings of the round in the order they were made. Empty until the
        round is paired.
    is_completed : bool
        Indicates whether the round's results have been applied to the
        players' cumulative statistics.
    """

    round_number: int
    pairings: List[Pairing] = field(default_factory=list)
    is_completed: bool = False

    @property
    def is_paired(self) -> bool:
        return bool(self.pairings)

    def find_pairing(self, player_id: PlayerId) -> Optional[Pairing]:
        """Return the pairing containing ``player_id``, if any."""
        for pairing in self.pairings:
            if pairing.involves(player_id):
                return pairing
        return None

    def incomplete_pairings(self) -> List[Pairing]:
        return [p for p in self.pairings if not p.is_complete]

    def player_ids(self) -> List[PlayerId]:
        return [pid for p in self.pairings for pid in p.player_ids]
