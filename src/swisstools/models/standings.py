"""Derived standings records."""

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

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple

from swisstools.type_hints import PlayerId


@dataclass(frozen=True)
class TiebreakerData:
    """Tiebreak percentages for one player.

    Attributes
    ----------
    game_win_percentage : float
        Games won over games played, 0 when no games were played.
    opponent_match_win_percentage : float
        Average of the opponents' match-win percentages, each floored at 1/3.
    opponent_game_win_percentage : float
        Average of the opponents' game-win percentages, each floored at 1/3.
    """

    game_win_percentage: float
    opponent_match_win_percentage: float
    opponent_game_win_percentage: float

    @classmethod
    def from_fractions(
        cls, gwp: Fraction, omwp: Fraction, ogwp: Fraction
    ) -> "TiebreakerData":
        return cls(
            game_win_percentage=float(gwp),
            opponent_match_win_percentage=float(omwp),
            opponent_game_win_percentage=float(ogwp),
        )


@dataclass(frozen=True)
class PlayerStanding:
    """One row of the ranked leaderboard. Recomputed on demand, never stored."""

    rank: int
    player_id: PlayerId
    name: str
    points: int
    wins: int
    losses: int
    draws: int
    tiebreakers: TiebreakerData

    @property
    def record(self) -> Tuple[int, int, int]:
        """Match record as (wins, losses, draws)."""
        return (self.wins, self.losses, self.draws)
