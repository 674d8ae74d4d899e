"""Data models for a single pairing and its game results."""

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
from typing import Any, Dict, Optional

from swisstools.type_hints import Opponent, PlayerId


@dataclass(frozen=True)
class GameResult:
    """Games won by each side of a pairing, plus drawn games.

    Always stored from the perspective of the pairing: ``wins_a`` belongs to
    ``player_a`` and ``wins_b`` to ``player_b``.
    """

    wins_a: int
    wins_b: int
    draws: int

    def swapped(self) -> "GameResult":
        """Return the same result seen from the other side."""
        return GameResult(wins_a=self.wins_b, wins_b=self.wins_a, draws=self.draws)


@dataclass
class Pairing:
    """Two players meeting in a round, or one player receiving a bye.

    Attributes
    ----------
    player_a : int
        Id of the first player.
    player_b : int or None
        Id of the opponent, ``None`` when ``player_a`` has a bye.
    result : GameResult or None
        Recorded games, ``None`` while the match is unreported. Byes are
        created with their result already filled in.
    """

    player_a: PlayerId
    player_b: Opponent = None
    result: Optional[GameResult] = None

    @classmethod
    def bye(cls, player_id: PlayerId, result: GameResult) -> "Pairing":
        """Create a bye pairing with its result already filled in."""
        return cls(player_a=player_id, player_b=None, result=result)

    @classmethod
    def match(cls, player_a: PlayerId, player_b: PlayerId) -> "Pairing":
        """Create an unreported pairing between two players."""
        return cls(player_a=player_a, player_b=player_b, result=None)

    @property
    def is_bye(self) -> bool:
        return self.player_b is None

    @property
    def is_complete(self) -> bool:
        return self.result is not None

    @property
    def player_ids(self) -> tuple:
        if self.player_b is None:
            return (self.player_a,)
        return (self.player_a, self.player_b)

    def involves(self, player_id: PlayerId) -> bool:
        return player_id == self.player_a or player_id == self.player_b

    def opponent_of(self, player_id: PlayerId) -> Opponent:
        """Return the opponent of ``player_id`` in this pairing (``None`` for a bye)."""
        if player_id == self.player_a:
            return self.player_b
        if player_id == self.player_b:
            return self.player_a
        raise ValueError(f"player {player_id} is not part of this pairing")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary; unset results become nulls."""
        return {
            "playerA": self.player_a,
            "playerB": self.player_b,
            "playerAWins": self.result.wins_a if self.result else None,
            "playerBWins": self.result.wins_b if self.result else None,
            "draws": self.result.draws if self.result else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        values = (data.get("playerAWins"), data.get("playerBWins"), data.get("draws"))
        if all(v is None for v in values):
            result = None
        elif any(v is None for v in values):
            raise ValueError(
                "pairing result fields must be all set or all unset, got "
                f"{values!r}"
            )
        else:
            result = GameResult(*values)
        return cls(player_a=data["playerA"], player_b=data.get("playerB"), result=result)
