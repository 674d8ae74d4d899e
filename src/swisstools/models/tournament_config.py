"""TournamentConfig data class."""

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

from dataclasses import dataclass, fields
from typing import Any, Dict

from swisstools.constants import (
    BYE_DRAWS,
    BYE_LOSSES,
    BYE_WINS,
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
)
from swisstools.exceptions import InvalidConfigurationException
from swisstools.models.pairing import GameResult


@dataclass(frozen=True)
class TournamentConfig:
    """Scoring configuration, immutable once the tournament is created.

    Attributes
    ----------
    points_for_win : int
        Match points awarded for a match win (and for a bye).
    points_for_draw : int
        Match points awarded to each side of a drawn match.
    points_for_loss : int
        Match points awarded for a match loss.
    bye_wins : int
        Games won credited to a player receiving a bye.
    bye_losses : int
        Games lost credited to a player receiving a bye.
    bye_draws : int
        Games drawn credited to a player receiving a bye.
    """

    points_for_win: int = POINTS_FOR_WIN
    points_for_draw: int = POINTS_FOR_DRAW
    points_for_loss: int = POINTS_FOR_LOSS
    bye_wins: int = BYE_WINS
    bye_losses: int = BYE_LOSSES
    bye_draws: int = BYE_DRAWS

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationException(
                    f"{f.name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise InvalidConfigurationException(
                    f"{f.name} cannot be negative, got {value}"
                )

    def bye_result(self) -> GameResult:
        """Games credited to the player of a bye pairing."""
        return GameResult(
            wins_a=self.bye_wins, wins_b=self.bye_losses, draws=self.bye_draws
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "pointsForWin": self.points_for_win,
            "pointsForDraw": self.points_for_draw,
            "pointsForLoss": self.points_for_loss,
            "byeWins": self.bye_wins,
            "byeLosses": self.bye_losses,
            "byeDraws": self.bye_draws,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            points_for_win=data.get("pointsForWin", POINTS_FOR_WIN),
            points_for_draw=data.get("pointsForDraw", POINTS_FOR_DRAW),
            points_for_loss=data.get("pointsForLoss", POINTS_FOR_LOSS),
            bye_wins=data.get("byeWins", BYE_WINS),
            bye_losses=data.get("byeLosses", BYE_LOSSES),
            bye_draws=data.get("byeDraws", BYE_DRAWS),
        )
