"""Tiebreak calculation and ranking for tournaments.

This module computes the standard percentage tiebreakers used by Swiss card
and board game events and turns them into a ranked leaderboard.
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

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, List, Set, Tuple

from swisstools.constants import TIEBREAK_FLOOR
from swisstools.models.player import Player
from swisstools.models.round_data import RoundData
from swisstools.models.standings import PlayerStanding, TiebreakerData
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger

logger = setup_logger(__name__)

ZERO = Fraction(0)


@dataclass(frozen=True)
class _Tiebreaks:
    """Exact tiebreak values, kept as fractions so equal records compare equal."""

    gwp: Fraction
    omwp: Fraction
    ogwp: Fraction

    def to_data(self) -> TiebreakerData:
        return TiebreakerData.from_fractions(self.gwp, self.omwp, self.ogwp)


def match_win_percentage(player: Player) -> Fraction:
    """Match wins over matches played, 0 when no match was played."""
    if player.matches_played == 0:
        return ZERO
    return Fraction(player.wins, player.matches_played)


def game_win_percentage(player: Player) -> Fraction:
    """Games won over games played, 0 when no game was played."""
    if player.games_played == 0:
        return ZERO
    return Fraction(player.game_wins, player.games_played)


def _floored_average(values: List[Fraction]) -> Fraction:
    if not values:
        return TIEBREAK_FLOOR
    floored = [max(TIEBREAK_FLOOR, v) for v in values]
    return sum(floored, ZERO) / len(floored)


class TiebreakCalculator:
    """Calculates tiebreak percentages and ranks players.

    Tiebreakers, in ranking priority after points:

    - Opponent match-win percentage (OMW%)
    - Game-win percentage (GW%)
    - Opponent game-win percentage (OGW%)

    Every opponent percentage is floored at one third before averaging so a
    single very weak opponent does not sink a player's tiebreaks. Opponents
    are the distinct players met in completed rounds; byes are not
    opponents.
    """

    def opponents_by_player(
        self, rounds: Iterable[RoundData]
    ) -> Dict[PlayerId, Set[PlayerId]]:
        """Map each player id to the distinct opponents met in ``rounds``."""
        opponents: Dict[PlayerId, Set[PlayerId]] = {}
        for round_data in rounds:
            for pairing in round_data.pairings:
                if pairing.is_bye:
                    continue
                opponents.setdefault(pairing.player_a, set()).add(pairing.player_b)
                opponents.setdefault(pairing.player_b, set()).add(pairing.player_a)
        return opponents

    def calculate_all_tiebreaks(
        self,
        players: Dict[PlayerId, Player],
        rounds: Iterable[RoundData],
    ) -> Dict[PlayerId, TiebreakerData]:
        """Calculate tiebreakers for every player in ``players``.

        Args:
            players: All players (id -> Player), removed ones included so
                their records still count as opponents
            rounds: Completed rounds

        Returns:
            Tiebreaker data per player id
        """
        exact = self._calculate_exact(players, rounds)
        return {pid: tb.to_data() for pid, tb in exact.items()}

    def rank(
        self,
        players: Dict[PlayerId, Player],
        rounds: Iterable[RoundData],
        include_removed: bool = False,
    ) -> List[PlayerStanding]:
        """Return the ranked leaderboard.

        Players are ordered by points, then OMW%, GW% and OGW%, all
        descending. Players whose whole tuple is identical share a rank and
        the next distinct tuple takes the next rank, so ranks have no gaps.

        Args:
            players: All players (id -> Player)
            rounds: Completed rounds
            include_removed: Also rank removed players
        """
        exact = self._calculate_exact(players, rounds)
        ranked_players = [
            p for p in players.values() if include_removed or p.is_active
        ]
        ranked_players.sort(key=lambda p: p.id)
        ranked_players.sort(key=lambda p: self._sort_key(p, exact[p.id]), reverse=True)

        standings: List[PlayerStanding] = []
        rank = 0
        previous_key = None
        for player in ranked_players:
            tiebreaks = exact[player.id]
            key = self._sort_key(player, tiebreaks)
            if key != previous_key:
                rank += 1
                previous_key = key
            standings.append(
                PlayerStanding(
                    rank=rank,
                    player_id=player.id,
                    name=player.name,
                    points=player.points,
                    wins=player.wins,
                    losses=player.losses,
                    draws=player.draws,
                    tiebreakers=tiebreaks.to_data(),
                )
            )

        logger.debug("Ranked %s players", len(standings))
        return standings

    @staticmethod
    def _sort_key(player: Player, tiebreaks: _Tiebreaks) -> Tuple:
        return (player.points, tiebreaks.omwp, tiebreaks.gwp, tiebreaks.ogwp)

    def _calculate_exact(
        self,
        players: Dict[PlayerId, Player],
        rounds: Iterable[RoundData],
    ) -> Dict[PlayerId, _Tiebreaks]:
        opponents = self.opponents_by_player(rounds)
        results: Dict[PlayerId, _Tiebreaks] = {}
        for player_id, player in players.items():
            faced = [players[o] for o in sorted(opponents.get(player_id, ())) if o in players]
            results[player_id] = _Tiebreaks(
                gwp=game_win_percentage(player),
                omwp=_floored_average([match_win_percentage(o) for o in faced]),
                ogwp=_floored_average([game_win_percentage(o) for o in faced]),
            )
        return results
