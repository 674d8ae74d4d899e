"""Swiss Pairing System Implementation."""

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
from typing import TYPE_CHECKING, List, Optional, Sequence, Set

from swisstools.constants import FIRST_ROUND
from swisstools.exceptions import (
    AlreadyPairedException,
    NoPlayersException,
    TournamentStateException,
)
from swisstools.models.pairing import Pairing
from swisstools.models.player import Player
from swisstools.models.tournament_config import TournamentConfig
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger

if TYPE_CHECKING:
    from swisstools.tournament.player_registry import PlayerRegistry
    from swisstools.tournament.round_manager import RoundManager

logger = setup_logger(__name__)


def randomize_within_point_groups(
    players: List[Player], rng: random.Random
) -> List[Player]:
    """Shuffle each run of equal points in place, keeping the groups in order.

    ``players`` must already be sorted by points. Returns the same list.
    """
    start = 0
    for i in range(1, len(players) + 1):
        if i == len(players) or players[i].points != players[start].points:
            if i - start > 1:
                group = players[start:i]
                rng.shuffle(group)
                players[start:i] = group
            start = i
    return players


class PairingEngine:
    """Produces the pairings of the current round.

    Round 1 is a uniform random pairing. Later rounds walk the players in
    score order (ties shuffled) and give each unpaired player the first
    opponent found by, in order:

    1. same points and no previous meeting
    2. no previous meeting
    3. anyone still unpaired (rematch as a last resort)

    A player left without an opponent receives the bye.

    Parameters
    ----------
    registry : PlayerRegistry
        Source of the active players.
    round_manager : RoundManager
        Current round storage and match history.
    config : TournamentConfig
        Bye game values.
    rng : random.Random, optional
        Randomness for the round-1 shuffle and the score-group shuffle.
        Pass a seeded instance for reproducible pairings.
    """

    def __init__(
        self,
        registry: "PlayerRegistry",
        round_manager: "RoundManager",
        config: TournamentConfig,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.registry = registry
        self.round_manager = round_manager
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def pair(self, allow_repair: bool = False) -> List[Pairing]:
        """Pair the current round and store the result.

        Args:
            allow_repair: Discard and recompute existing pairings of the round

        Returns:
            The stored pairing list

        Raises:
            NoPlayersException: No active players
            TournamentStateException: Current round index below 1, or the
                round's results were already applied
            AlreadyPairedException: Round already paired and ``allow_repair`` is False
        """
        active = self.registry.active_players()
        if not active:
            raise NoPlayersException("cannot pair tournament with no players")

        round_number = self.round_manager.current_round_number
        if round_number < FIRST_ROUND:
            raise TournamentStateException(
                "invalid tournament state: current round must be >= 1"
            )

        round_data = self.round_manager.current_round
        if round_data.is_completed:
            raise TournamentStateException(
                f"round {round_number} is finalized and cannot be re-paired"
            )
        if round_data.is_paired:
            if not allow_repair:
                raise AlreadyPairedException(
                    "round already has pairings - use pair(allow_repair=True) "
                    "to allow re-pairing"
                )
            logger.info("Discarding existing pairings for round %s", round_number)
            round_data.pairings = []

        if round_number == FIRST_ROUND:
            pairings = self._random_pairings(active)
        else:
            pairings = self._swiss_pairings(active)

        self.round_manager.set_pairings(pairings)
        logger.info(
            "Paired round %s: %s pairings for %s players",
            round_number,
            len(pairings),
            len(active),
        )
        return pairings

    # ========== Round 1 ==========

    def _random_pairings(self, active: Sequence[Player]) -> List[Pairing]:
        ids = sorted(p.id for p in active)
        self.rng.shuffle(ids)

        pairings: List[Pairing] = []
        for i in range(0, len(ids) - 1, 2):
            pairings.append(Pairing.match(ids[i], ids[i + 1]))
        if len(ids) % 2 == 1:
            pairings.append(self._bye(ids[-1]))
        return pairings

    # ========== Later rounds ==========

    def _swiss_pairings(self, active: Sequence[Player]) -> List[Pairing]:
        players = sorted(active, key=lambda p: (-p.points, p.id))
        randomize_within_point_groups(players, self.rng)

        paired: Set[PlayerId] = set()
        pairings: List[Pairing] = []
        for player in players:
            if player.id in paired:
                continue
            opponent = self._find_best_opponent(player, players, paired)
            paired.add(player.id)
            if opponent is None:
                pairings.append(self._bye(player.id))
                continue
            paired.add(opponent.id)
            pairings.append(Pairing.match(player.id, opponent.id))
            logger.debug(
                "Paired %s (%s pts) vs %s (%s pts)",
                player.name,
                player.points,
                opponent.name,
                opponent.points,
            )
        return pairings

    def _find_best_opponent(
        self, player: Player, ordered: Sequence[Player], paired: Set[PlayerId]
    ) -> Optional[Player]:
        """Return the best available opponent for ``player``, or None for a bye."""
        candidates = [
            p for p in ordered if p.id != player.id and p.id not in paired
        ]

        for candidate in candidates:
            if candidate.points == player.points and not self._have_played(
                player, candidate
            ):
                return candidate

        for candidate in candidates:
            if not self._have_played(player, candidate):
                return candidate

        if candidates:
            logger.warning(
                "No fresh opponent for %s, allowing rematch with %s",
                player.name,
                candidates[0].name,
            )
            return candidates[0]
        return None

    def _have_played(self, player: Player, other: Player) -> bool:
        return self.round_manager.have_played(player.id, other.id)

    def _bye(self, player_id: PlayerId) -> Pairing:
        logger.debug("Player %s receives a bye", player_id)
        return Pairing.bye(player_id, self.config.bye_result())
