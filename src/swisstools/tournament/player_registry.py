"""Player registry: ids, lookups and the add/remove lifecycle."""

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

from typing import Dict, List, Optional

from swisstools.constants import NOTE_LATE_ENTRY, NOTE_REMOVED, NOTE_REMOVED_BEFORE_START
from swisstools.exceptions import InvalidPlayerDataException, PlayerNotFoundException
from swisstools.models.player import Player
from swisstools.type_hints import PlayerId
from swisstools.utils import setup_logger
from swisstools.utils.validation import validate_name_strict

logger = setup_logger(__name__)


class PlayerRegistry:
    """Owns every player of a tournament, removed ones included.

    Ids come from a registry-wide counter that is never decremented, so an
    id always identifies the same person across rounds and snapshots.
    """

    def __init__(self, last_id: int = 0) -> None:
        self.last_id = last_id
        self.players: Dict[PlayerId, Player] = {}

    @property
    def count(self) -> int:
        """Number of players ever registered, removed players included."""
        return len(self.players)

    def all_players(self) -> List[Player]:
        """Every player in ascending id order."""
        return [self.players[pid] for pid in sorted(self.players)]

    def active_players(self) -> List[Player]:
        """Players eligible for pairing, in ascending id order."""
        return [p for p in self.all_players() if p.is_active]

    def active_ids(self) -> List[PlayerId]:
        return [p.id for p in self.active_players()]

    # ========== Mutations ==========

    def add_player(
        self, name: str, late_entry_round: Optional[int] = None
    ) -> Player:
        """Register a new player under the next id.

        Args:
            name: Display name, must not be used by another active player
            late_entry_round: Round number the player joined in, when the
                tournament has already started

        Raises:
            InvalidPlayerDataException: Empty name or duplicate active name
        """
        name = validate_name_strict(name)
        if self._find_active_by_name(name) is not None:
            logger.warning("Rejected duplicate player name: %s", name)
            raise InvalidPlayerDataException(
                f"player name {name!r} is already in use"
            )

        self.last_id += 1
        player = Player(id=self.last_id, name=name)
        if late_entry_round is not None:
            player.add_note(NOTE_LATE_ENTRY.format(round=late_entry_round))
            logger.info("Late entry: %s (%s) in round %s", name, player.id, late_entry_round)
        else:
            logger.info("Added player: %s (%s)", name, player.id)
        self.players[player.id] = player
        return player

    def mark_removed(self, player: Player, round_number: int, started: bool) -> None:
        """Flag a player as removed, keeping the record and its history.

        Raises:
            InvalidPlayerDataException: The player was already removed
        """
        if player.removed:
            raise InvalidPlayerDataException(
                f"player {player.name!r} ({player.id}) was already removed in round "
                f"{player.removed_in_round}"
            )
        player.removed = True
        player.removed_in_round = round_number
        if started:
            player.add_note(NOTE_REMOVED.format(round=round_number))
        else:
            player.add_note(NOTE_REMOVED_BEFORE_START)
        logger.info("Removed player: %s (%s) in round %s", player.name, player.id, round_number)

    def restore(self, players: List[Player], last_id: int) -> None:
        """Load previously serialized players (snapshot import).

        Raises:
            ValueError: Duplicate ids, or ``last_id`` below an existing id
        """
        restored: Dict[PlayerId, Player] = {}
        for player in players:
            if player.id in restored:
                raise ValueError(f"duplicate player id {player.id}")
            restored[player.id] = player
        if restored and last_id < max(restored):
            raise ValueError(
                f"last id {last_id} is below the highest player id {max(restored)}"
            )
        self.players = restored
        self.last_id = last_id

    # ========== Lookups ==========

    def get(self, player_id: PlayerId) -> Player:
        """Return the player with ``player_id``.

        Raises:
            PlayerNotFoundException: No player has that id
        """
        player = self.players.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"player {player_id} not found")
        return player

    def get_by_name(self, name: str) -> Player:
        """Return the player with exactly ``name`` (case sensitive).

        The active player wins over removed homonyms; among removed players
        the most recently registered one is returned.

        Raises:
            PlayerNotFoundException: No player has that name
        """
        player = self._find_active_by_name(name)
        if player is not None:
            return player
        for candidate in reversed(self.all_players()):
            if candidate.name == name:
                return candidate
        raise PlayerNotFoundException(f"player {name!r} not found")

    def get_active_by_name(self, name: str) -> Player:
        """Like :meth:`get_by_name` but only considers active players."""
        player = self._find_active_by_name(name)
        if player is None:
            raise PlayerNotFoundException(f"player {name!r} not found")
        return player

    def _find_active_by_name(self, name: str) -> Optional[Player]:
        for player in self.players.values():
            if player.is_active and player.name == name:
                return player
        return None
