"""A player registered in a Swiss tournament, with optional deck metadata."""

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
from typing import Any, Dict, List, Optional

from swisstools.constants import DECK_MAIN, DECK_SECTIONS, DECK_SIDEBOARD
from swisstools.exceptions import InvalidPlayerDataException
from swisstools.type_hints import CardCounts, PlayerId
from swisstools.utils.validation import validate_card_entry


@dataclass
class Decklist:
    """Structured decklist: two named multisets of card name to quantity."""

    main: CardCounts = field(default_factory=dict)
    sideboard: CardCounts = field(default_factory=dict)

    def __post_init__(self) -> None:
        for section in DECK_SECTIONS:
            cards = getattr(self, section)
            cleaned: CardCounts = {}
            for card, quantity in cards.items():
                result = validate_card_entry(card, quantity)
                if not result:
                    raise InvalidPlayerDataException(result.error_message)
                name, count = result.sanitized_value
                cleaned[name] = cleaned.get(name, 0) + count
            setattr(self, section, cleaned)

    def _section(self, section: str) -> CardCounts:
        if section not in DECK_SECTIONS:
            raise InvalidPlayerDataException(
                f"unknown decklist section {section!r}, expected one of {DECK_SECTIONS}"
            )
        return getattr(self, section)

    def add_card(self, card: str, quantity: int = 1, section: str = DECK_MAIN) -> None:
        result = validate_card_entry(card, quantity)
        if not result:
            raise InvalidPlayerDataException(result.error_message)
        name, count = result.sanitized_value
        cards = self._section(section)
        cards[name] = cards.get(name, 0) + count

    def remove_card(self, card: str, quantity: int = 1, section: str = DECK_MAIN) -> None:
        """Remove copies of a card; the entry disappears when it reaches zero."""
        cards = self._section(section)
        if card not in cards:
            raise InvalidPlayerDataException(f"{card!r} is not in the {section}")
        remaining = cards[card] - quantity
        if remaining > 0:
            cards[card] = remaining
        else:
            del cards[card]

    def card_count(self, section: Optional[str] = None) -> int:
        if section is None:
            return sum(self.main.values()) + sum(self.sideboard.values())
        return sum(self._section(section).values())

    def copy(self) -> "Decklist":
        return Decklist(main=dict(self.main), sideboard=dict(self.sideboard))

    def to_dict(self) -> Dict[str, CardCounts]:
        return {DECK_MAIN: dict(self.main), DECK_SIDEBOARD: dict(self.sideboard)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Decklist":
        return cls(
            main=dict(data.get(DECK_MAIN) or {}),
            sideboard=dict(data.get(DECK_SIDEBOARD) or {}),
        )


@dataclass
class Player:
    """
    A registered tournament participant and their cumulative record.

    Players are never deleted: removal only flags the record so that past
    pairings, statistics and exports keep referring to it.

    Attributes
    ----------
    id : int
        Unique identifier assigned by the registry, never reused.
    name : str
        Display name, unique among active players when assigned.
    wins, losses, draws : int
        Cumulative match record. A bye counts as a match win.
    game_wins, game_losses, game_draws : int
        Cumulative games across all matches (bye games included).
    points : int
        Cumulative match points under the tournament configuration.
    notes : list of str
        Audit trail of lifecycle events (late entry, removal).
    removed : bool
        Whether the player has been removed from future pairings.
    removed_in_round : int
        Round in which the player was removed, 0 if still active.
    external_id : int or None
        Optional identifier from an outside system.
    decklist : Decklist or None
        Optional registered deck.
    """

    id: PlayerId
    name: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    points: int = 0
    notes: List[str] = field(default_factory=list)
    removed: bool = False
    removed_in_round: int = 0
    external_id: Optional[int] = None
    decklist: Optional[Decklist] = None

    @property
    def is_active(self) -> bool:
        return not self.removed

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def games_played(self) -> int:
        return self.game_wins + self.game_losses + self.game_draws

    def add_note(self, note: str) -> None:
        self.notes.append(note)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format.

        Keys follow the snapshot schema. Optional metadata is omitted when
        unset.
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "gameWins": self.game_wins,
            "gameLosses": self.game_losses,
            "gameDraws": self.game_draws,
            "notes": list(self.notes),
            "removed": self.removed,
            "removedInRound": self.removed_in_round,
        }
        if self.external_id is not None:
            data["externalID"] = self.external_id
        if self.decklist is not None:
            data["decklist"] = self.decklist.to_dict()
        return data

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player instance from serialized dictionary data."""
        decklist = player_data.get("decklist")
        return cls(
            id=player_data["id"],
            name=player_data["name"],
            wins=player_data.get("wins", 0),
            losses=player_data.get("losses", 0),
            draws=player_data.get("draws", 0),
            game_wins=player_data.get("gameWins", 0),
            game_losses=player_data.get("gameLosses", 0),
            game_draws=player_data.get("gameDraws", 0),
            points=player_data.get("points", 0),
            notes=list(player_data.get("notes") or []),
            removed=player_data.get("removed", False),
            removed_in_round=player_data.get("removedInRound", 0),
            external_id=player_data.get("externalID"),
            decklist=Decklist.from_dict(decklist) if decklist is not None else None,
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.points} pts)"
