"""Swiss Tools: Swiss-system pairing, results and standings.

Core capabilities include:
- Swiss pairing across rounds with byes and late entries
- Recording match results at the game level with configurable points
- Computing standings with standard tiebreakers
- Removing players while preserving their history
- Optional player metadata (external id and structured decklist)
- Versioned snapshot dump/load to persist and resume tournaments

Quick start::

    t = Tournament(seed=1)
    t.add_player("Alice")
    t.add_player("Bob")
    for pairing in t.start_tournament():
        if not pairing.is_bye:
            t.add_result(pairing.player_a, 2, 1, 0)
    t.update_standings()
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

from swisstools.exceptions import SwissToolsException
from swisstools.models import (
    Decklist,
    GameResult,
    Pairing,
    Player,
    PlayerStanding,
    RoundData,
    TiebreakerData,
    TournamentConfig,
    TournamentStatus,
)
from swisstools.snapshot import dump_tournament, load_tournament
from swisstools.tournament import Tournament

__version__ = "1.0.0"

__all__ = [
    "Decklist",
    "GameResult",
    "Pairing",
    "Player",
    "PlayerStanding",
    "RoundData",
    "SwissToolsException",
    "TiebreakerData",
    "Tournament",
    "TournamentConfig",
    "TournamentStatus",
    "dump_tournament",
    "load_tournament",
]
