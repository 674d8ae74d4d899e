"""Tournament management system for Swiss Tools.

This package provides the tournament core with clean separation of concerns
and well-defined responsibilities.
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

from swisstools.tournament.player_registry import PlayerRegistry
from swisstools.tournament.result_ledger import ResultLedger
from swisstools.tournament.round_manager import RoundManager
from swisstools.tournament.standings import StandingsAggregator
from swisstools.tournament.tiebreak_calculator import TiebreakCalculator
from swisstools.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "PlayerRegistry",
    "RoundManager",
    "ResultLedger",
    "StandingsAggregator",
    "TiebreakCalculator",
]
