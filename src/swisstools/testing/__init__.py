"""Testing module for Swiss Tools.

This module provides simulation tooling for the Swiss engine:
- Random Tournament Generator (RTG)
- Result simulation with late entries and drops
- Benchmarking

Use the CLI: swiss-test
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

from swisstools.testing.rtg import (
    RandomTournamentGenerator,
    ResultPattern,
    SimulationConfig,
    SimulationReport,
)

__all__ = [
    "RandomTournamentGenerator",
    "ResultPattern",
    "SimulationConfig",
    "SimulationReport",
]
