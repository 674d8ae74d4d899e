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

from fractions import Fraction

# --- Constants ---
APP_NAME = "Swiss Tools"

# Match points (tournament standard)
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

# Games credited to a player receiving a bye
BYE_WINS = 2
BYE_LOSSES = 0
BYE_DRAWS = 0

# Round numbering is human readable, round 0 is never used
FIRST_ROUND = 1

# Tiebreak floor applied to every opponent percentage
TIEBREAK_FLOOR = Fraction(1, 3)

# Snapshot schema (semantic versioning)
SNAPSHOT_VERSION = "1.0.0"
SUPPORTED_SNAPSHOT_MAJOR = 1

# Decklist sections
DECK_MAIN = "main"
DECK_SIDEBOARD = "sideboard"
DECK_SECTIONS = (DECK_MAIN, DECK_SIDEBOARD)

# Audit notes appended to player records
NOTE_LATE_ENTRY = "late entry in round {round}"
NOTE_REMOVED = "removed in round {round}"
NOTE_REMOVED_BEFORE_START = "removed before the tournament started"
NOTE_OPPONENT_REMOVED = "opponent {opponent} removed in round {round}, bye awarded"
