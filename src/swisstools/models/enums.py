"""Tournament lifecycle enumeration."""

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

from enum import Enum


class TournamentStatus(Enum):
    """Lifecycle of a tournament: setup -> in_progress -> finished."""

    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"

    @property
    def started(self) -> bool:
        return self is not TournamentStatus.SETUP

    @property
    def finished(self) -> bool:
        return self is TournamentStatus.FINISHED

    @classmethod
    def from_flags(cls, started: bool, finished: bool) -> "TournamentStatus":
        """Rebuild the status from the snapshot's boolean pair."""
        if finished:
            return cls.FINISHED
        if started:
            return cls.IN_PROGRESS
        return cls.SETUP
