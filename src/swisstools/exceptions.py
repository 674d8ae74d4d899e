"""Exceptions for use in Swiss Tools"""

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


# ========== Base Application Exception ==========


class SwissToolsException(Exception):
    """Base exception for all Swiss Tools errors.

    All custom exceptions in the package inherit from this class so callers
    can catch every rejected operation with a single except clause. The
    message is a stable, human readable reason.
    """

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissToolsException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player input is invalid (empty or duplicate name, bad metadata)."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(SwissToolsException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when the tournament is in an invalid state for the requested operation."""

    pass


class NoPlayersException(TournamentException):
    """Raised when pairing or starting is attempted with no active players."""

    pass


class AlreadyPairedException(TournamentStateException):
    """Raised when pairing a round that already has pairings without allowing a re-pair."""

    pass


class RoundNotInitializedException(TournamentStateException):
    """Raised when the current round has no storage yet."""

    pass


class NoPairingsException(TournamentStateException):
    """Raised when results or standings are requested for an unpaired round."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissToolsException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative game count)."""

    pass


class IncompleteRoundException(ResultException):
    """Raised when standings are applied while a match still lacks results."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissToolsException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== Snapshot Exceptions ==========


class SnapshotException(SwissToolsException):
    """Raised when a tournament snapshot cannot be decoded."""

    pass
