"""Versioned snapshot encoding for tournaments.

A snapshot is the complete state of a tournament: reloading it gives a
tournament on which pairing, result entry and standings continue exactly
where they left off. Only strings and dictionaries are handled here, reading
and writing files is up to the caller.
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

import json
import random
from typing import Any, Dict, Optional

from swisstools.constants import SNAPSHOT_VERSION, SUPPORTED_SNAPSHOT_MAJOR
from swisstools.exceptions import SnapshotException, SwissToolsException
from swisstools.tournament import Tournament
from swisstools.utils import setup_logger

logger = setup_logger(__name__)

REQUIRED_KEYS = ("version", "config", "lastId", "currentRound", "players", "rounds")


def _check_version(version: Any) -> None:
    if not isinstance(version, str):
        raise SnapshotException(f"snapshot version must be a string, got {version!r}")
    try:
        major = int(version.split(".")[0])
    except ValueError:
        raise SnapshotException(f"malformed snapshot version {version!r}") from None
    if major != SUPPORTED_SNAPSHOT_MAJOR:
        raise SnapshotException(
            f"unsupported snapshot version {version!r}, expected {SNAPSHOT_VERSION}"
        )


def tournament_to_dict(tournament: Tournament) -> Dict[str, Any]:
    """Return the snapshot dictionary of ``tournament``."""
    return tournament.to_dict()


def tournament_from_dict(
    data: Dict[str, Any], rng: Optional[random.Random] = None
) -> Tournament:
    """Rebuild a tournament from a snapshot dictionary.

    Raises:
        SnapshotException: Unsupported version or malformed payload
    """
    if not isinstance(data, dict):
        raise SnapshotException("snapshot must be a JSON object")
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise SnapshotException(f"snapshot is missing keys: {', '.join(missing)}")
    _check_version(data["version"])

    try:
        return Tournament.from_dict(data, rng=rng)
    except SwissToolsException as e:
        raise SnapshotException(f"invalid snapshot: {e}") from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SnapshotException(f"malformed snapshot: {e}") from e


def dump_tournament(tournament: Tournament, indent: Optional[int] = None) -> str:
    """Serialize ``tournament`` to JSON text."""
    text = json.dumps(tournament_to_dict(tournament), indent=indent)
    logger.debug("Dumped tournament snapshot (%s bytes)", len(text))
    return text


def load_tournament(text: str, rng: Optional[random.Random] = None) -> Tournament:
    """Rebuild a tournament from JSON text produced by :func:`dump_tournament`.

    Raises:
        SnapshotException: Invalid JSON, unsupported version or malformed payload
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotException(f"snapshot is not valid JSON: {e}") from e
    return tournament_from_dict(data, rng=rng)
