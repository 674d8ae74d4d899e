"""Shared helpers for Swiss Tools."""

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

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return the module logger for ``name``.

    The library never installs handlers itself; applications decide where
    records go (see :func:`configure_logging`).
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Install a basic stream handler for command line use."""
    logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


__all__ = ["setup_logger", "configure_logging"]
