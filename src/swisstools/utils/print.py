"""
Plain-text printing utilities for tournament tables.
This module renders player, pairing and standings tables for terminal output.
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


from typing import List, Sequence

from swisstools.models.pairing import Pairing
from swisstools.models.player import Player
from swisstools.models.standings import PlayerStanding
from swisstools.tournament import Tournament

BYE_LABEL = "BYE"
UNSET_LABEL = "-"


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a bordered table with left-aligned columns."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [border, line(headers), border]
    lines.extend(line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def format_players(players: Sequence[Player]) -> str:
    """Player table: name, match record and points, removed players flagged."""
    rows = []
    for player in players:
        name = player.name if player.is_active else f"{player.name} (removed)"
        rows.append(
            [
                name,
                str(player.wins),
                str(player.losses),
                str(player.draws),
                str(player.points),
            ]
        )
    return render_table(["Name", "Wins", "Losses", "Draws", "Points"], rows)


def format_pairings(tournament: Tournament, pairings: Sequence[Pairing]) -> str:
    """Pairing table for one round, with results where they are known."""
    rows: List[List[str]] = []
    for table, pairing in enumerate(pairings, start=1):
        player_a = tournament.get_player(pairing.player_a).name
        if pairing.is_bye:
            player_b = BYE_LABEL
        else:
            player_b = tournament.get_player(pairing.player_b).name
        if pairing.result is None:
            result = UNSET_LABEL
        else:
            r = pairing.result
            result = f"{r.wins_a}-{r.wins_b}-{r.draws}"
        rows.append([str(table), player_a, player_b, result])
    return render_table(["Table", "Player A", "Player B", "Result"], rows)


def format_standings(standings: Sequence[PlayerStanding]) -> str:
    """Standings table with the three tiebreak percentages."""
    rows = []
    for s in standings:
        tb = s.tiebreakers
        rows.append(
            [
                str(s.rank),
                s.name,
                str(s.points),
                f"{s.wins}-{s.losses}-{s.draws}",
                f"{tb.opponent_match_win_percentage:.2%}",
                f"{tb.game_win_percentage:.2%}",
                f"{tb.opponent_game_win_percentage:.2%}",
            ]
        )
    return render_table(
        ["Rank", "Name", "Points", "W-L-D", "OMW%", "GW%", "OGW%"], rows
    )
