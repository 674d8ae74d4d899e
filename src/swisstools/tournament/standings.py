"""Folding a completed round into cumulative player statistics."""

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

from swisstools.exceptions import IncompleteRoundException, TournamentStateException
from swisstools.models.pairing import GameResult
from swisstools.models.player import Player
from swisstools.models.round_data import RoundData
from swisstools.models.tournament_config import TournamentConfig
from swisstools.tournament.player_registry import PlayerRegistry
from swisstools.tournament.round_manager import RoundManager
from swisstools.utils import setup_logger

logger = setup_logger(__name__)


class StandingsAggregator:
    """Applies the current round's results to every player involved.

    The update is all-or-nothing: a first pass checks that every real match
    has a result, and only then does the second pass touch any statistics.
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        round_manager: RoundManager,
        config: TournamentConfig,
    ) -> None:
        self.registry = registry
        self.round_manager = round_manager
        self.config = config

    def update_standings(self) -> RoundData:
        """Apply the current round to cumulative statistics.

        Returns:
            The finalized round

        Raises:
            RoundNotInitializedException: Current round has no storage
            NoPairingsException: Current round not paired yet
            TournamentStateException: The round was already applied
            IncompleteRoundException: A match is still missing its result
        """
        round_data = self.round_manager.paired_current_round()
        if round_data.is_completed:
            raise TournamentStateException(
                f"round {round_data.round_number} results were already applied"
            )

        # First pass: validate before mutating anything
        missing = round_data.incomplete_pairings()
        if missing:
            logger.warning(
                "Round %s has %s incomplete match(es)",
                round_data.round_number,
                len(missing),
            )
            raise IncompleteRoundException(
                "incomplete match found - all matches must have results"
            )

        resolved = [
            (pairing, [self.registry.get(pid) for pid in pairing.player_ids])
            for pairing in round_data.pairings
        ]

        # Second pass: every match is complete
        for pairing, players in resolved:
            if pairing.is_bye:
                self._apply_bye(players[0])
            else:
                self._apply_match(players[0], players[1], pairing.result)

        round_data.is_completed = True
        logger.info("Applied results of round %s", round_data.round_number)
        return round_data

    def _apply_bye(self, player: Player) -> None:
        player.wins += 1
        player.points += self.config.points_for_win
        player.game_wins += self.config.bye_wins
        player.game_losses += self.config.bye_losses
        player.game_draws += self.config.bye_draws
        logger.debug("%s credited with a bye", player.name)

    def _apply_match(self, player_a: Player, player_b: Player, result: GameResult) -> None:
        if result.wins_a > result.wins_b:
            self._award_win(player_a)
            self._award_loss(player_b)
        elif result.wins_b > result.wins_a:
            self._award_win(player_b)
            self._award_loss(player_a)
        else:
            # Equal games won, including 0-0 with only draws
            self._award_draw(player_a)
            self._award_draw(player_b)

        player_a.game_wins += result.wins_a
        player_a.game_losses += result.wins_b
        player_a.game_draws += result.draws
        player_b.game_wins += result.wins_b
        player_b.game_losses += result.wins_a
        player_b.game_draws += result.draws

    def _award_win(self, player: Player) -> None:
        player.wins += 1
        player.points += self.config.points_for_win

    def _award_loss(self, player: Player) -> None:
        player.losses += 1
        player.points += self.config.points_for_loss

    def _award_draw(self, player: Player) -> None:
        player.draws += 1
        player.points += self.config.points_for_draw
