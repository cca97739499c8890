"""Ballot box - records each player's ranking and serves results."""

import logging
from typing import Dict, List, Optional

from src.game_table.game_table import GameTable
from src.game_table.table_rules import TableRules, ValidationError
from src.rank_engine.flavor_journey import FlavorJourney, build_flavor_journey
from src.rank_engine.models import Player, Rating

logger = logging.getLogger(__name__)


class BallotBox:
    """Collects ballots for one game table.

    Coordinates between TableRules (validation) and the rank engine
    (results). A player who votes again replaces their whole previous
    ballot; ratings are never merged across submissions.
    """

    def __init__(self, table: GameTable):
        self.table = table
        self.rules = TableRules(table)
        self._ballots: Dict[str, List[Rating]] = {}

    @staticmethod
    def build_ratings(player_id: str, ordered_dish_ids: List[str]) -> List[Rating]:
        """Turn a best-first dish ordering into rating rows.

        The first dish gets rank 1; ``total_dishes`` is the length of the
        ordering.
        """
        total = len(ordered_dish_ids)
        return [
            Rating(
                player_id=player_id,
                dish_id=dish_id,
                rank=position,
                total_dishes=total,
            )
            for position, dish_id in enumerate(ordered_dish_ids, start=1)
        ]

    def cast_ballot(self, player_id: str, ordered_dish_ids: List[str]) -> List[Rating]:
        """Validate and record a player's ballot.

        Args:
            player_id: ID of the voting player.
            ordered_dish_ids: Every dish on the menu, best first.

        Returns:
            The rating rows recorded for the player.

        Raises:
            ValidationError: If the player is not seated, the table is
                closed, or the ballot is not a full ranking of the menu.
        """
        is_valid, error_msg = self.rules.validate_ballot(player_id, ordered_dish_ids)
        if not is_valid:
            logger.warning("Rejected ballot from %s: %s", player_id, error_msg)
            raise ValidationError(error_msg)

        ratings = self.build_ratings(player_id, ordered_dish_ids)
        replaced = player_id in self._ballots
        self._ballots[player_id] = ratings

        logger.info(
            "%s ballot from %s (%s) at table %s: %d dishes",
            "Replaced" if replaced else "Recorded",
            player_id,
            self.table.get_player(player_id).name,
            self.table.code,
            len(ratings),
        )
        return list(ratings)

    def withdraw_ballot(self, player_id: str) -> bool:
        """Discard a player's ballot. Returns False if they had not voted."""
        if self._ballots.pop(player_id, None) is None:
            return False
        logger.info("Withdrew ballot from %s at table %s", player_id, self.table.code)
        return True

    @property
    def ratings(self) -> List[Rating]:
        """Snapshot of every recorded rating."""
        return [r for ballot in self._ballots.values() for r in ballot]

    def has_voted(self, player_id: str) -> bool:
        return player_id in self._ballots

    def pending_players(self) -> List[Player]:
        """Seated players who have not voted yet."""
        return [p for p in self.table.players if p.player_id not in self._ballots]

    @property
    def is_complete(self) -> bool:
        """Whether every seated player has voted."""
        return not self.pending_players()

    def results(self, current_player_id: Optional[str] = None) -> FlavorJourney:
        """Compute results from the ballots recorded so far.

        Safe to call before every ballot is in; call again for fresher
        results as late ballots arrive.
        """
        if not self.is_complete:
            logger.debug(
                "Computing results with %d ballots still pending",
                len(self.pending_players()),
            )
        return build_flavor_journey(
            self.table.dishes,
            self.table.players,
            self.ratings,
            current_player_id,
        )
