"""Best taste-buds pairing via Spearman correlation."""

import logging
from dataclasses import asdict
from typing import List, Optional

import pandas as pd

from src.rank_engine.config import PLAYER_ID_TIE_BREAK_ASCENDING
from src.rank_engine.models import BestMatch, Player, Rating
from src.rank_engine.spearman import spearman_correlation

logger = logging.getLogger(__name__)


class BestMatchFinder:
    """Find the diner whose ranking agrees most with the current player's.

    Only complete ballots are compared: a player must have ranked every dish
    that appears anywhere in the ratings. Each ballot is aligned on the
    shared dishes sorted by ``dish_id`` before correlating. Equal maximum
    correlations go to the lowest ``player_id``.
    """

    def find(
        self,
        current_player_id: str,
        ratings: List[Rating],
        players: List[Player],
    ) -> Optional[BestMatch]:
        """Return the best match for *current_player_id*.

        Args:
            current_player_id: The player the match is computed for.
            ratings: Every rating submitted for the game table.
            players: Seated players, used to resolve display names.

        Returns:
            :class:`BestMatch`, or ``None`` when the current player's ballot
            is incomplete or no other player has a complete ballot.
        """
        ballots = self.complete_ballots(ratings)
        if current_player_id not in ballots.index:
            logger.debug(
                "Player %s has no complete ballot, skipping best match",
                current_player_id,
            )
            return None

        subject = ballots.loc[current_player_id].tolist()
        candidates = ballots.drop(index=current_player_id).sort_index(
            ascending=PLAYER_ID_TIE_BREAK_ASCENDING
        )

        best_id = None
        best_corr = 0.0
        for player_id, ranks in candidates.iterrows():
            corr = spearman_correlation(subject, ranks.tolist())
            if best_id is None or corr > best_corr:
                best_id, best_corr = player_id, corr

        if best_id is None:
            logger.debug("No other complete ballots to compare with %s", current_player_id)
            return None

        names = {p.player_id: p.name for p in players}
        return BestMatch(
            player_id=best_id,
            player_name=names.get(best_id, best_id),
            correlation=best_corr,
        )

    @staticmethod
    def complete_ballots(ratings: List[Rating]) -> pd.DataFrame:
        """Pivot ratings into one row per fully-ranked player.

        Returns:
            DataFrame indexed by ``player_id`` with one integer column per
            shared dish, columns sorted by ``dish_id``. Players missing any
            shared dish are dropped.
        """
        if not ratings:
            return pd.DataFrame()

        df = pd.DataFrame([asdict(r) for r in ratings])
        ballots = (
            df.drop_duplicates(subset=["player_id", "dish_id"], keep="last")
            .pivot(index="player_id", columns="dish_id", values="rank")
            .sort_index(axis=1)
        )

        complete = ballots.dropna(how="any")
        dropped = len(ballots) - len(complete)
        if dropped:
            logger.debug("Excluded %d partial ballots from comparison", dropped)

        return complete.astype(int)
