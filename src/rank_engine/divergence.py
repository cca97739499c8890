"""Most polarizing dish ("hot & cold").

Standard deviation alone cannot tell "everyone mildly disagrees" apart from
"love it or hate it", so ties on spread fall through to the rank range and
then to how often the dish was picked as best or worst.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from src.rank_engine.config import (
    DISH_ID_TIE_BREAK_ASCENDING,
    STDDEV_EPSILON,
    TOP_RANK,
)
from src.rank_engine.models import Dish, DivergenceResult, Rating

logger = logging.getLogger(__name__)

_STAT_COLUMNS = ["dish_id", "std_dev", "rank_range", "polarization", "ballot_count"]


class DivergenceAnalyzer:
    """Find the dish raters disagreed about most.

    Selection order:

    1. Highest population standard deviation of assigned ranks. Values
       within ``epsilon`` of each other count as equal.
    2. Larger ``max(rank) - min(rank)``.
    3. Larger polarization: ``count(rank == 1) + count(rank == N)``.
    4. ``dish_id`` ascending.

    A dish rated only once has a standard deviation of 0 and is only
    eligible when no dish has two or more ratings.
    """

    def __init__(self, epsilon: float = STDDEV_EPSILON):
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon!r}")
        self.epsilon = epsilon

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def most_divisive(
        self,
        ranks_by_dish: Dict[str, List[int]],
        total_dishes: int,
        dish_names: Optional[Dict[str, str]] = None,
    ) -> Optional[DivergenceResult]:
        """Select the single most divisive dish.

        Args:
            ranks_by_dish: Rank positions each dish received, keyed by
                ``dish_id``. Dishes with an empty list are skipped.
            total_dishes: N, the number of dishes in the game. A rank equal
                to N counts as a "worst" pick for polarization.
            dish_names: Optional ``dish_id`` to display name mapping. Ids
                without a name are reported as their own name.

        Returns:
            :class:`DivergenceResult`, or ``None`` when no dish has ratings.
        """
        stats = self.dish_statistics(ranks_by_dish, total_dishes)
        if stats.empty:
            logger.debug("No rated dishes, nothing is polarizing yet")
            return None

        multi = stats[stats["ballot_count"] > 1]
        candidates = multi if not multi.empty else stats

        best = None
        for row in candidates.itertuples(index=False):
            if best is None or self._beats(row, best):
                best = row

        names = dish_names or {}
        result = DivergenceResult(
            dish_id=best.dish_id,
            dish_name=names.get(best.dish_id, best.dish_id),
            std_dev=float(best.std_dev),
            rank_range=int(best.rank_range),
            polarization=int(best.polarization),
            ballot_count=int(best.ballot_count),
        )
        logger.debug(
            "Most divisive dish %s: std=%.4f range=%d polarization=%d",
            result.dish_id, result.std_dev, result.rank_range, result.polarization,
        )
        return result

    def from_ratings(
        self,
        ratings: List[Rating],
        dishes: List[Dish],
    ) -> Optional[DivergenceResult]:
        """Convenience wrapper that groups raw ratings by dish.

        N is the number of distinct dishes on the menu, or the largest
        ``total_dishes`` among the ratings when no menu is given. With a
        menu, ratings for dishes not on it are ignored.
        """
        dish_names: Dict[str, str] = {}
        for dish in dishes:
            dish_names.setdefault(dish.dish_id, dish.name)

        ranks_by_dish: Dict[str, List[int]] = {}
        unknown = set()
        for rating in ratings:
            if dish_names and rating.dish_id not in dish_names:
                unknown.add(rating.dish_id)
                continue
            ranks_by_dish.setdefault(rating.dish_id, []).append(rating.rank)

        if unknown:
            logger.debug(
                "Ignoring ratings for dishes not on the menu: %s", sorted(unknown)
            )

        if dish_names:
            total_dishes = len(dish_names)
        else:
            total_dishes = max((r.total_dishes for r in ratings), default=0)

        return self.most_divisive(ranks_by_dish, total_dishes, dish_names)

    def dish_statistics(
        self,
        ranks_by_dish: Dict[str, List[int]],
        total_dishes: int,
    ) -> pd.DataFrame:
        """Per-dish spread statistics, sorted by ``dish_id``.

        Returns:
            DataFrame with columns ``dish_id``, ``std_dev``, ``rank_range``,
            ``polarization`` and ``ballot_count``. Empty when no dish has
            ratings.
        """
        rows = [
            {"dish_id": dish_id, "rank": rank}
            for dish_id, ranks in ranks_by_dish.items()
            for rank in ranks
        ]
        if not rows:
            return pd.DataFrame(columns=_STAT_COLUMNS)

        df = pd.DataFrame(rows)
        df["extreme_picks"] = (df["rank"] == TOP_RANK).astype(int) + (
            df["rank"] == total_dishes
        ).astype(int)

        grouped = df.groupby("dish_id")
        stats = pd.DataFrame(
            {
                "std_dev": grouped["rank"].std(ddof=0).fillna(0.0),
                "rank_range": grouped["rank"].max() - grouped["rank"].min(),
                "polarization": grouped["extreme_picks"].sum(),
                "ballot_count": grouped["rank"].size(),
            }
        ).reset_index()

        return stats.sort_values(
            "dish_id", ascending=DISH_ID_TIE_BREAK_ASCENDING
        ).reset_index(drop=True)[_STAT_COLUMNS]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _beats(self, candidate, best) -> bool:
        """Whether *candidate* is more divisive than the current *best*.

        Rows arrive in tie-break order, so a full tie keeps *best*.
        """
        if abs(candidate.std_dev - best.std_dev) > self.epsilon:
            return candidate.std_dev > best.std_dev
        if candidate.rank_range != best.rank_range:
            return candidate.rank_range > best.rank_range
        if candidate.polarization != best.polarization:
            return candidate.polarization > best.polarization
        return False
