"""Consensus ranking via Borda count.

Each player's ballot awards ``total_dishes - rank + 1`` points to every dish
they ranked: first place earns N points, last place earns 1. Scaling by the
player's own ``total_dishes`` lets a diner who ranked only part of the menu
still vote fairly.
"""

import logging
from dataclasses import asdict
from typing import List

import pandas as pd

from src.rank_engine.config import DISH_ID_TIE_BREAK_ASCENDING
from src.rank_engine.models import Dish, DishResult, Rating

logger = logging.getLogger(__name__)

_RATING_COLUMNS = ["player_id", "dish_id", "rank", "total_dishes"]


class RankAggregator:
    """Aggregate every player's ballot into one consensus ranking.

    Ordering is descending by total points. Exact ties are broken by
    ``dish_id`` so the result never depends on submission order. Dishes
    nobody rated get zero points and sort after every rated dish.

    Ranks are assumed well formed (a permutation of ``1..total_dishes`` per
    player). That is the caller's contract and is not re-validated here.
    """

    def aggregate(
        self,
        ratings: List[Rating],
        dishes: List[Dish],
    ) -> List[DishResult]:
        """Build the consensus ranking.

        Args:
            ratings: Every rating submitted for the game table.
            dishes: The table's dishes. Duplicate ids keep the first entry.

        Returns:
            One :class:`DishResult` per distinct dish, best first. Empty
            when no ratings have been submitted.
        """
        if not ratings:
            logger.debug("No ratings submitted, consensus ranking is empty")
            return []

        dishes_df = pd.DataFrame(
            [{"dish_id": d.dish_id, "dish_name": d.name} for d in dishes],
            columns=["dish_id", "dish_name"],
        ).drop_duplicates(subset="dish_id", keep="first")

        ratings_df = pd.DataFrame(
            [asdict(r) for r in ratings], columns=_RATING_COLUMNS
        )
        ratings_df["points"] = ratings_df["total_dishes"] - ratings_df["rank"] + 1

        unknown = ~ratings_df["dish_id"].isin(dishes_df["dish_id"])
        if unknown.any():
            logger.debug(
                "Ignoring %d ratings for dishes not on the menu: %s",
                unknown.sum(),
                sorted(ratings_df.loc[unknown, "dish_id"].unique().tolist()),
            )

        totals = (
            ratings_df.groupby("dish_id")
            .agg(
                total_points=("points", "sum"),
                ballot_count=("player_id", "nunique"),
            )
            .reset_index()
        )

        out = dishes_df.merge(totals, on="dish_id", how="left")
        out[["total_points", "ballot_count"]] = (
            out[["total_points", "ballot_count"]].fillna(0).astype(int)
        )
        out["has_ballots"] = out["ballot_count"] > 0
        out = out.sort_values(
            ["has_ballots", "total_points", "dish_id"],
            ascending=[False, False, DISH_ID_TIE_BREAK_ASCENDING],
        ).reset_index(drop=True)

        results = [
            DishResult(
                dish_id=row.dish_id,
                dish_name=row.dish_name,
                total_points=int(row.total_points),
                ballot_count=int(row.ballot_count),
                rank_order=position,
            )
            for position, row in enumerate(out.itertuples(index=False), start=1)
        ]

        logger.info(
            "Aggregated %d ratings into a %d-dish consensus ranking",
            len(ratings_df), len(results),
        )
        return results
