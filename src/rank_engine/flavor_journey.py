"""Flavor journey: the fun facts shown after every ballot is in."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from src.rank_engine.aggregator import RankAggregator
from src.rank_engine.best_match import BestMatchFinder
from src.rank_engine.divergence import DivergenceAnalyzer
from src.rank_engine.models import (
    BestMatch,
    Dish,
    DishResult,
    DivergenceResult,
    Player,
    Rating,
)

logger = logging.getLogger(__name__)


@dataclass
class FlavorJourney:
    """Consensus ranking plus derived fun facts.

    Any fact can be ``None`` when there is not enough data for it.
    """

    consensus: List[DishResult] = field(default_factory=list)
    most_loved: Optional[DishResult] = None
    least_loved: Optional[DishResult] = None  # "nacho type"
    hot_and_cold: Optional[DivergenceResult] = None
    best_taste_buds: Optional[BestMatch] = None


def build_flavor_journey(
    dishes: List[Dish],
    players: List[Player],
    ratings: List[Rating],
    current_player_id: Optional[str] = None,
) -> FlavorJourney:
    """Run every analysis over one snapshot of a game table.

    Args:
        dishes: The table's dishes.
        players: Seated players.
        ratings: Every rating submitted so far.
        current_player_id: Player to find a best match for. Without one,
            ``best_taste_buds`` is left empty.
    """
    consensus = RankAggregator().aggregate(ratings, dishes)
    rated = [r for r in consensus if r.ballot_count > 0]

    journey = FlavorJourney(
        consensus=consensus,
        most_loved=rated[0] if rated else None,
        least_loved=rated[-1] if len(rated) > 1 else None,
        hot_and_cold=DivergenceAnalyzer().from_ratings(ratings, dishes),
    )

    if current_player_id is not None:
        journey.best_taste_buds = BestMatchFinder().find(
            current_player_id, ratings, players
        )

    logger.info(
        "Flavor journey: most loved=%s, least loved=%s, hot & cold=%s, best match=%s",
        journey.most_loved.dish_name if journey.most_loved else None,
        journey.least_loved.dish_name if journey.least_loved else None,
        journey.hot_and_cold.dish_name if journey.hot_and_cold else None,
        journey.best_taste_buds.player_name if journey.best_taste_buds else None,
    )
    return journey
