"""Plain-text share messages for results screens."""

from typing import List, Optional

from src.game_table.config import SHARE_APP_NAME
from src.rank_engine.flavor_journey import FlavorJourney
from src.rank_engine.models import DishResult

NOT_ENOUGH_DATA = "not enough data"
RESTAURANT_PLACEHOLDER = "[restaurant name]"


def format_ranking_share(consensus: List[DishResult]) -> str:
    """Ranking as "#1 Dish" lines under a heading."""
    lines = [f"My ranking on {SHARE_APP_NAME}:"]
    lines.extend(f"#{r.rank_order} {r.dish_name}" for r in consensus)
    return "\n".join(lines)


def format_flavor_journey_share(
    journey: FlavorJourney,
    restaurant_name: Optional[str] = None,
) -> str:
    """Fun facts message, one line per fact."""
    def _dish(result) -> str:
        return result.dish_name if result is not None else NOT_ENOUGH_DATA

    match = journey.best_taste_buds
    return (
        f"My Flavor Journey on {SHARE_APP_NAME}:\n\n"
        f"😍 Most Loved: {_dish(journey.most_loved)}\n"
        f"🤨 Nacho Type: {_dish(journey.least_loved)}\n"
        f"😐 Hot & Cold: {_dish(journey.hot_and_cold)}\n"
        f"😁 Best Taste Buds: {match.player_name if match else NOT_ENOUGH_DATA}\n\n"
        f"Check out my dining experience at {restaurant_name or RESTAURANT_PLACEHOLDER}!"
    )


def reveal_order(consensus: List[DishResult]) -> List[DishResult]:
    """Results in reveal order: last place first, winner last."""
    return sorted(consensus, key=lambda r: r.rank_order, reverse=True)
