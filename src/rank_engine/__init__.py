from src.rank_engine.aggregator import RankAggregator
from src.rank_engine.best_match import BestMatchFinder
from src.rank_engine.divergence import DivergenceAnalyzer
from src.rank_engine.flavor_journey import FlavorJourney, build_flavor_journey
from src.rank_engine.models import (
    BestMatch,
    Dish,
    DishResult,
    DivergenceResult,
    Player,
    Rating,
)
from src.rank_engine.spearman import spearman_correlation

__all__ = [
    "BestMatch",
    "BestMatchFinder",
    "Dish",
    "DishResult",
    "DivergenceAnalyzer",
    "DivergenceResult",
    "FlavorJourney",
    "Player",
    "RankAggregator",
    "Rating",
    "build_flavor_journey",
    "spearman_correlation",
]
