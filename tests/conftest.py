"""Shared fixtures for the rank engine and game table test suites."""

import pytest

from src.game_table.ballot_box import BallotBox
from src.game_table.game_table import GameTable
from src.rank_engine.aggregator import RankAggregator
from src.rank_engine.best_match import BestMatchFinder
from src.rank_engine.divergence import DivergenceAnalyzer
from src.rank_engine.models import Dish


# ------------------------------------------------------------------
# Stateless engines – cheap to construct, reused across a module
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def aggregator():
    return RankAggregator()


@pytest.fixture(scope="module")
def analyzer():
    return DivergenceAnalyzer()


@pytest.fixture(scope="module")
def finder():
    return BestMatchFinder()


# ------------------------------------------------------------------
# Game table fixtures – fresh per test, they hold mutable state
# ------------------------------------------------------------------

MENU = [
    Dish("dish_001", "Spicy tuna roll"),
    Dish("dish_002", "Fried halloumi"),
    Dish("dish_003", "Bread"),
    Dish("dish_004", "Miso soup"),
]


@pytest.fixture
def menu():
    return list(MENU)


@pytest.fixture
def table(menu):
    """An active table with the host and two guests seated."""
    t = GameTable.create_new(
        restaurant_name="Sushi Place",
        host_name="Sami",
        dishes=menu,
        code="12345",
    )
    t.join("Alex")
    t.join("Jo")
    return t


@pytest.fixture
def ballot_box(table):
    return BallotBox(table)
