"""Tests for src.rank_engine.flavor_journey."""

import pytest

from src.rank_engine.flavor_journey import FlavorJourney, build_flavor_journey
from src.rank_engine.models import Dish, Player, Rating


# ── Helpers ──────────────────────────────────────────────────────────

DISHES = [
    Dish("d1", "Spicy tuna roll"),
    Dish("d2", "Fried halloumi"),
    Dish("d3", "Bread"),
    Dish("d4", "Miso soup"),
]

PLAYERS = [
    Player("p1", "Sami", is_host=True),
    Player("p2", "Alex"),
    Player("p3", "Jo"),
]


def _ballot(player_id, ordered_dish_ids):
    total = len(ordered_dish_ids)
    return [
        Rating(player_id, dish_id, rank, total)
        for rank, dish_id in enumerate(ordered_dish_ids, start=1)
    ]


def _make_ratings():
    return (
        _ballot("p1", ["d1", "d3", "d4", "d2"])
        + _ballot("p2", ["d1", "d4", "d3", "d2"])
        + _ballot("p3", ["d3", "d1", "d4", "d2"])
    )


# ── Tests ────────────────────────────────────────────────────────────


class TestBuildFlavorJourney:
    def test_most_loved_is_consensus_winner(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings(), "p1")
        assert journey.most_loved.dish_name == "Spicy tuna roll"
        assert journey.most_loved.rank_order == 1

    def test_least_loved_is_last_rated_dish(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings(), "p1")
        assert journey.least_loved.dish_name == "Fried halloumi"

    def test_hot_and_cold_is_most_divisive(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings(), "p1")
        # Bread was ranked 2nd, 3rd and 1st
        assert journey.hot_and_cold.dish_name == "Bread"

    def test_best_taste_buds_for_current_player(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings(), "p1")
        # p1 correlates 0.8 with both; the lower player id wins
        assert journey.best_taste_buds.player_id == "p2"
        assert journey.best_taste_buds.player_name == "Alex"
        assert journey.best_taste_buds.correlation == pytest.approx(0.8)

    def test_consensus_included(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings(), "p1")
        assert [r.rank_order for r in journey.consensus] == [1, 2, 3, 4]

    def test_without_current_player_has_no_best_match(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _make_ratings())
        assert journey.best_taste_buds is None
        assert journey.most_loved is not None


class TestNotEnoughData:
    def test_no_ratings_is_all_empty(self):
        journey = build_flavor_journey(DISHES, PLAYERS, [], "p1")
        assert journey == FlavorJourney()

    def test_single_voter_has_no_best_match(self):
        journey = build_flavor_journey(
            DISHES, PLAYERS, _ballot("p1", ["d1", "d2", "d3", "d4"]), "p1"
        )
        assert journey.most_loved.dish_id == "d1"
        assert journey.least_loved.dish_id == "d4"
        assert journey.best_taste_buds is None

    def test_one_rated_dish_has_no_least_loved(self):
        journey = build_flavor_journey(DISHES, PLAYERS, _ballot("p1", ["d2"]), "p1")
        assert journey.most_loved.dish_id == "d2"
        assert journey.least_loved is None
