"""Tests for src.rank_engine.spearman."""

import pytest

from src.rank_engine.spearman import spearman_correlation


class TestDegenerateInputs:
    def test_none_inputs_return_zero(self):
        assert spearman_correlation(None, [1, 2, 3]) == 0
        assert spearman_correlation([1, 2, 3], None) == 0
        assert spearman_correlation(None, None) == 0

    def test_empty_inputs_return_zero(self):
        assert spearman_correlation([], []) == 0
        assert spearman_correlation([1, 2], []) == 0
        assert spearman_correlation([], [1, 2]) == 0

    def test_length_mismatch_returns_zero(self):
        assert spearman_correlation([1, 2], [1, 2, 3]) == 0
        assert spearman_correlation([1, 2, 3], [1, 2]) == 0

    def test_single_item_is_perfect_correlation(self):
        assert spearman_correlation([1], [1]) == 1
        assert spearman_correlation([5], [5]) == 1

    def test_accepts_tuples(self):
        assert spearman_correlation((1, 2, 3), (1, 2, 3)) == 1


class TestPerfectCorrelation:
    @pytest.mark.parametrize("n", [2, 3, 4, 7, 10])
    def test_identical_rankings_are_exactly_one(self, n):
        ranks = list(range(1, n + 1))
        assert spearman_correlation(ranks, list(ranks)) == 1.0

    @pytest.mark.parametrize("n", [2, 3, 4, 7, 10])
    def test_reversed_rankings_are_exactly_minus_one(self, n):
        ranks = list(range(1, n + 1))
        assert spearman_correlation(ranks, ranks[::-1]) == -1.0

    def test_identical_non_sorted_rankings(self):
        assert spearman_correlation([1, 3, 2, 4], [1, 3, 2, 4]) == 1.0


class TestKnownValues:
    def test_last_two_swapped(self):
        # 1 - 6 * 2 / (4 * 15)
        assert spearman_correlation([1, 2, 3, 4], [1, 2, 4, 3]) == pytest.approx(0.8)

    def test_halves_swapped(self):
        # 1 - 6 * 16 / (4 * 15)
        assert spearman_correlation([1, 2, 3, 4], [3, 4, 1, 2]) == pytest.approx(-0.6)

    def test_three_items_one_swap(self):
        assert spearman_correlation([1, 2, 3], [1, 3, 2]) == pytest.approx(0.5)

    def test_five_items_two_swaps(self):
        assert spearman_correlation([1, 2, 3, 4, 5], [2, 1, 3, 5, 4]) == pytest.approx(0.8)

    def test_dish_ranking_scenario(self):
        # Pizza, Burger, Salad, Pasta as ranked by two diners
        assert spearman_correlation([1, 2, 3, 4], [1, 3, 4, 2]) == pytest.approx(0.4)


class TestProperties:
    @pytest.mark.parametrize(
        "a, b",
        [
            ([1, 2, 3, 4], [2, 1, 4, 3]),
            ([1, 2, 3, 4, 5], [5, 3, 1, 2, 4]),
            ([2, 1], [1, 2]),
        ],
    )
    def test_symmetric(self, a, b):
        assert spearman_correlation(a, b) == spearman_correlation(b, a)

    @pytest.mark.parametrize(
        "a, b",
        [
            ([1, 2, 3], [2, 3, 1]),
            ([1, 2, 3, 4], [2, 1, 4, 3]),
            ([1, 2, 3, 4, 5, 6], [6, 1, 5, 2, 4, 3]),
        ],
    )
    def test_bounded(self, a, b):
        assert -1.0 <= spearman_correlation(a, b) <= 1.0
