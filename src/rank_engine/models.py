"""Data models for the rank engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dish:
    """A dish entered for one game table."""

    dish_id: str
    name: str


@dataclass(frozen=True)
class Player:
    """A diner seated at a game table."""

    player_id: str
    name: str
    is_host: bool = False


@dataclass(frozen=True)
class Rating:
    """A single rank submission.

    ``rank`` is 1-based (1 = most preferred). ``total_dishes`` is the number
    of dishes the player ranked, so one player's ranks form a permutation of
    ``1..total_dishes``.
    """

    player_id: str
    dish_id: str
    rank: int
    total_dishes: int


@dataclass
class DishResult:
    """One row of the consensus ranking."""

    dish_id: str
    dish_name: str
    total_points: int
    ballot_count: int
    rank_order: int  # 1-based position after sorting; 1 is the winner


@dataclass
class DivergenceResult:
    """The most polarizing dish and the statistics that selected it."""

    dish_id: str
    dish_name: str
    std_dev: float
    rank_range: int
    polarization: int  # How often the dish was ranked first or last
    ballot_count: int


@dataclass
class BestMatch:
    """The other player whose ranking correlates best with the current one."""

    player_id: str
    player_name: str
    correlation: float
