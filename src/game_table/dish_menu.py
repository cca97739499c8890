"""Dish entry - the host's list of dishes to be ranked."""

import logging
from typing import List, Optional

from src.game_table.config import DISH_ID_PREFIX, MIN_DISHES
from src.rank_engine.models import Dish

logger = logging.getLogger(__name__)


class DishMenu:
    """Collects dish names before a game starts.

    Names are trimmed and compared case-insensitively, so "Pizza" and
    " pizza " are the same dish. Ids are assigned sequentially
    (``dish_001``, ``dish_002``, ...) and never reused, which keeps
    id-based tie-breaks in entry order.
    """

    def __init__(self, min_dishes: int = MIN_DISHES):
        if min_dishes < 1:
            raise ValueError(f"min_dishes must be at least 1, got {min_dishes}")
        self.min_dishes = min_dishes
        self._dishes: List[Dish] = []
        self._next_id = 1

    def add_dish(self, name: str) -> Optional[Dish]:
        """Add a dish by name.

        Returns:
            The new :class:`Dish`, or ``None`` when the name is blank or
            already on the menu.
        """
        trimmed = name.strip()
        if not trimmed:
            return None

        if self.contains(trimmed):
            logger.debug("Duplicate dish ignored: %r", trimmed)
            return None

        dish = Dish(dish_id=f"{DISH_ID_PREFIX}{self._next_id:03d}", name=trimmed)
        self._next_id += 1
        self._dishes.append(dish)
        logger.debug("Added dish %s (%s)", dish.dish_id, dish.name)
        return dish

    def remove_dish(self, dish_id: str) -> bool:
        """Remove a dish. Returns False if it was not on the menu."""
        for i, dish in enumerate(self._dishes):
            if dish.dish_id == dish_id:
                del self._dishes[i]
                return True
        return False

    def contains(self, name: str) -> bool:
        """Case-insensitive membership check on the trimmed name."""
        key = name.strip().casefold()
        return any(d.name.casefold() == key for d in self._dishes)

    @property
    def dishes(self) -> List[Dish]:
        return list(self._dishes)

    @property
    def is_ready(self) -> bool:
        """Whether enough dishes have been entered to start."""
        return len(self._dishes) >= self.min_dishes

    def __len__(self) -> int:
        return len(self._dishes)
