"""Ballot rule enforcement."""

from typing import List, Optional, Tuple

from src.game_table.game_table import GameTable


class ValidationError(Exception):
    """Raised when a ballot violates the table's rules."""

    pass


class TableRules:
    """Checks ballots against the table's players and menu."""

    def __init__(self, table: GameTable):
        self.table = table

    def validate_ballot(
        self, player_id: str, ordered_dish_ids: List[str]
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate a player's ranked dish list.

        A ballot must rank every dish on the menu exactly once, so its ranks
        form a permutation of 1..N.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Is the table still taking ballots?
        if not self.table.is_active:
            return False, f"Table {self.table.code} is no longer active"

        # Check 2: Is the player seated here?
        if self.table.get_player(player_id) is None:
            return False, f"Player {player_id} is not seated at this table"

        # Check 3: No dish ranked twice
        seen = set()
        for dish_id in ordered_dish_ids:
            if dish_id in seen:
                return False, f"Dish {dish_id} is ranked more than once"
            seen.add(dish_id)

        # Check 4: Only dishes from the menu
        menu = {d.dish_id for d in self.table.dishes}
        unknown = seen - menu
        if unknown:
            return False, f"Unknown dishes on ballot: {sorted(unknown)}"

        # Check 5: Every dish ranked
        missing = menu - seen
        if missing:
            names = sorted(self.table.get_dish(d).name for d in missing)
            return False, f"Ballot is missing {len(missing)} dishes: {names}"

        return True, None
