from src.game_table.ballot_box import BallotBox
from src.game_table.dish_menu import DishMenu
from src.game_table.game_code import generate_game_code, validate_game_code
from src.game_table.game_table import GameTable
from src.game_table.snapshot import (
    GameSnapshot,
    load_snapshot,
    snapshot_from_dict,
    snapshot_to_dict,
)
from src.game_table.table_rules import TableRules, ValidationError

__all__ = [
    "BallotBox",
    "DishMenu",
    "GameSnapshot",
    "GameTable",
    "TableRules",
    "ValidationError",
    "generate_game_code",
    "load_snapshot",
    "snapshot_from_dict",
    "snapshot_to_dict",
    "validate_game_code",
]
