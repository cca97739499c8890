"""Numeric join codes for game tables."""

import random
from typing import Optional, Tuple

from src.game_table.config import GAME_CODE_LENGTH


def generate_game_code(rng: Optional[random.Random] = None) -> str:
    """Return a random numeric code of ``GAME_CODE_LENGTH`` digits.

    The first digit is never zero so the code survives being typed into a
    numeric keypad field.
    """
    rng = rng or random.Random()
    low = 10 ** (GAME_CODE_LENGTH - 1)
    high = 10 ** GAME_CODE_LENGTH - 1
    return str(rng.randint(low, high))


def validate_game_code(code: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Check a code typed in by a joining player.

    Returns:
        (is_valid, error_message) - (True, None) if valid
    """
    if code is None or not code.strip():
        return False, "Please enter a game code"

    code = code.strip()
    if len(code) != GAME_CODE_LENGTH or not (code.isascii() and code.isdigit()):
        return False, f"Game code must be {GAME_CODE_LENGTH} digits"

    return True, None
