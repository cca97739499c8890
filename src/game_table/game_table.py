"""Game table state - the dishes and diners for one game."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
import uuid

from src.game_table.config import DEFAULT_PLAYER_NAME, MIN_DISHES
from src.game_table.game_code import generate_game_code, validate_game_code
from src.rank_engine.models import Dish, Player


@dataclass
class GameTable:
    """One game instance. Every player, dish and rating is scoped to it."""

    table_id: str
    code: str
    restaurant_name: str
    created_at: str
    players: List[Player] = field(default_factory=list)
    dishes: List[Dish] = field(default_factory=list)
    is_active: bool = True

    @classmethod
    def create_new(
        cls,
        restaurant_name: str,
        host_name: str,
        dishes: List[Dish],
        code: Optional[str] = None,
        min_dishes: int = MIN_DISHES,
    ) -> "GameTable":
        """Factory method to open a table and seat its host."""
        if len(dishes) < min_dishes:
            raise ValueError(
                f"At least {min_dishes} dishes are needed to start "
                f"(got {len(dishes)})"
            )
        dish_ids = [d.dish_id for d in dishes]
        if len(set(dish_ids)) != len(dish_ids):
            raise ValueError("Dish ids must be unique within a table")

        if code is None:
            code = generate_game_code()
        else:
            is_valid, error = validate_game_code(code)
            if not is_valid:
                raise ValueError(error)

        table_id = str(uuid.uuid4())
        host = Player(
            player_id=str(uuid.uuid4()),
            name=host_name.strip() or DEFAULT_PLAYER_NAME,
            is_host=True,
        )

        return cls(
            table_id=table_id,
            code=code,
            restaurant_name=restaurant_name.strip(),
            created_at=datetime.now().isoformat(),
            players=[host],
            dishes=list(dishes),
        )

    def join(self, name: str) -> Player:
        """Seat a new (non-host) player."""
        if not self.is_active:
            raise ValueError(f"Table {self.code} is no longer active")

        player = Player(
            player_id=str(uuid.uuid4()),
            name=name.strip() or DEFAULT_PLAYER_NAME,
            is_host=False,
        )
        self.players.append(player)
        return player

    @property
    def host(self) -> Optional[Player]:
        """The player who created the table."""
        return next((p for p in self.players if p.is_host), None)

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get a seated player by ID."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def get_dish(self, dish_id: str) -> Optional[Dish]:
        """Get a dish by ID."""
        for dish in self.dishes:
            if dish.dish_id == dish_id:
                return dish
        return None

    def close(self):
        """Stop accepting new players and ballots."""
        self.is_active = False
