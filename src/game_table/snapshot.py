"""Game table snapshots - JSON exports of one table and its ratings."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from src.game_table.game_table import GameTable
from src.rank_engine.models import Dish, Player, Rating

logger = logging.getLogger(__name__)


@dataclass
class GameSnapshot:
    """A table plus every rating submitted for it."""

    table: GameTable
    ratings: List[Rating] = field(default_factory=list)


def load_snapshot(path: Path) -> GameSnapshot:
    """Load a snapshot from a JSON file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the document is not valid JSON or misses a
            required key.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt snapshot file {path}: {e}") from e

    snapshot = snapshot_from_dict(data)
    logger.info(
        "Loaded snapshot for table %s from %s: %d players, %d dishes, %d ratings",
        snapshot.table.code,
        path,
        len(snapshot.table.players),
        len(snapshot.table.dishes),
        len(snapshot.ratings),
    )
    return snapshot


def snapshot_from_dict(data: Dict) -> GameSnapshot:
    """Reconstruct a GameSnapshot from a dict, coercing field types."""
    try:
        td = data["table"]
        table = GameTable(
            table_id=str(td["table_id"]),
            code=str(td["code"]),
            restaurant_name=td.get("restaurant_name", ""),
            created_at=td.get("created_at") or datetime.now().isoformat(),
            players=[
                Player(
                    player_id=str(p["player_id"]),
                    name=p["name"],
                    is_host=bool(p.get("is_host", False)),
                )
                for p in data["players"]
            ],
            dishes=[
                Dish(dish_id=str(d["dish_id"]), name=d["name"])
                for d in data["dishes"]
            ],
            is_active=bool(td.get("is_active", True)),
        )
        ratings = [
            Rating(
                player_id=str(r["player_id"]),
                dish_id=str(r["dish_id"]),
                rank=int(r["rank"]),
                total_dishes=int(r["total_dishes"]),
            )
            for r in data.get("ratings", [])
        ]
    except KeyError as e:
        raise ValueError(f"Malformed snapshot: missing key {e}") from e
    except TypeError as e:
        raise ValueError(f"Malformed snapshot: {e}") from e

    return GameSnapshot(table=table, ratings=ratings)


def snapshot_to_dict(snapshot: GameSnapshot) -> Dict:
    """Convert a GameSnapshot to a JSON-serializable dict."""
    table = snapshot.table
    return {
        "table": {
            "table_id": table.table_id,
            "code": table.code,
            "restaurant_name": table.restaurant_name,
            "created_at": table.created_at,
            "is_active": table.is_active,
        },
        "players": [
            {"player_id": p.player_id, "name": p.name, "is_host": p.is_host}
            for p in table.players
        ],
        "dishes": [{"dish_id": d.dish_id, "name": d.name} for d in table.dishes],
        "ratings": [
            {
                "player_id": r.player_id,
                "dish_id": r.dish_id,
                "rank": r.rank,
                "total_dishes": r.total_dishes,
            }
            for r in snapshot.ratings
        ],
    }
