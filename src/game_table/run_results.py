"""Print the results for a saved game table snapshot.

Usage:
    python -m src.game_table.run_results [snapshot] [player_id]

Examples:
    python -m src.game_table.run_results
    python -m src.game_table.run_results data/snapshots/table.json 3f2a...
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.game_table.config import SNAPSHOTS_DIR
from src.game_table.share import (
    format_flavor_journey_share,
    format_ranking_share,
)
from src.game_table.snapshot import load_snapshot
from src.logging_config import setup_logging
from src.rank_engine.flavor_journey import build_flavor_journey

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT = SNAPSHOTS_DIR / "latest.json"


def run_results(
    snapshot_path: Path | None = None,
    current_player_id: Optional[str] = None,
) -> str:
    """Compute the ranking and flavor journey for a snapshot.

    Args:
        snapshot_path: JSON snapshot to read. Defaults to
            ``data/snapshots/latest.json``.
        current_player_id: Player to report the best match for. Defaults
            to the table's host.

    Returns:
        The report text (ranking share followed by flavor journey share).

    Raises:
        FileNotFoundError: If the snapshot doesn't exist.
        ValueError: If the snapshot is malformed or the player is unknown.
    """
    if snapshot_path is None:
        snapshot_path = DEFAULT_SNAPSHOT

    snapshot = load_snapshot(snapshot_path)
    table = snapshot.table

    if current_player_id is None:
        if table.host is None:
            raise ValueError(f"Table {table.code} has no host")
        current_player_id = table.host.player_id
    elif table.get_player(current_player_id) is None:
        raise ValueError(f"Player {current_player_id} is not seated at table {table.code}")

    journey = build_flavor_journey(
        table.dishes, table.players, snapshot.ratings, current_player_id
    )

    voters = {r.player_id for r in snapshot.ratings}
    logger.info(
        "Results for table %s: %d of %d players voted",
        table.code, len(voters), len(table.players),
    )

    return "\n\n".join([
        format_ranking_share(journey.consensus),
        format_flavor_journey_share(journey, table.restaurant_name),
    ])


if __name__ == "__main__":
    setup_logging()

    snapshot_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    player_id = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        print(run_results(snapshot_path, player_id))
    except Exception:
        logger.exception("Results failed")
        sys.exit(1)
