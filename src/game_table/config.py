from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Exported game-table snapshots
SNAPSHOTS_DIR = PROJECT_ROOT / "data" / "snapshots"

# Menu settings
MIN_DISHES = 4
DISH_ID_PREFIX = "dish_"

# Joining a table
GAME_CODE_LENGTH = 5
DEFAULT_PLAYER_NAME = "Player"

# Share messages
SHARE_APP_NAME = "Playte"
