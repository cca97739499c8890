import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_LEVEL_ENV_VAR = "PLAYTE_LOG_LEVEL"


def setup_logging(
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> Optional[Path]:
    """Configure logging for the Playte results tools.

    The level comes from *log_level*, then ``$PLAYTE_LOG_LEVEL``, then INFO.

    Returns:
        Path of the log file, or None if logging was already configured.
    """
    level_name = (log_level or os.getenv(LOG_LEVEL_ENV_VAR) or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return None  # Already configured

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "playte.log"

    root_logger.setLevel(level)

    # Results files stay small; 1MB max, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)

    # Console only shows warnings so report output stays readable
    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(level, logging.WARNING))

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", level_name)
    return log_file
