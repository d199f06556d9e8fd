"""
Single place to:
- Load a local .env (if any) for diagnostics settings, from the CLI only
- Hold the fixed game rules (level range, countdown, tick cadence)
- Configure logging once for the CLI

Game rules are constants on purpose: only the level is chosen by the player.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# 1) Diagnostics. Logs go to stderr, so keep them quiet while the terminal is raw.
LOG_LEVEL_VAR = "HITBLOW_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# 2) Game rules
MIN_LEVEL = 3
MAX_LEVEL = 9
COUNTDOWN_SECONDS = 10  # per guess, reset after every complete guess
TICK_SECONDS = 0.05  # ~20 Hz redraw

# 3) Input thread timings
READ_POLL_SECONDS = 0.1  # how long the reader waits in select() before re-checking the stop flag
JOIN_TIMEOUT_SECONDS = 1.0


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set up the root logger. Only the CLI calls this, so only the CLI reads .env.
    Unknown level names fall back to WARNING.
    """
    if level is None:
        load_dotenv()
        level = os.getenv(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
