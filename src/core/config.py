"""Settings, read once from the environment."""

import logging
import os

# Seconds on each player's clock at the start of a game
CLOCK_SECONDS = int(os.getenv("CHESS_CLOCK_SECONDS", "600"))

# Period of the wall-clock timer driving `tick`
TICK_SECONDS = float(os.getenv("CHESS_TICK_SECONDS", "1.0"))

LOG_LEVEL = os.getenv("CHESS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Called once at startup by the host application that embeds `ChessService` (the UI or a server process).
    Modules in this package never configure logging themselves, they only call `logging.getLogger(__name__)`.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
