"""
log.py: Logging setup for the birdman package.
"""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("birdman.", "")
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> None:
    """Configure the birdman root logger."""
    root = logging.getLogger("birdman")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    root.propagate = False
