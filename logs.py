"""
logs.py

One-stop logging setup for the game. Modules just call logging.getLogger(__name__);
main.py calls setup_logging() once before the window opens.
"""

from __future__ import annotations

import logging
import sys

from settings import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """Attach a stdout handler to the root logger unless one is already configured."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)],
        )
    else:
        root.setLevel(level)
    return logging.getLogger("police_chase")
