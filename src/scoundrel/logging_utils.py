from __future__ import annotations

import logging
import os

# LOG_LEVEL=DEBUG / INFO / WARNING / ERROR overrides the settings file.
LOG_LEVEL_ENV = "LOG_LEVEL"


def setup_logging(level: str = "WARNING") -> None:
    """Call once at program start."""
    level = os.getenv(LOG_LEVEL_ENV, level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
