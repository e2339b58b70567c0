"""
Logging setup for applications and scripts using ard_gp.

Library modules only create loggers (logging.getLogger(__name__)) and
never attach handlers themselves.
"""

from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging with the package's format.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("ard_gp").setLevel(level)
