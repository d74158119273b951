# src/pathing/logging_config.py
"""
Central logging configuration for the pathfinding tools.

Call configure_logging() from your main entrypoint once:

    from pathing.logging_config import configure_logging
    configure_logging()

Search strategies log through module loggers (pathing.*); they emit
DEBUG lines per search, so pass logging.DEBUG to see them.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: logging level as int or name (e.g. logging.DEBUG, "INFO")
        stream: handler stream, stdout by default. Tools that print
            machine-readable output pass sys.stderr.
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
