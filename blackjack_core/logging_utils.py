"""Logging setup for hosts embedding the engine."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start. Defaults to the LOG_LEVEL setting."""
    level = level or config.logging.level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
