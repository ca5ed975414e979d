"""Loggers for the shuffler modules; host scripts configure output once at startup."""

from __future__ import annotations

import logging
import os

ROOT_LOGGER = "shuffler"
DEFAULT_LEVEL = "WARNING"


def level_from_env() -> int:
    """Level named by SHUFFLER_LOG_LEVEL; unknown names fall back to WARNING."""
    name = os.getenv("SHUFFLER_LOG_LEVEL", DEFAULT_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int | None = None) -> None:
    if level is None:
        level = level_from_env()
    logging.basicConfig(level=level, format="%(levelname)-7s %(name)s | %(message)s")


def get_logger(module: str) -> logging.Logger:
    """Child of the package logger, e.g. get_logger("deck") -> "shuffler.deck"."""
    return logging.getLogger(f"{ROOT_LOGGER}.{module}")
