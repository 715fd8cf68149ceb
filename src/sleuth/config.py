"""Runtime configuration for the case engine and scripts."""

from __future__ import annotations

import logging
import os


def _env_int(name: str) -> int | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return int(value)


SEED = _env_int("SLEUTH_SEED")
DEFAULT_CASE_ID = 1
CASE_COUNT = 20
CLUE_LOG_LIMIT = 10
POINTS_CAP = 999
MINIGAME_AWARD = 1
LOG_LEVEL = os.environ.get("SLEUTH_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
