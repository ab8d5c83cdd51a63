"""Environment-driven settings for the conversion core."""

from enum import Enum
from functools import lru_cache
import os

from . import logger

TIME_TABLE_ENV_VAR = "UNIT_CONVERTER_TIME_TABLE"


class TimeTableMode(str, Enum):
    """Which time conversion table to use.

    ``legacy`` reproduces the historical factors exactly, including entries
    that disagree with each other; ``consistent`` derives every factor from
    the seconds-based anchors.
    """

    LEGACY = "legacy"
    CONSISTENT = "consistent"


DEFAULT_TIME_TABLE_MODE = TimeTableMode.LEGACY


@lru_cache(maxsize=1)
def get_time_table_mode() -> TimeTableMode:
    """Resolve the time table mode from the environment, falling back to legacy."""
    raw = os.environ.get(TIME_TABLE_ENV_VAR)
    if not raw:
        return DEFAULT_TIME_TABLE_MODE

    try:
        return TimeTableMode(raw.strip().lower())
    except ValueError:
        logger.warning(
            "Ignoring %s=%r; expected one of %s",
            TIME_TABLE_ENV_VAR,
            raw,
            ", ".join(mode.value for mode in TimeTableMode),
        )
        return DEFAULT_TIME_TABLE_MODE


def reset_config_cache() -> None:
    get_time_table_mode.cache_clear()
