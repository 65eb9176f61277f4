"""Validated year / day / part indices."""

from time_key.errors import (
    DayTooHighError,
    DayZeroError,
    PartTooHighError,
    PartZeroError,
    TimeKeyError,
    YearTooEarlyError,
)
from time_key.keys import FIRST_YEAR, PARTS, DayKey, DayPartKey, YearKey, max_days

__all__ = [
    "FIRST_YEAR",
    "PARTS",
    "DayKey",
    "DayPartKey",
    "YearKey",
    "max_days",
    "DayTooHighError",
    "DayZeroError",
    "PartTooHighError",
    "PartZeroError",
    "TimeKeyError",
    "YearTooEarlyError",
]
