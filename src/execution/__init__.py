from execution.aggregation import (
    execute_most_recent_day,
    execute_most_recent_part,
    execute_year,
    execute_year_range,
)
from execution.contracts import Request
from execution.day_input import DayInput, InputFetch, InputProvider
from execution.runner import Clock, PuzzleRunner

__all__ = [
    "execute_most_recent_day",
    "execute_most_recent_part",
    "execute_year",
    "execute_year_range",
    "Request",
    "DayInput",
    "InputFetch",
    "InputProvider",
    "Clock",
    "PuzzleRunner",
]
