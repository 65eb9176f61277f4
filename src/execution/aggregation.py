from __future__ import annotations

from collections.abc import Iterable, Iterator

from execution.contracts import Request
from execution.runner import PuzzleRunner
from outcomes import DayOutcome, PartOutcome, YearOutcome, is_acquisition_failure
from time_key import DayKey, DayPartKey, YearKey


def execute_year(runner: PuzzleRunner, request: Request, year: YearKey) -> YearOutcome:
    return YearOutcome(
        year=year,
        days=tuple(runner.execute_day(request, day) for day in year.days()),
    )


def execute_year_range(
    runner: PuzzleRunner, request: Request, years: Iterable[YearKey]
) -> tuple[YearOutcome, ...]:
    return tuple(execute_year(runner, request, year) for year in years)


def execute_most_recent_day(
    runner: PuzzleRunner, request: Request, year: YearKey
) -> tuple[DayKey, DayOutcome]:
    """Latest day with at least one mapped part, falling back to day 1."""
    last: tuple[DayKey, DayOutcome] | None = None
    for day in reversed(year.days()):
        outcome = runner.execute_day(request, day)
        if not outcome.is_unmapped():
            return day, outcome
        last = (day, outcome)
    assert last is not None
    return last


def execute_most_recent_part(
    runner: PuzzleRunner, request: Request, year: YearKey
) -> tuple[DayPartKey, PartOutcome]:
    """Latest part that got past acquisition, falling back to day 1 part 1."""
    last: tuple[DayPartKey, PartOutcome] | None = None
    for key, outcome in _scan_parts_descending(runner, request, year):
        if not is_acquisition_failure(outcome):
            return key, outcome
        last = (key, outcome)
    assert last is not None
    return last


def _scan_parts_descending(
    runner: PuzzleRunner, request: Request, year: YearKey
) -> Iterator[tuple[DayPartKey, PartOutcome]]:
    for day in reversed(year.days()):
        day_input = runner.day_input(day)
        for key in reversed(day.parts()):
            yield key, runner.execute_part(request, key, day_input)
