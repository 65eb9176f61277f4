from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from execution import (
    PuzzleRunner,
    Request,
    execute_most_recent_day,
    execute_most_recent_part,
    execute_year,
    execute_year_range,
)
from report import ReportRenderer, TextReportRenderer
from runtime.observability import RuntimeObservability
from time_key import DayKey, DayPartKey, TimeKeyError, YearKey


class BatchAbortedError(ValueError):
    """Raised when a year range contains no valid year at all."""

    error_kind = "batch_aborted"

    def __init__(self, rejected: Sequence[TimeKeyError]) -> None:
        self.rejected = tuple(rejected)
        if self.rejected:
            detail = "; ".join(str(error) for error in self.rejected)
            message = f"no valid years requested: {detail}"
        else:
            message = "no years requested"
        super().__init__(message)


@dataclass(frozen=True)
class HandlerReport:
    text: str
    rejected: tuple[TimeKeyError, ...] = ()


def validate_years(years: Iterable[int]) -> tuple[tuple[YearKey, ...], tuple[TimeKeyError, ...]]:
    """Dedupe and sort the requested years, splitting them into valid keys and errors."""
    valid: list[YearKey] = []
    rejected: list[TimeKeyError] = []
    for year in sorted(set(years)):
        try:
            valid.append(YearKey(year))
        except TimeKeyError as exc:
            rejected.append(exc)
    return tuple(valid), tuple(rejected)


class Handler:
    """Validates requested indices, executes them and renders the result.

    Single indices raise ``TimeKeyError`` before anything runs. Year ranges
    drop invalid years (reported on the returned ``HandlerReport``) and only
    abort when nothing valid is left.
    """

    def __init__(
        self,
        runner: PuzzleRunner,
        *,
        renderer: ReportRenderer | None = None,
        observability: RuntimeObservability | None = None,
    ) -> None:
        self._runner = runner
        self._renderer = renderer or TextReportRenderer()
        self._observability = observability or RuntimeObservability(
            logger=logging.getLogger("runtime")
        )

    def check_year_range(self, years: Iterable[int]) -> HandlerReport:
        return self._year_range(Request.CHECK_ONLY, years)

    def run_year_range(self, years: Iterable[int]) -> HandlerReport:
        return self._year_range(Request.CHECK_AND_RUN, years)

    def check_year(self, year: int) -> HandlerReport:
        return self._year(Request.CHECK_ONLY, year)

    def run_year(self, year: int) -> HandlerReport:
        return self._year(Request.CHECK_AND_RUN, year)

    def check_most_recent_day(self, year: int) -> HandlerReport:
        return self._most_recent_day(Request.CHECK_ONLY, year)

    def run_most_recent_day(self, year: int) -> HandlerReport:
        return self._most_recent_day(Request.CHECK_AND_RUN, year)

    def check_day(self, year: int, day: int) -> HandlerReport:
        return self._day(Request.CHECK_ONLY, year, day)

    def run_day(self, year: int, day: int) -> HandlerReport:
        return self._day(Request.CHECK_AND_RUN, year, day)

    def check_most_recent_part(self, year: int) -> HandlerReport:
        return self._most_recent_part(Request.CHECK_ONLY, year)

    def run_most_recent_part(self, year: int) -> HandlerReport:
        return self._most_recent_part(Request.CHECK_AND_RUN, year)

    def check_part(self, year: int, day: int, part: int) -> HandlerReport:
        return self._part(Request.CHECK_ONLY, year, day, part)

    def run_part(self, year: int, day: int, part: int) -> HandlerReport:
        return self._part(Request.CHECK_AND_RUN, year, day, part)

    def _year_range(self, request: Request, years: Iterable[int]) -> HandlerReport:
        valid, rejected = validate_years(years)
        for error in rejected:
            self._observability.log_index_rejected(
                error_kind=error.error_kind, error_detail=str(error)
            )
        if not valid:
            aborted = BatchAbortedError(rejected)
            self._observability.log_batch_aborted(
                error_kind=aborted.error_kind, error_detail=str(aborted)
            )
            raise aborted
        self._log_invocation("year_range", request, f"{valid[0]}..{valid[-1]}")
        outcomes = execute_year_range(self._runner, request, valid)
        return HandlerReport(
            text=self._compose(request, self._renderer.render_years(outcomes)),
            rejected=rejected,
        )

    def _year(self, request: Request, year: int) -> HandlerReport:
        key = self._validated(YearKey, year)
        self._log_invocation("year", request, str(key))
        outcome = execute_year(self._runner, request, key)
        return HandlerReport(self._compose(request, self._renderer.render_year(outcome)))

    def _most_recent_day(self, request: Request, year: int) -> HandlerReport:
        key = self._validated(YearKey, year)
        self._log_invocation("most_recent_day", request, str(key))
        day, outcome = execute_most_recent_day(self._runner, request, key)
        return HandlerReport(self._compose(request, self._renderer.render_day(day, outcome)))

    def _day(self, request: Request, year: int, day: int) -> HandlerReport:
        key = self._validated(DayKey, year, day)
        self._log_invocation("day", request, str(key))
        outcome = self._runner.execute_day(request, key)
        return HandlerReport(self._compose(request, self._renderer.render_day(key, outcome)))

    def _most_recent_part(self, request: Request, year: int) -> HandlerReport:
        key = self._validated(YearKey, year)
        self._log_invocation("most_recent_part", request, str(key))
        part, outcome = execute_most_recent_part(self._runner, request, key)
        return HandlerReport(self._compose(request, self._renderer.render_part(part, outcome)))

    def _part(self, request: Request, year: int, day: int, part: int) -> HandlerReport:
        key = self._validated(DayPartKey, year, day, part)
        self._log_invocation("part", request, str(key))
        outcome = self._runner.execute_part(request, key)
        return HandlerReport(self._compose(request, self._renderer.render_part(key, outcome)))

    def _validated(self, key_cls, *values: int):
        try:
            return key_cls(*values)
        except TimeKeyError as exc:
            self._observability.log_index_rejected(
                error_kind=exc.error_kind, error_detail=str(exc)
            )
            raise

    def _compose(self, request: Request, body: str) -> str:
        return f"{self._renderer.render_request(request)}\n{body}"

    def _log_invocation(self, command: str, request: Request, target: str) -> None:
        self._observability.log_invocation(command=command, request=request.value, target=target)
