from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import timedelta
from itertools import groupby

from execution import Request
from outcomes import (
    AcquisitionFailure,
    AcquisitionFailureKind,
    Checked,
    CheckedAndRan,
    DayOutcome,
    PartOutcome,
    RunCompleted,
    RunFailed,
    RunOutcome,
    RunSkipped,
    YearOutcome,
)
from report.renderer import ReportRenderer
from solution import (
    CheckOutcome,
    Failed,
    FailureDetail,
    Inconclusive,
    InconclusiveReason,
    Incorrect,
    OrderingHint,
    Passed,
    SolutionValue,
    WrongShape,
)
from time_key import DayKey, DayPartKey

_DAY_LABEL_WIDTH = 5
_DURATION_WIDTH = 8

_REQUEST_LABELS = {
    Request.CHECK_ONLY: "Testing",
    Request.CHECK_AND_RUN: "Running",
}


class TextReportRenderer(ReportRenderer):
    """Plain-text report, one line per day or per run of identical days."""

    def render_request(self, request: Request) -> str:
        return _REQUEST_LABELS[request]

    def render_part(self, key: DayPartKey, outcome: PartOutcome) -> str:
        return f"{key.year} - Day {key.day} - Part {key.part}\n{format_part(outcome)}"

    def render_day(self, key: DayKey, outcome: DayOutcome) -> str:
        lines = [f"{key.year} - Day {key.day}"]
        if outcome.part_1 == outcome.part_2:
            lines.append(format_part(outcome.part_1))
        else:
            lines.append(f"Part One - {format_part(outcome.part_1)}")
            lines.append(f"Part Two - {format_part(outcome.part_2)}")
        return "\n".join(lines)

    def render_year(self, outcome: YearOutcome) -> str:
        lines = [str(outcome.year.year)]
        numbered = list(enumerate(outcome.days, start=1))
        for _, chunk in groupby(numbered, key=lambda item: item[1]):
            lines.extend(_render_day_chunk(list(chunk)))
        return "\n".join(lines)


def _render_day_chunk(chunk: Sequence[tuple[int, DayOutcome]]) -> Iterable[str]:
    first, outcome = chunk[0]
    last = chunk[-1][0]
    label = str(first) if first == last else f"{first}-{last}"
    label = label.rjust(_DAY_LABEL_WIDTH)
    if outcome.part_1 == outcome.part_2:
        yield f"{label} - {format_part(outcome.part_1)}"
        return
    yield f"{label} ┬ {format_part(outcome.part_1)}"
    yield f"{'':{_DAY_LABEL_WIDTH}} └ {format_part(outcome.part_2)}"


def format_part(outcome: PartOutcome) -> str:
    if isinstance(outcome, AcquisitionFailure):
        if outcome.kind is AcquisitionFailureKind.NOT_MAPPED:
            return "No solution provided"
        return "Unimplemented"
    if isinstance(outcome, Checked):
        return format_check(outcome.check)
    if isinstance(outcome, CheckedAndRan):
        return _format_checked_run(outcome.check, outcome.run)
    raise TypeError(f"unsupported part outcome: {type(outcome).__name__}")


def format_check(check: CheckOutcome) -> str:
    if isinstance(check, Passed):
        return "Passed"
    if isinstance(check, Failed):
        return f"Failed: {format_failure(check.detail)}"
    if isinstance(check, Inconclusive):
        return format_inconclusive(check)
    raise TypeError(f"unsupported check outcome: {type(check).__name__}")


def format_failure(detail: FailureDetail) -> str:
    if isinstance(detail, WrongShape):
        return (
            f"Result {detail.candidate} was of a different format "
            f"({_variant_name(detail.candidate)}) than the provided solution "
            f"({_variant_name(detail.expected)})"
        )
    if isinstance(detail, Incorrect):
        if detail.hint is OrderingHint.TOO_HIGH:
            return f"Result was {detail.candidate}, which is too high. Should be {detail.expected}"
        if detail.hint is OrderingHint.TOO_LOW:
            return f"Result was {detail.candidate}, which is too low. Should be {detail.expected}"
        return f"Result was {detail.candidate}, should be {detail.expected}"
    raise TypeError(f"unsupported failure detail: {type(detail).__name__}")


def format_inconclusive(check: Inconclusive) -> str:
    if check.reason is InconclusiveReason.MISSING_SAMPLE:
        return "No test input provided, unable to test"
    if check.reason is InconclusiveReason.MISSING_ANSWER:
        return f"Test returned {check.value}, no answer to check against"
    if check.reason is InconclusiveReason.ELIDED:
        return "Test input left blank, nothing to check"
    return f"Test input left blank, but an answer of {check.value} was recorded"


def format_duration(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds >= 1:
        text = f"{seconds:.2f}s"
    elif seconds >= 1e-3:
        text = f"{seconds * 1e3:.2f}ms"
    else:
        text = f"{seconds * 1e6:.2f}µs"
    return text.rjust(_DURATION_WIDTH)


def _format_checked_run(check: CheckOutcome, run: RunOutcome) -> str:
    if isinstance(run, RunSkipped):
        if isinstance(check, Failed):
            return f"Test Failed: {format_failure(check.detail)}"
        return f"Skipped ({format_check(check)})"
    if isinstance(run, RunFailed):
        return f"Error: {run.error_detail}"
    if isinstance(run, RunCompleted):
        ran = f"{format_duration(run.duration)} {run.value}"
        if isinstance(check, Inconclusive):
            return f"{ran} ({format_inconclusive(check)})"
        return ran
    raise TypeError(f"unsupported run outcome: {type(run).__name__}")


def _variant_name(value: SolutionValue) -> str:
    return type(value).__name__
