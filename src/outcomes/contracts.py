from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from solution.checks import CheckOutcome
from solution.values import SolutionValue
from time_key import DayKey, YearKey


class AcquisitionFailureKind(str, Enum):
    NOT_MAPPED = "not_mapped"
    UNIMPLEMENTED = "unimplemented"


@dataclass(frozen=True)
class AcquisitionFailure:
    """No solver was mapped, or the mapped solver turned out to be a stub."""

    kind: AcquisitionFailureKind


NOT_MAPPED = AcquisitionFailure(AcquisitionFailureKind.NOT_MAPPED)
UNIMPLEMENTED_SOLVER = AcquisitionFailure(AcquisitionFailureKind.UNIMPLEMENTED)


@dataclass(frozen=True)
class RunCompleted:
    value: SolutionValue
    duration: timedelta


@dataclass(frozen=True)
class RunSkipped:
    """The sample check failed, so the real input was never solved."""


@dataclass(frozen=True)
class RunFailed:
    error_kind: str
    error_detail: str


RunOutcome = RunCompleted | RunSkipped | RunFailed


@dataclass(frozen=True)
class Checked:
    check: CheckOutcome


@dataclass(frozen=True)
class CheckedAndRan:
    check: CheckOutcome
    run: RunOutcome


PartOutcome = AcquisitionFailure | Checked | CheckedAndRan


def is_acquisition_failure(outcome: PartOutcome) -> bool:
    return isinstance(outcome, AcquisitionFailure)


@dataclass(frozen=True)
class DayOutcome:
    part_1: PartOutcome
    part_2: PartOutcome

    def parts(self) -> tuple[PartOutcome, PartOutcome]:
        return (self.part_1, self.part_2)

    def part(self, part: int) -> PartOutcome:
        if part == 1:
            return self.part_1
        if part == 2:
            return self.part_2
        raise ValueError(f"part must be 1 or 2, got {part}")

    def is_unmapped(self) -> bool:
        return self.part_1 == NOT_MAPPED and self.part_2 == NOT_MAPPED


@dataclass(frozen=True)
class YearOutcome:
    year: YearKey
    days: Sequence[DayOutcome]

    def __post_init__(self) -> None:
        days = tuple(self.days)
        if len(days) != self.year.max_days():
            raise ValueError(
                f"{self.year} needs {self.year.max_days()} day outcomes, got {len(days)}"
            )
        object.__setattr__(self, "days", days)

    def day(self, key: DayKey) -> DayOutcome:
        if key.year != self.year.year:
            raise ValueError(f"{key} is not part of {self.year}")
        return self.days[key.day - 1]

    def items(self) -> tuple[tuple[DayKey, DayOutcome], ...]:
        return tuple(zip(self.year.days(), self.days))
