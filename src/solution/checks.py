from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from solution.values import SolutionValue


class InconclusiveReason(str, Enum):
    ELIDED = "elided"
    ELIDED_MISMATCH = "elided_mismatch"
    MISSING_SAMPLE = "missing_sample"
    MISSING_ANSWER = "missing_answer"


_REASONS_WITH_VALUE = {InconclusiveReason.ELIDED_MISMATCH, InconclusiveReason.MISSING_ANSWER}


class OrderingHint(str, Enum):
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"


@dataclass(frozen=True)
class WrongShape:
    candidate: SolutionValue
    expected: SolutionValue


@dataclass(frozen=True)
class Incorrect:
    candidate: SolutionValue
    expected: SolutionValue
    hint: OrderingHint | None = None


FailureDetail = WrongShape | Incorrect


@dataclass(frozen=True)
class Passed:
    pass


@dataclass(frozen=True)
class Inconclusive:
    """The sample could not prove the solver right or wrong.

    ELIDED_MISMATCH carries the recorded answer, MISSING_ANSWER carries the
    value the solver produced on the sample.
    """

    reason: InconclusiveReason
    value: SolutionValue | None = None

    def __post_init__(self) -> None:
        if self.reason in _REASONS_WITH_VALUE and self.value is None:
            raise ValueError(f"inconclusive reason {self.reason.value} requires a value")
        if self.reason not in _REASONS_WITH_VALUE and self.value is not None:
            raise ValueError(f"inconclusive reason {self.reason.value} carries no value")


@dataclass(frozen=True)
class Failed:
    detail: FailureDetail


CheckOutcome = Passed | Inconclusive | Failed
