from __future__ import annotations

from solution.checks import (
    CheckOutcome,
    Failed,
    Inconclusive,
    InconclusiveReason,
    Incorrect,
    OrderingHint,
    Passed,
    WrongShape,
)
from solution.values import Number, SolutionValue, Text, Unimplemented


def compare(candidate: SolutionValue, expected: SolutionValue) -> CheckOutcome | None:
    """Classify a sample result against the recorded answer.

    None is returned only for an Unimplemented candidate, which is how callers
    tell stub code apart from every other outcome.
    """
    if isinstance(candidate, Unimplemented):
        return None
    if isinstance(expected, Unimplemented):
        return Inconclusive(InconclusiveReason.MISSING_ANSWER, candidate)
    if type(candidate) is not type(expected):
        return Failed(WrongShape(candidate=candidate, expected=expected))
    if isinstance(candidate, Number) and isinstance(expected, Number):
        if candidate.value == expected.value:
            return Passed()
        hint = OrderingHint.TOO_HIGH if candidate.value > expected.value else OrderingHint.TOO_LOW
        return Failed(Incorrect(candidate=candidate, expected=expected, hint=hint))
    if isinstance(candidate, Text) and isinstance(expected, Text):
        if candidate.value == expected.value:
            return Passed()
        return Failed(Incorrect(candidate=candidate, expected=expected, hint=None))
    raise TypeError(f"unsupported solution value: {type(candidate).__name__}")
