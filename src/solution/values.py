from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Unimplemented:
    """Produced by a solver that returned nothing meaningful (a stub)."""

    def __str__(self) -> str:
        return "Unimplemented"


@dataclass(frozen=True)
class Number:
    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise TypeError("Number requires a Decimal value")
        if not self.value.is_finite():
            raise ValueError("Number requires a finite Decimal value")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    value: str

    def __str__(self) -> str:
        return self.value


SolutionValue = Unimplemented | Number | Text

UNIMPLEMENTED = Unimplemented()


def to_solution_value(raw: object) -> SolutionValue:
    if raw is None:
        return UNIMPLEMENTED
    if isinstance(raw, (Unimplemented, Number, Text)):
        return raw
    if isinstance(raw, bool):
        return Text(str(raw))
    if isinstance(raw, int):
        return Number(Decimal(raw))
    if isinstance(raw, Decimal):
        if raw.is_finite():
            return Number(raw)
        return Text(str(raw))
    if isinstance(raw, float):
        if math.isfinite(raw):
            return Number(Decimal(repr(raw)))
        return Text(str(raw))
    if isinstance(raw, str):
        return Text(raw)
    return Text(str(raw))


@dataclass(frozen=True)
class SampleAbsent:
    """No sample input was ever provided."""


@dataclass(frozen=True)
class SampleEmpty:
    """The sample input was deliberately left blank."""


@dataclass(frozen=True)
class SamplePresent:
    text: str


SampleInput = SampleAbsent | SampleEmpty | SamplePresent


def to_sample_input(raw: str | SampleInput | None) -> SampleInput:
    if raw is None:
        return SampleAbsent()
    if isinstance(raw, (SampleAbsent, SampleEmpty, SamplePresent)):
        return raw
    if not isinstance(raw, str):
        raise TypeError(f"sample input must be a str or None, got {type(raw).__name__}")
    if raw == "":
        return SampleEmpty()
    return SamplePresent(_dedent(raw))


def _dedent(text: str) -> str:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(line.lstrip() for line in lines)
