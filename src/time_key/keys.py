from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from time_key.errors import (
    DayTooHighError,
    DayZeroError,
    PartTooHighError,
    PartZeroError,
    YearTooEarlyError,
)

FIRST_YEAR = 2015
SHORT_CALENDAR_FROM = 2025
PARTS = (1, 2)

_K = TypeVar("_K")


def max_days(year: int) -> int:
    if year >= SHORT_CALENDAR_FROM:
        return 12
    return 25


def _require_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field_name} must be an int, got {type(value).__name__}")
    return value


def _trusted(cls: type[_K], **fields: int) -> _K:
    # Builds a key from already-validated fields without re-running __post_init__.
    instance = object.__new__(cls)
    for name, value in fields.items():
        object.__setattr__(instance, name, value)
    return instance


@dataclass(frozen=True, order=True)
class YearKey:
    year: int

    def __post_init__(self) -> None:
        year = _require_int(self.year, "year")
        if year < FIRST_YEAR:
            raise YearTooEarlyError(year)

    def to_primitive(self) -> int:
        return self.year

    def max_days(self) -> int:
        return max_days(self.year)

    def days(self) -> tuple[DayKey, ...]:
        """All day keys of this year, ascending. Use reversed() for a descending scan."""
        return tuple(
            _trusted(DayKey, year=self.year, day=day)
            for day in range(1, self.max_days() + 1)
        )

    def __str__(self) -> str:
        return str(self.year)


@dataclass(frozen=True, order=True)
class DayKey:
    year: int
    day: int

    def __post_init__(self) -> None:
        year_key = YearKey(self.year)
        day = _require_int(self.day, "day")
        if day < 1:
            raise DayZeroError(day)
        limit = year_key.max_days()
        if day > limit:
            raise DayTooHighError(year_key.year, day, limit)

    def to_primitive(self) -> tuple[int, int]:
        return (self.year, self.day)

    def year_key(self) -> YearKey:
        return _trusted(YearKey, year=self.year)

    def parts(self) -> tuple[DayPartKey, DayPartKey]:
        first, second = (
            _trusted(DayPartKey, year=self.year, day=self.day, part=part) for part in PARTS
        )
        return (first, second)

    def __str__(self) -> str:
        return f"{self.year}/{self.day}"


@dataclass(frozen=True, order=True)
class DayPartKey:
    year: int
    day: int
    part: int

    def __post_init__(self) -> None:
        DayKey(self.year, self.day)
        part = _require_int(self.part, "part")
        if part < 1:
            raise PartZeroError(part)
        if part > len(PARTS):
            raise PartTooHighError(part)

    def to_primitive(self) -> tuple[int, int, int]:
        return (self.year, self.day, self.part)

    def day_key(self) -> DayKey:
        return _trusted(DayKey, year=self.year, day=self.day)

    def year_key(self) -> YearKey:
        return self.day_key().year_key()

    def __str__(self) -> str:
        return f"{self.year}/{self.day}/{self.part}"
