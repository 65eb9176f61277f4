from __future__ import annotations


class TimeKeyError(ValueError):
    """Base class for rejected year/day/part indices."""

    error_kind = "time_key_invalid"


class YearTooEarlyError(TimeKeyError):
    error_kind = "year_too_early"

    def __init__(self, year: int) -> None:
        super().__init__(f"Invalid year {year}: Advent of Code started in 2015.")
        self.year = year


class DayZeroError(TimeKeyError):
    error_kind = "day_zero"

    def __init__(self, day: int) -> None:
        super().__init__(
            f"Invalid day {day}: days are one-indexed, the first of December is day 1."
        )
        self.day = day


class DayTooHighError(TimeKeyError):
    error_kind = "day_too_high"

    def __init__(self, year: int, day: int, max_days: int) -> None:
        super().__init__(
            f"Invalid day {day}: {year} only has {max_days} puzzle days."
        )
        self.year = year
        self.day = day
        self.max_days = max_days


class PartZeroError(TimeKeyError):
    error_kind = "part_zero"

    def __init__(self, part: int) -> None:
        super().__init__(
            f"Invalid part {part}: parts are one-indexed, the first part is part 1."
        )
        self.part = part


class PartTooHighError(TimeKeyError):
    error_kind = "part_too_high"

    def __init__(self, part: int) -> None:
        super().__init__(
            f"Invalid part {part}: puzzles have two parts."
        )
        self.part = part
