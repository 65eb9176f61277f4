from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from execution import Request
from outcomes import DayOutcome, PartOutcome, YearOutcome
from time_key import DayKey, DayPartKey


class ReportRenderer(ABC):
    """Outcome-only renderer interface.

    Renderers read outcome values and never execute solvers or fetch input.
    """

    @abstractmethod
    def render_request(self, request: Request) -> str:
        """Heading line announcing whether samples are tested or solutions run."""

    @abstractmethod
    def render_part(self, key: DayPartKey, outcome: PartOutcome) -> str:
        """Render a single part under a year/day/part heading."""

    @abstractmethod
    def render_day(self, key: DayKey, outcome: DayOutcome) -> str:
        """Render both parts of one day under a year/day heading."""

    @abstractmethod
    def render_year(self, outcome: YearOutcome) -> str:
        """Render every day of a year under a year heading."""

    def render_years(self, outcomes: Sequence[YearOutcome]) -> str:
        return "\n\n".join(self.render_year(outcome) for outcome in outcomes)
