from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from solution.values import (
    UNIMPLEMENTED,
    SampleInput,
    SolutionValue,
    to_sample_input,
    to_solution_value,
)
from time_key import DayKey

RawSolver = Callable[[str], object]


@dataclass(frozen=True)
class SolverPart:
    solver: RawSolver
    sample_input: SampleInput
    sample_answer: SolutionValue

    def solve(self, puzzle_input: str) -> SolutionValue:
        try:
            raw = self.solver(puzzle_input)
        except NotImplementedError:
            return UNIMPLEMENTED
        return to_solution_value(raw)


@dataclass(frozen=True)
class SolverRecord:
    part_1: SolverPart
    part_2: SolverPart

    def part(self, part: int) -> SolverPart:
        if part == 1:
            return self.part_1
        if part == 2:
            return self.part_2
        raise ValueError(f"part must be 1 or 2, got {part}")


SolverMapping = Callable[[int, int], SolverRecord | None]


class DaySolver(ABC):
    """Solutions for one puzzle day.

    Return None (or raise NotImplementedError) from a part to mark it as not
    written yet. Sample inputs default to absent, part 2 reuses the part 1
    sample unless overridden, and sample answers default to unknown.

        class Day01(DaySolver):
            def part_1(self, puzzle_input):
                return len(puzzle_input.splitlines())

            def part_2(self, puzzle_input):
                return None

            def part_1_sample_input(self):
                return '''
                    line 1
                    line 2
                '''

            def part_1_sample_answer(self):
                return 2
    """

    @abstractmethod
    def part_1(self, puzzle_input: str) -> object: ...

    @abstractmethod
    def part_2(self, puzzle_input: str) -> object: ...

    def part_1_sample_input(self) -> str | None:
        return None

    def part_1_sample_answer(self) -> object:
        return None

    def part_2_sample_input(self) -> str | None:
        return self.part_1_sample_input()

    def part_2_sample_answer(self) -> object:
        return None

    @classmethod
    def wrap(cls) -> SolverRecord:
        instance = cls()
        return SolverRecord(
            part_1=SolverPart(
                solver=instance.part_1,
                sample_input=to_sample_input(instance.part_1_sample_input()),
                sample_answer=to_solution_value(instance.part_1_sample_answer()),
            ),
            part_2=SolverPart(
                solver=instance.part_2,
                sample_input=to_sample_input(instance.part_2_sample_input()),
                sample_answer=to_solution_value(instance.part_2_sample_answer()),
            ),
        )


class SolverRegistry:
    """Maps (year, day) to a wrapped DaySolver."""

    def __init__(
        self,
        solvers: Mapping[tuple[int, int], type[DaySolver]]
        | Iterable[tuple[tuple[int, int], type[DaySolver]]] = (),
    ) -> None:
        self._records: dict[DayKey, SolverRecord] = {}
        items = solvers.items() if isinstance(solvers, Mapping) else solvers
        for (year, day), solver_cls in items:
            self.register(year, day, solver_cls)

    def register(self, year: int, day: int, solver_cls: type[DaySolver]) -> None:
        key = DayKey(year, day)
        if key in self._records:
            raise ValueError(f"duplicate solver for {key}")
        if not (isinstance(solver_cls, type) and issubclass(solver_cls, DaySolver)):
            raise TypeError(f"solver for {key} must be a DaySolver subclass")
        self._records[key] = solver_cls.wrap()

    def keys(self) -> tuple[DayKey, ...]:
        return tuple(sorted(self._records))

    def __call__(self, year: int, day: int) -> SolverRecord | None:
        return self._records.get(DayKey(year, day))

    def __len__(self) -> int:
        return len(self._records)
