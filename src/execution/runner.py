from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta

from execution.contracts import Request
from execution.day_input import DayInput, InputProvider
from execution.observability import Observability, null_observability
from outcomes import (
    NOT_MAPPED,
    UNIMPLEMENTED_SOLVER,
    Checked,
    CheckedAndRan,
    DayOutcome,
    PartOutcome,
    RunCompleted,
    RunFailed,
    RunSkipped,
)
from solution import (
    CheckOutcome,
    Failed,
    Inconclusive,
    InconclusiveReason,
    SampleAbsent,
    SampleEmpty,
    SamplePresent,
    SolverMapping,
    SolverPart,
    Unimplemented,
    compare,
)
from time_key import DayKey, DayPartKey

Clock = Callable[[], float]


class PuzzleRunner:
    """Decides, per part, whether to check, run, or stop early.

    The sample check always comes first. Real input is only requested when
    a run is wanted and the check did not fail, or when a part without a
    sample has to be probed for being a stub.
    """

    def __init__(
        self,
        mapper: SolverMapping,
        input_provider: InputProvider,
        *,
        observability: Observability | None = None,
        clock: Clock = time.perf_counter,
    ) -> None:
        self._mapper = mapper
        self._input_provider = input_provider
        self._observability = observability or null_observability()
        self._clock = clock

    def day_input(self, key: DayKey) -> DayInput:
        return DayInput(key, self._input_provider, observability=self._observability)

    def execute_day(self, request: Request, key: DayKey) -> DayOutcome:
        day_input = self.day_input(key)
        part_1, part_2 = key.parts()
        return DayOutcome(
            part_1=self.execute_part(request, part_1, day_input),
            part_2=self.execute_part(request, part_2, day_input),
        )

    def execute_part(
        self, request: Request, key: DayPartKey, day_input: DayInput | None = None
    ) -> PartOutcome:
        if day_input is None:
            day_input = self.day_input(key.day_key())
        elif day_input.key != key.day_key():
            raise ValueError(f"day input for {day_input.key} cannot serve {key}")
        outcome = self._evaluate(request, key, day_input)
        self._observability.log_part_outcome(key, request=request.value, outcome=outcome)
        self._observability.record_part_metrics(request=request.value, outcome=outcome)
        return outcome

    def _evaluate(self, request: Request, key: DayPartKey, day_input: DayInput) -> PartOutcome:
        record = self._mapper(key.year, key.day)
        if record is None:
            return NOT_MAPPED
        solver = record.part(key.part)

        sample = solver.sample_input
        if isinstance(sample, SampleAbsent):
            check: CheckOutcome = Inconclusive(InconclusiveReason.MISSING_SAMPLE)
            if request is Request.CHECK_ONLY:
                return self._probe(solver, check, day_input)
        elif isinstance(sample, SampleEmpty):
            if isinstance(solver.sample_answer, Unimplemented):
                check = Inconclusive(InconclusiveReason.ELIDED)
            else:
                check = Inconclusive(InconclusiveReason.ELIDED_MISMATCH, solver.sample_answer)
        elif isinstance(sample, SamplePresent):
            compared = compare(solver.solve(sample.text), solver.sample_answer)
            if compared is None:
                return UNIMPLEMENTED_SOLVER
            check = compared
        else:
            raise TypeError(f"unsupported sample input: {type(sample).__name__}")

        if request is Request.CHECK_ONLY:
            return Checked(check)
        if isinstance(check, Failed):
            return CheckedAndRan(check, RunSkipped())
        return self._run(solver, check, day_input)

    def _probe(self, solver: SolverPart, check: CheckOutcome, day_input: DayInput) -> PartOutcome:
        fetch = day_input.fetch()
        if fetch.text is None:
            return Checked(check)
        if isinstance(solver.solve(fetch.text), Unimplemented):
            return UNIMPLEMENTED_SOLVER
        return Checked(check)

    def _run(self, solver: SolverPart, check: CheckOutcome, day_input: DayInput) -> PartOutcome:
        fetch = day_input.fetch()
        if fetch.error is not None:
            return CheckedAndRan(check, RunFailed(fetch.error.error_kind, str(fetch.error)))
        assert fetch.text is not None
        started = self._clock()
        value = solver.solve(fetch.text)
        duration = timedelta(seconds=max(self._clock() - started, 0.0))
        if isinstance(value, Unimplemented):
            return UNIMPLEMENTED_SOLVER
        self._observability.record_run_duration(duration)
        return CheckedAndRan(check, RunCompleted(value, duration))
