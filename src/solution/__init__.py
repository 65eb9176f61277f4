"""Solution values, sample checks and the solver declaration interface."""

from solution.checks import (
    CheckOutcome,
    Failed,
    FailureDetail,
    Inconclusive,
    InconclusiveReason,
    Incorrect,
    OrderingHint,
    Passed,
    WrongShape,
)
from solution.compare import compare
from solution.solver import (
    DaySolver,
    RawSolver,
    SolverMapping,
    SolverPart,
    SolverRecord,
    SolverRegistry,
)
from solution.values import (
    UNIMPLEMENTED,
    Number,
    SampleAbsent,
    SampleEmpty,
    SampleInput,
    SamplePresent,
    SolutionValue,
    Text,
    Unimplemented,
    to_sample_input,
    to_solution_value,
)

__all__ = [
    "CheckOutcome",
    "Failed",
    "FailureDetail",
    "Inconclusive",
    "InconclusiveReason",
    "Incorrect",
    "OrderingHint",
    "Passed",
    "WrongShape",
    "compare",
    "DaySolver",
    "RawSolver",
    "SolverMapping",
    "SolverPart",
    "SolverRecord",
    "SolverRegistry",
    "UNIMPLEMENTED",
    "Number",
    "SampleAbsent",
    "SampleEmpty",
    "SampleInput",
    "SamplePresent",
    "SolutionValue",
    "Text",
    "Unimplemented",
    "to_sample_input",
    "to_solution_value",
]
