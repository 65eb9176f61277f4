from outcomes.contracts import (
    NOT_MAPPED,
    UNIMPLEMENTED_SOLVER,
    AcquisitionFailure,
    AcquisitionFailureKind,
    Checked,
    CheckedAndRan,
    DayOutcome,
    PartOutcome,
    RunCompleted,
    RunFailed,
    RunOutcome,
    RunSkipped,
    YearOutcome,
    is_acquisition_failure,
)

__all__ = [
    "NOT_MAPPED",
    "UNIMPLEMENTED_SOLVER",
    "AcquisitionFailure",
    "AcquisitionFailureKind",
    "Checked",
    "CheckedAndRan",
    "DayOutcome",
    "PartOutcome",
    "RunCompleted",
    "RunFailed",
    "RunOutcome",
    "RunSkipped",
    "YearOutcome",
    "is_acquisition_failure",
]
