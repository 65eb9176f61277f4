from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from outcomes import AcquisitionFailure, Checked, CheckedAndRan, PartOutcome, RunCompleted
from time_key import DayKey, DayPartKey


class StructuredLogger(Protocol):
    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None: ...


class MetricsRecorder(Protocol):
    def increment(
        self, name: str, value: int = 1, tags: Mapping[str, str] | None = None
    ) -> None: ...

    def observe(
        self, name: str, value: float, tags: Mapping[str, str] | None = None
    ) -> None: ...


@dataclass(frozen=True)
class StdlibLogger:
    logger: logging.Logger

    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None:
        self.logger.log(level, message, extra={"fields": dict(fields)})


@dataclass(frozen=True)
class NullLogger:
    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None:
        return None


@dataclass(frozen=True)
class NullMetrics:
    def increment(
        self, name: str, value: int = 1, tags: Mapping[str, str] | None = None
    ) -> None:
        return None

    def observe(
        self, name: str, value: float, tags: Mapping[str, str] | None = None
    ) -> None:
        return None


@dataclass(frozen=True)
class Observability:
    logger: StructuredLogger
    metrics: MetricsRecorder

    def log_part_outcome(self, key: DayPartKey, *, request: str, outcome: PartOutcome) -> None:
        fields: dict[str, object] = {
            "year": key.year,
            "day": key.day,
            "part": key.part,
            "request": request,
        }
        fields.update(outcome_fields(outcome))
        self.logger.log(logging.INFO, "execution.part.completed", fields)

    def log_input_fetched(self, key: DayKey, *, size: int) -> None:
        self.logger.log(
            logging.DEBUG,
            "execution.input.fetched",
            {"year": key.year, "day": key.day, "size": size},
        )

    def log_input_failure(self, key: DayKey, *, error_kind: str, error_detail: str) -> None:
        self.logger.log(
            logging.WARNING,
            "execution.input.failed",
            {
                "year": key.year,
                "day": key.day,
                "error_kind": error_kind,
                "error_detail": error_detail,
            },
        )

    def record_part_metrics(self, *, request: str, outcome: PartOutcome) -> None:
        fields = outcome_fields(outcome)
        tags = {"request": request, "status": str(fields["status"])}
        self.metrics.increment("execution.parts", tags=tags)

    def record_run_duration(self, duration: timedelta) -> None:
        self.metrics.observe("execution.run.duration_ms", duration.total_seconds() * 1000.0)

    def record_input_fetch(self, *, success: bool) -> None:
        self.metrics.increment(
            "execution.input.fetches",
            tags={"status": "success" if success else "failure"},
        )


def outcome_fields(outcome: PartOutcome) -> dict[str, object]:
    if isinstance(outcome, AcquisitionFailure):
        return {"status": outcome.kind.value}
    if isinstance(outcome, Checked):
        return {"status": "checked", "check": type(outcome.check).__name__}
    if isinstance(outcome, CheckedAndRan):
        fields: dict[str, object] = {
            "status": "checked_and_ran",
            "check": type(outcome.check).__name__,
            "run": type(outcome.run).__name__,
        }
        if isinstance(outcome.run, RunCompleted):
            fields["duration_ms"] = outcome.run.duration.total_seconds() * 1000.0
        return fields
    raise TypeError(f"unsupported part outcome: {type(outcome).__name__}")


def null_observability() -> Observability:
    return Observability(logger=NullLogger(), metrics=NullMetrics())
