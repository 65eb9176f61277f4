from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from execution.observability import NullMetrics as ExecutionNullMetrics
from execution.observability import Observability as ExecutionObservability
from execution.observability import StdlibLogger as ExecutionStdlibLogger
from puzzle_input.observability import Observability as InputObservability
from puzzle_input.observability import StdlibLogger as InputStdlibLogger

LOG_FILE_NAME = "puzzle-harness.log"


@dataclass(frozen=True)
class RuntimeObservability:
    logger: logging.Logger

    def log_invocation(self, *, command: str, request: str, target: str) -> None:
        self.logger.info(
            "runtime.invocation",
            extra={"fields": {"command": command, "request": request, "target": target}},
        )

    def log_index_rejected(self, *, error_kind: str, error_detail: str) -> None:
        self.logger.warning(
            "runtime.index_rejected",
            extra={"fields": {"error_kind": error_kind, "error_detail": error_detail}},
        )

    def log_batch_aborted(self, *, error_kind: str, error_detail: str) -> None:
        self.logger.error(
            "runtime.batch_aborted",
            extra={"fields": {"error_kind": error_kind, "error_detail": error_detail}},
        )

    def log_completed(self, *, command: str, duration_ms: int) -> None:
        self.logger.info(
            "runtime.completed",
            extra={"fields": {"command": command, "duration_ms": duration_ms}},
        )


@dataclass(frozen=True)
class ObservabilityBundle:
    runtime: RuntimeObservability
    execution: ExecutionObservability
    puzzle_input: InputObservability


class _FieldsFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "fields"):
            record.fields = {}
        return True


def bootstrap_observability(*, log_dir: str) -> ObservabilityBundle:
    _setup_logging(log_dir=log_dir)
    return ObservabilityBundle(
        runtime=RuntimeObservability(logger=logging.getLogger("runtime")),
        execution=ExecutionObservability(
            logger=ExecutionStdlibLogger(logging.getLogger("execution")),
            metrics=ExecutionNullMetrics(),
        ),
        puzzle_input=InputObservability(
            logger=InputStdlibLogger(logging.getLogger("puzzle_input")),
        ),
    )


def _setup_logging(*, log_dir: str) -> None:
    os.makedirs(log_dir, exist_ok=True)
    fields_filter = _FieldsFilter()
    handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME))
    handler.addFilter(fields_filter)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | %(fields)s"
    )
    handler.setFormatter(formatter)
    logging.basicConfig(
        level=logging.INFO,
        handlers=[handler],
    )
    logging.getLogger("runtime").setLevel(logging.DEBUG)
    logging.getLogger("execution").setLevel(logging.INFO)
    logging.getLogger("puzzle_input").setLevel(logging.DEBUG)
