from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from time_key import DayKey


class StructuredLogger(Protocol):
    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None: ...


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
class Observability:
    logger: StructuredLogger

    def log_cache_hit(self, key: DayKey) -> None:
        self.logger.log(
            logging.DEBUG,
            "puzzle_input.cache.hit",
            {"year": key.year, "day": key.day},
        )

    def log_cache_write_failure(
        self, key: DayKey, *, error_kind: str, error_detail: str
    ) -> None:
        self.logger.log(
            logging.WARNING,
            "puzzle_input.cache.write_failed",
            {
                "year": key.year,
                "day": key.day,
                "error_kind": error_kind,
                "error_detail": error_detail,
            },
        )

    def log_download(self, key: DayKey, *, status_code: int, size: int) -> None:
        self.logger.log(
            logging.INFO,
            "puzzle_input.download.completed",
            {"year": key.year, "day": key.day, "status_code": status_code, "size": size},
        )

    def log_download_failure(
        self,
        key: DayKey,
        *,
        error_kind: str,
        error_detail: str,
        status_code: int | None,
    ) -> None:
        self.logger.log(
            logging.WARNING,
            "puzzle_input.download.failed",
            {
                "year": key.year,
                "day": key.day,
                "status_code": status_code,
                "error_kind": error_kind,
                "error_detail": error_detail,
            },
        )

    def log_token_resolved(self, *, source: str) -> None:
        self.logger.log(logging.INFO, "puzzle_input.token.resolved", {"source": source})

    def log_token_invalidated(self, *, removed: bool) -> None:
        self.logger.log(
            logging.WARNING,
            "puzzle_input.token.invalidated",
            {"cached_token_removed": removed},
        )

    def log_token_cache_failure(self, *, error_kind: str, error_detail: str) -> None:
        self.logger.log(
            logging.WARNING,
            "puzzle_input.token.cache_failed",
            {"error_kind": error_kind, "error_detail": error_detail},
        )


def null_observability() -> Observability:
    return Observability(logger=NullLogger())
