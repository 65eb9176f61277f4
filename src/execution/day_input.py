from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from execution.observability import Observability, null_observability
from puzzle_input.errors import InputAcquisitionError
from time_key import DayKey

InputProvider = Callable[[DayKey], str]


@dataclass(frozen=True)
class InputFetch:
    text: str | None = None
    error: InputAcquisitionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DayInput:
    """Real input for one day, fetched at most once and shared by both parts.

    A failed fetch is remembered as well, so the second part does not retry.
    """

    def __init__(
        self,
        key: DayKey,
        provider: InputProvider,
        *,
        observability: Observability | None = None,
    ) -> None:
        self._key = key
        self._provider = provider
        self._observability = observability or null_observability()
        self._result: InputFetch | None = None

    @property
    def key(self) -> DayKey:
        return self._key

    @property
    def fetched(self) -> bool:
        return self._result is not None

    def fetch(self) -> InputFetch:
        if self._result is None:
            self._result = self._fetch_once()
        return self._result

    def _fetch_once(self) -> InputFetch:
        try:
            text = self._provider(self._key)
        except InputAcquisitionError as exc:
            self._observability.record_input_fetch(success=False)
            self._observability.log_input_failure(
                self._key, error_kind=exc.error_kind, error_detail=str(exc)
            )
            return InputFetch(error=exc)
        self._observability.record_input_fetch(success=True)
        self._observability.log_input_fetched(self._key, size=len(text))
        return InputFetch(text=text)
