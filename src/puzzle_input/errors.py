from __future__ import annotations


class InputAcquisitionError(RuntimeError):
    """Raised when real puzzle input cannot be produced."""

    error_kind = "input_acquisition_failure"


class TokenError(InputAcquisitionError):
    """Raised when no usable session token is available."""

    error_kind = "session_token_invalid"


class DownloadError(InputAcquisitionError):
    error_kind = "input_download_failed"

    def __init__(
        self, message: str, *, status_code: int | None = None, auth_failure: bool = False
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.auth_failure = auth_failure


class InputCacheError(InputAcquisitionError):
    """Raised when the on-disk input cache cannot be read."""

    error_kind = "input_cache_failure"
