from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from puzzle_input.config import InputConfig
from puzzle_input.errors import DownloadError
from puzzle_input.observability import Observability, null_observability
from puzzle_input.token import SessionTokenSource
from time_key import DayKey

_AUTH_STATUS_CODES = frozenset({400, 401, 403})
_RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


class InputDownloader:
    def __init__(
        self,
        tokens: SessionTokenSource,
        *,
        base_url: str,
        user_agent: str,
        timeout_s: float,
        retry_total: int = 3,
        retry_backoff_s: float = 0.5,
        session: requests.Session | None = None,
        observability: Observability | None = None,
    ) -> None:
        self._tokens = tokens
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout_s = timeout_s
        self._retry_total = retry_total
        self._retry_backoff_s = retry_backoff_s
        self._session = session
        self._observability = observability or null_observability()

    @classmethod
    def from_config(
        cls,
        config: InputConfig,
        tokens: SessionTokenSource,
        *,
        session: requests.Session | None = None,
        observability: Observability | None = None,
    ) -> InputDownloader:
        return cls(
            tokens,
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout_s=config.timeout_s,
            retry_total=config.retry_total,
            retry_backoff_s=config.retry_backoff_s,
            session=session,
            observability=observability,
        )

    @property
    def tokens(self) -> SessionTokenSource:
        return self._tokens

    def input_url(self, key: DayKey) -> str:
        return f"{self._base_url}/{key.year}/day/{key.day}/input"

    def download(self, key: DayKey) -> str:
        token = self._tokens.get()
        try:
            response = self._get_session().get(
                self.input_url(key),
                cookies={"session": token},
                timeout=self._timeout_s,
            )
        except requests.RequestException as exc:
            raise DownloadError(f"request for {key} input failed: {exc}") from exc

        status = response.status_code
        if status in _AUTH_STATUS_CODES:
            raise DownloadError(
                f"session token rejected while fetching {key} input (status {status})",
                status_code=status,
                auth_failure=True,
            )
        if status == 404:
            raise DownloadError(f"input for {key} is not available yet", status_code=status)
        if status != 200:
            raise DownloadError(
                f"unexpected status {status} while fetching {key} input", status_code=status
            )
        text = response.text
        self._observability.log_download(key, status_code=status, size=len(text))
        return text

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            retry = Retry(
                total=self._retry_total,
                backoff_factor=self._retry_backoff_s,
                status_forcelist=_RETRY_STATUS_CODES,
                allowed_methods=("GET",),
                respect_retry_after_header=True,
            )
            session.headers.update({"User-Agent": self._user_agent})
            adapter = HTTPAdapter(max_retries=retry)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            self._session = session
        return self._session
