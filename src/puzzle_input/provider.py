from __future__ import annotations

from collections.abc import Callable, Mapping

from puzzle_input.cache import InputCache
from puzzle_input.config import InputConfig
from puzzle_input.downloader import InputDownloader
from puzzle_input.errors import DownloadError, InputCacheError
from puzzle_input.observability import Observability, null_observability
from puzzle_input.token import SessionTokenSource, TokenPrompt
from time_key import DayKey

InputProvider = Callable[[DayKey], str]


class CachedInputProvider:
    """Real-input provider backed by the disk cache, downloading on a miss.

    Raises ``InputAcquisitionError`` subclasses when no text can be produced.
    """

    def __init__(
        self,
        cache: InputCache,
        downloader: InputDownloader,
        *,
        observability: Observability | None = None,
    ) -> None:
        self._cache = cache
        self._downloader = downloader
        self._observability = observability or null_observability()

    def __call__(self, key: DayKey) -> str:
        cached = self._cache.read_input(key)
        if cached is not None:
            self._observability.log_cache_hit(key)
            return cached

        try:
            text = self._downloader.download(key)
        except DownloadError as exc:
            self._observability.log_download_failure(
                key,
                error_kind=exc.error_kind,
                error_detail=str(exc),
                status_code=exc.status_code,
            )
            if exc.auth_failure:
                self._downloader.tokens.invalidate()
            raise

        try:
            self._cache.write_input(key, text)
        except InputCacheError as exc:
            self._observability.log_cache_write_failure(
                key, error_kind=exc.error_kind, error_detail=str(exc)
            )
        return text.rstrip("\n")

    def close(self) -> None:
        self._downloader.close()


def build_input_provider(
    config: InputConfig,
    *,
    prompt: TokenPrompt | None = None,
    environ: Mapping[str, str] | None = None,
    observability: Observability | None = None,
) -> CachedInputProvider:
    cache = InputCache(config.cache_dir)
    tokens = SessionTokenSource(
        cache,
        env_var=config.token_env_var,
        prompt=prompt,
        environ=environ,
        observability=observability,
    )
    downloader = InputDownloader.from_config(config, tokens, observability=observability)
    return CachedInputProvider(cache, downloader, observability=observability)
