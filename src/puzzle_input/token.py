from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping

from puzzle_input.cache import InputCache
from puzzle_input.errors import InputCacheError, TokenError
from puzzle_input.observability import Observability, null_observability

TOKEN_LENGTH = 128
_TOKEN_PATTERN = re.compile(rf"[0-9a-f]{{{TOKEN_LENGTH}}}")

TokenPrompt = Callable[[], str]


def normalize_token(raw: str) -> str:
    token = raw.strip().lower()
    if not _TOKEN_PATTERN.fullmatch(token):
        raise TokenError(
            f"session token must be {TOKEN_LENGTH} hexadecimal characters, got {len(token)}"
        )
    return token


class SessionTokenSource:
    """Resolves the session token: environment, then cached file, then prompt."""

    def __init__(
        self,
        cache: InputCache,
        *,
        env_var: str,
        prompt: TokenPrompt | None = None,
        environ: Mapping[str, str] | None = None,
        observability: Observability | None = None,
    ) -> None:
        self._cache = cache
        self._env_var = env_var
        self._prompt = prompt
        self._environ = environ if environ is not None else os.environ
        self._observability = observability or null_observability()
        self._token: str | None = None

    def get(self) -> str:
        if self._token is not None:
            return self._token
        raw = self._environ.get(self._env_var)
        if raw:
            token = normalize_token(raw)
            source = "env"
        else:
            cached = self._cache.read_token()
            if cached is not None:
                token = normalize_token(cached)
                source = "cache"
            else:
                token = self._prompt_for_token()
                source = "prompt"
        self._observability.log_token_resolved(source=source)
        self._token = token
        return token

    def invalidate(self) -> None:
        self._token = None
        try:
            removed = self._cache.delete_token()
        except InputCacheError as exc:
            self._observability.log_token_cache_failure(
                error_kind=exc.error_kind, error_detail=str(exc)
            )
            removed = False
        self._observability.log_token_invalidated(removed=removed)

    def _prompt_for_token(self) -> str:
        if self._prompt is None:
            raise TokenError(f"no session token available; set {self._env_var}")
        token = normalize_token(self._prompt())
        try:
            self._cache.write_token(token)
        except InputCacheError as exc:
            self._observability.log_token_cache_failure(
                error_kind=exc.error_kind, error_detail=str(exc)
            )
        return token
