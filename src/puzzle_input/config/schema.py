from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse


@dataclass(frozen=True)
class InputConfig:
    cache_dir: str
    base_url: str
    user_agent: str
    timeout_s: float
    retry_total: int
    retry_backoff_s: float
    token_env_var: str


def validate_config(config: InputConfig) -> None:
    if not config.cache_dir:
        raise ValueError("cache_dir must be set")
    parsed = urlparse(config.base_url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("base_url must be an absolute http(s) url")
    if not config.user_agent:
        raise ValueError("user_agent must be set")
    _require_positive(config.timeout_s, "timeout_s")
    _require_non_negative(config.retry_total, "retry_total")
    _require_non_negative(config.retry_backoff_s, "retry_backoff_s")
    if not config.token_env_var:
        raise ValueError("token_env_var must be set")


def _require_positive(value: float | None, field_name: str) -> None:
    if value is None or value <= 0:
        raise ValueError(f"{field_name} must be > 0")


def _require_non_negative(value: float | None, field_name: str) -> None:
    if value is None or value < 0:
        raise ValueError(f"{field_name} must be >= 0")
