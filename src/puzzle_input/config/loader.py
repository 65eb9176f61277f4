from __future__ import annotations

import importlib
import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from puzzle_input.config.schema import InputConfig, validate_config

_ROOT_KEYS = {
    "cache_dir",
    "base_url",
    "user_agent",
    "timeout_s",
    "retry_total",
    "retry_backoff_s",
    "token_env_var",
}


def load_default_config() -> InputConfig:
    payload = _load_default_payload()
    config = _parse_config(payload)
    validate_config(config)
    return config


def load_config(path: str | Path) -> InputConfig:
    """Load a config file, filling keys it omits from the packaged defaults."""
    text = Path(path).read_text(encoding="utf-8")
    overrides = _parse_yaml(text, f"config file {path}")
    _reject_unknown(overrides, _ROOT_KEYS, "puzzle_input config")
    config = _parse_config({**_load_default_payload(), **overrides})
    validate_config(config)
    return config


def _load_default_payload() -> Mapping[str, object]:
    text = (
        resources.files("puzzle_input.config")
        .joinpath("default.yaml")
        .read_text(encoding="utf-8")
    )
    return _parse_yaml(text, "puzzle_input default config")


def _parse_yaml(text: str, label: str) -> Mapping[str, object]:
    yaml = importlib.import_module("yaml")
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{label} must be a mapping")
    return data


def _parse_config(payload: Mapping[str, object]) -> InputConfig:
    _reject_unknown(payload, _ROOT_KEYS, "puzzle_input config")
    cache_dir = _require_str(payload.get("cache_dir"), "cache_dir")
    base_url = _require_str(payload.get("base_url"), "base_url")
    retry_total = payload.get("retry_total")
    if isinstance(retry_total, bool) or not isinstance(retry_total, int):
        raise ValueError("retry_total must be an int")
    return InputConfig(
        cache_dir=os.path.expanduser(cache_dir),
        base_url=base_url.rstrip("/"),
        user_agent=_require_str(payload.get("user_agent"), "user_agent"),
        timeout_s=_require_number(payload.get("timeout_s"), "timeout_s"),
        retry_total=retry_total,
        retry_backoff_s=_require_number(payload.get("retry_backoff_s"), "retry_backoff_s"),
        token_env_var=_require_str(payload.get("token_env_var"), "token_env_var"),
    )


def _require_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _require_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _reject_unknown(payload: Mapping[str, object], allowed: set[str], label: str) -> None:
    unknown = set(payload.keys()) - allowed
    if unknown:
        unknown_list = ", ".join(sorted(str(item) for item in unknown))
        raise ValueError(f"unknown {label} keys: {unknown_list}")
