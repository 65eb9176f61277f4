"""Real puzzle input: session token, download and on-disk cache."""

from puzzle_input.cache import InputCache
from puzzle_input.config import InputConfig, load_config, load_default_config
from puzzle_input.downloader import InputDownloader
from puzzle_input.errors import (
    DownloadError,
    InputAcquisitionError,
    InputCacheError,
    TokenError,
)
from puzzle_input.provider import CachedInputProvider, InputProvider, build_input_provider
from puzzle_input.token import SessionTokenSource, TokenPrompt, normalize_token

__all__ = [
    "InputCache",
    "InputConfig",
    "load_config",
    "load_default_config",
    "InputDownloader",
    "DownloadError",
    "InputAcquisitionError",
    "InputCacheError",
    "TokenError",
    "CachedInputProvider",
    "InputProvider",
    "build_input_provider",
    "SessionTokenSource",
    "TokenPrompt",
    "normalize_token",
]
