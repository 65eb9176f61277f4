from puzzle_input.config.loader import load_config, load_default_config
from puzzle_input.config.schema import InputConfig, validate_config

__all__ = [
    "InputConfig",
    "load_config",
    "load_default_config",
    "validate_config",
]
