from __future__ import annotations

import importlib
from collections.abc import Mapping
from dataclasses import dataclass

from execution import PuzzleRunner
from puzzle_input import (
    CachedInputProvider,
    InputConfig,
    TokenPrompt,
    build_input_provider,
)
from runtime.handler import Handler
from runtime.observability import ObservabilityBundle
from solution import SolverMapping, SolverRegistry


@dataclass(frozen=True)
class Runtime:
    handler: Handler
    runner: PuzzleRunner
    provider: CachedInputProvider

    def close(self) -> None:
        self.provider.close()


def load_solver_mapping(spec: str) -> SolverMapping:
    """Import ``module:attribute`` and return it as a solver mapping.

    The attribute may be a ``SolverRegistry`` (or any ``(year, day)`` callable)
    or a ``{(year, day): DaySolver subclass}`` mapping.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"solutions must be given as module:attribute, got {spec!r}")
    module = importlib.import_module(module_name)
    try:
        target = getattr(module, attr)
    except AttributeError as exc:
        raise ValueError(f"module {module_name!r} has no attribute {attr!r}") from exc
    if isinstance(target, Mapping):
        return SolverRegistry(target)
    if callable(target):
        return target
    raise ValueError(f"{spec} is neither a solver registry nor a mapping")


def build_runtime(
    mapper: SolverMapping,
    config: InputConfig,
    observability: ObservabilityBundle,
    *,
    prompt: TokenPrompt | None = None,
) -> Runtime:
    provider = build_input_provider(
        config, prompt=prompt, observability=observability.puzzle_input
    )
    runner = PuzzleRunner(mapper, provider, observability=observability.execution)
    handler = Handler(runner, observability=observability.runtime)
    return Runtime(handler=handler, runner=runner, provider=provider)
