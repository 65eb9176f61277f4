"""Typer CLI entrypoint for the puzzle harness."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path

import typer

from execution import Request
from puzzle_input import InputConfig, TokenPrompt, load_config, load_default_config
from runtime.handler import BatchAbortedError, Handler, HandlerReport
from runtime.observability import bootstrap_observability
from runtime.wiring import build_runtime, load_solver_mapping
from time_key import TimeKeyError

LOG_DIR = "logs"
EXIT_USAGE = 2

app = typer.Typer(
    add_completion=False,
    help="Check puzzle solutions against their samples, then run them on real input.",
    no_args_is_help=True,
)


@dataclass(frozen=True)
class Target:
    years: tuple[int, ...] | None = None
    year: int | None = None
    day: int | None = None
    part: int | None = None
    latest: str | None = None


def parse_year_range(value: str) -> tuple[int, ...]:
    first, sep, last = value.strip().partition("-")
    try:
        if not sep:
            return (int(first),)
        start, end = int(first), int(last)
    except ValueError as exc:
        raise typer.BadParameter("--years must be YEAR or FIRST-LAST.") from exc
    if end < start:
        raise typer.BadParameter("--years range ends before it starts.")
    return tuple(range(start, end + 1))


def resolve_target(
    *,
    years: str | None,
    year: int | None,
    day: int | None,
    part: int | None,
    latest: str | None,
) -> Target:
    if (years is None) == (year is None):
        raise typer.BadParameter("exactly one of --years or --year is required.")
    if years is not None:
        if day is not None or part is not None or latest is not None:
            raise typer.BadParameter("--years cannot be combined with --day, --part or --latest.")
        return Target(years=parse_year_range(years))
    if latest is not None:
        normalized = latest.strip().lower()
        if normalized not in {"day", "part"}:
            raise typer.BadParameter("--latest must be one of: day,part")
        if day is not None or part is not None:
            raise typer.BadParameter("--latest cannot be combined with --day or --part.")
        return Target(year=year, latest=normalized)
    if part is not None and day is None:
        raise typer.BadParameter("--part requires --day.")
    return Target(year=year, day=day, part=part)


def dispatch(handler: Handler, request: Request, target: Target) -> HandlerReport:
    prefix = "check" if request is Request.CHECK_ONLY else "run"
    if target.years is not None:
        return getattr(handler, f"{prefix}_year_range")(target.years)
    if target.latest == "day":
        return getattr(handler, f"{prefix}_most_recent_day")(target.year)
    if target.latest == "part":
        return getattr(handler, f"{prefix}_most_recent_part")(target.year)
    if target.part is not None:
        return getattr(handler, f"{prefix}_part")(target.year, target.day, target.part)
    if target.day is not None:
        return getattr(handler, f"{prefix}_day")(target.year, target.day)
    return getattr(handler, f"{prefix}_year")(target.year)


def _load_input_config(config_file: Path | None) -> InputConfig:
    if config_file is None:
        return load_default_config()
    return load_config(config_file)


def _token_prompt() -> TokenPrompt | None:
    if not sys.stdin.isatty():
        return None
    return lambda: typer.prompt("Session token", hide_input=True)


def _execute(
    request: Request,
    *,
    solutions: str,
    target: Target,
    config_file: Path | None,
    log_dir: Path,
) -> None:
    try:
        config = _load_input_config(config_file)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-file") from exc
    try:
        mapper = load_solver_mapping(solutions)
    except (ImportError, TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--solutions") from exc

    observability = bootstrap_observability(log_dir=str(log_dir))
    runtime = build_runtime(mapper, config, observability, prompt=_token_prompt())
    started = time.monotonic()
    try:
        report = dispatch(runtime.handler, request, target)
    except (TimeKeyError, BatchAbortedError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc
    finally:
        runtime.close()
    for error in report.rejected:
        typer.echo(f"skipped: {error}", err=True)
    typer.echo(report.text)
    observability.runtime.log_completed(
        command=request.value, duration_ms=int((time.monotonic() - started) * 1000)
    )


_SOLUTIONS_OPTION = typer.Option(
    ...,
    "--solutions",
    help="MODULE:ATTR naming a solver registry or a {(year, day): DaySolver} mapping.",
)
_YEARS_OPTION = typer.Option(None, "--years", help="Year range: YEAR or FIRST-LAST.")
_YEAR_OPTION = typer.Option(None, "--year", help="Single year.")
_DAY_OPTION = typer.Option(None, "--day", help="Day within --year.")
_PART_OPTION = typer.Option(None, "--part", help="Part within --day (1 or 2).")
_LATEST_OPTION = typer.Option(
    None, "--latest", help="Most recent solved 'day' or 'part' of --year."
)
_CONFIG_OPTION = typer.Option(
    None,
    "--config-file",
    help="Optional input provider YAML path.",
    exists=False,
    file_okay=True,
    dir_okay=False,
    readable=True,
)
_LOG_DIR_OPTION = typer.Option(Path(LOG_DIR), "--log-dir", help="Directory for the log file.")


@app.command("check")
def check(
    solutions: str = _SOLUTIONS_OPTION,
    years: str | None = _YEARS_OPTION,
    year: int | None = _YEAR_OPTION,
    day: int | None = _DAY_OPTION,
    part: int | None = _PART_OPTION,
    latest: str | None = _LATEST_OPTION,
    config_file: Path | None = _CONFIG_OPTION,
    log_dir: Path = _LOG_DIR_OPTION,
) -> None:
    """Check the selected parts against their samples only."""

    target = resolve_target(years=years, year=year, day=day, part=part, latest=latest)
    _execute(
        Request.CHECK_ONLY,
        solutions=solutions,
        target=target,
        config_file=config_file,
        log_dir=log_dir,
    )


@app.command("run")
def run(
    solutions: str = _SOLUTIONS_OPTION,
    years: str | None = _YEARS_OPTION,
    year: int | None = _YEAR_OPTION,
    day: int | None = _DAY_OPTION,
    part: int | None = _PART_OPTION,
    latest: str | None = _LATEST_OPTION,
    config_file: Path | None = _CONFIG_OPTION,
    log_dir: Path = _LOG_DIR_OPTION,
) -> None:
    """Check the selected parts, then run those that did not fail on real input."""

    target = resolve_target(years=years, year=year, day=day, part=part, latest=latest)
    _execute(
        Request.CHECK_AND_RUN,
        solutions=solutions,
        target=target,
        config_file=config_file,
        log_dir=log_dir,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
