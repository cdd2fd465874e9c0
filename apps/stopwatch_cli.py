from __future__ import annotations

import math
import time
from typing import List, Optional, Tuple

import typer
from pydantic import ValidationError

from config.settings import StopwatchSettings, get_settings
from core.timing.stopwatch import Stopwatch


app = typer.Typer(add_completion=False, no_args_is_help=True)


def parse_lap(spec: str, default_pause: float) -> Tuple[str, float]:
    """Split ``name`` or ``name=seconds`` into a lap name and the pause before it."""
    name, sep, raw = spec.partition("=")
    name = name.strip()
    if not name:
        raise typer.BadParameter(f"lap {spec!r} has no name")
    if not sep:
        return name, default_pause
    try:
        pause = float(raw)
    except ValueError:
        raise typer.BadParameter(f"lap {spec!r}: {raw!r} is not a number of seconds") from None
    if not math.isfinite(pause) or pause < 0:
        raise typer.BadParameter(f"lap {spec!r}: pause must be a finite number >= 0")
    return name, pause


def resolve_settings(clock: Optional[str], interval: Optional[float]) -> StopwatchSettings:
    overrides = {k: v for k, v in (("clock", clock), ("interval_s", interval)) if v is not None}
    try:
        if not overrides:
            return get_settings()
        # explicit flags replace their env counterparts before validation
        return StopwatchSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from None


@app.command()
def main(
    laps: List[str] = typer.Argument(..., help="Laps to record, as NAME or NAME=SECONDS to pause first"),
    interval: Optional[float] = typer.Option(None, help="Pause before laps without explicit seconds"),
    clock: Optional[str] = typer.Option(None, help="Time source: wall | perf | monotonic"),
) -> None:
    """Time a sequence of named laps and print the summary table."""

    settings = resolve_settings(clock, interval)
    plan = [parse_lap(spec, settings.interval_s) for spec in laps]

    stopwatch = Stopwatch(time_source=settings.time_source()).start()
    for name, pause in plan:
        if pause:
            time.sleep(pause)
        stopwatch.lap(name)
    stopwatch.stop()

    try:
        report = stopwatch.summary()
    except ZeroDivisionError:
        typer.echo(f"[stopwatch] no time elapsed on the {settings.clock} clock; nothing to report", err=True)
        raise typer.Exit(code=1)
    typer.echo(report, nl=False)


if __name__ == "__main__":
    app()
