"""Lap records shared by the stopwatch and the report renderer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

STOP_MARKER = "_stop_"


class LapEvent(BaseModel):
    """A named checkpoint and the timestamp (fractional seconds) it was taken at."""

    model_config = ConfigDict(frozen=True)

    name: str
    time: float


def stop_event(stop_time: float) -> LapEvent:
    """Return the synthetic closing record appended when rendering a summary."""

    return LapEvent(name=STOP_MARKER, time=stop_time)


__all__ = ["LapEvent", "STOP_MARKER", "stop_event"]
