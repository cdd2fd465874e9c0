"""
Runtime settings for the stopwatch tools.

Honors these env vars:
    STOPWATCH_CLOCK       wall | perf | monotonic  (default: wall)
    STOPWATCH_INTERVAL_S  default pause before each CLI lap, seconds (default: 0)

The library itself never reads settings; callers resolve a clock here and
inject it into ``Stopwatch(time_source=...)``.
"""

from __future__ import annotations

import math
import os
import time
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.timing.stopwatch import TimeSource

ClockName = Literal["wall", "perf", "monotonic"]

CLOCKS: dict[str, TimeSource] = {
    "wall": time.time,
    "perf": time.perf_counter,
    "monotonic": time.monotonic,
}


class StopwatchSettings(BaseModel):
    # env-derived defaults go through validation like explicit values
    model_config = ConfigDict(validate_default=True)

    clock: ClockName = Field(default_factory=lambda: os.getenv("STOPWATCH_CLOCK", "wall"))
    interval_s: float = Field(default_factory=lambda: os.getenv("STOPWATCH_INTERVAL_S", "0"))

    @field_validator("interval_s")
    @classmethod
    def _finite_non_negative(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            raise ValueError("interval_s must be a finite number >= 0")
        return v

    def time_source(self) -> TimeSource:
        return CLOCKS[self.clock]


# ---------- Singleton access ----------

_settings_singleton: Optional[StopwatchSettings] = None

def get_settings(force_refresh: bool = False) -> StopwatchSettings:
    """
    Return a cached StopwatchSettings instance built from the environment.
    """
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = StopwatchSettings()
    return _settings_singleton
