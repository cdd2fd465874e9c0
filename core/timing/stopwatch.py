"""Wall-clock stopwatch that records named laps and renders a summary table.

Typical use::

    stopwatch = Stopwatch().start()
    ...  # read from database
    stopwatch.lap("read from database")
    ...  # write to disk
    stopwatch.lap("write to disk")
    print(stopwatch.stop().summary())
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from core.errors import PreconditionError
from core.events import LapEvent, stop_event
from core.timing.summary import format_summary

TimeSource = Callable[[], float]


@dataclass
class Stopwatch:
    """Marks laps between ``start()`` and ``stop()``.

    Not thread-safe; use one instance per thread or task. Laps taken before
    ``start()`` or after ``stop()`` are accepted and simply show up with odd
    durations in the report.
    """

    time_source: TimeSource = time.time
    start_time: Optional[float] = None
    stop_time: Optional[float] = None
    events: list[LapEvent] = field(default_factory=list)

    def now(self) -> float:
        # laps are stored as float too, so every timestamp shares one type
        return float(self.time_source())

    def start(self) -> "Stopwatch":
        self.start_time = self.now()
        return self

    def lap(self, name: str) -> "Stopwatch":
        self.events.append(LapEvent(name=name, time=self.now()))
        return self

    def stop(self) -> "Stopwatch":
        self.stop_time = self.now()
        return self

    def total_time(self) -> float:
        """Seconds between ``start()`` and ``stop()``."""
        if self.start_time is None:
            raise PreconditionError("start")
        if self.stop_time is None:
            raise PreconditionError("stop")
        return self.stop_time - self.start_time

    def summary(self) -> str:
        """Return the lap table, closed by a ``_stop_`` row.

        ``events`` is left untouched. Raises ``PreconditionError`` before
        ``start()``/``stop()`` and ``ZeroDivisionError`` when no time elapsed.
        """
        total = self.total_time()
        working = [*self.events, stop_event(self.stop_time)]  # type: ignore[arg-type]
        return format_summary(working, self.start_time, total)  # type: ignore[arg-type]


__all__ = ["Stopwatch", "TimeSource"]
