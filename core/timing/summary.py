"""Fixed-width text report of a sequence of laps.

Layout (one line per record, each newline-terminated)::

    NAME                        TIME        CUMULATIVE      PERCENTAGE
     read from database          0.123       0.123           34.462%

Names are truncated to 26 characters inside a 27 character field; durations
and cumulative times are printed with three decimals in 11 and 15 character
fields; the percentage has three decimals and a trailing ``%``.
"""

from __future__ import annotations

from typing import Iterable

from core.events import LapEvent

HEADER_FORMAT = "{:<27.26} {:<11} {:<15} {}\n"
ROW_FORMAT = " {:<27.26} {:<11.3f} {:<15.3f} {:.3f}%\n"
COLUMNS = ("NAME", "TIME", "CUMULATIVE", "PERCENTAGE")


def format_header() -> str:
    return HEADER_FORMAT.format(*COLUMNS)


def format_row(name: str, duration: float, cumulative: float, percentage: float) -> str:
    return ROW_FORMAT.format(name, duration, cumulative, percentage)


def format_summary(events: Iterable[LapEvent], start_time: float, total_time: float) -> str:
    """Render ``events`` relative to ``start_time``.

    ``events`` is expected to already end with the closing stop record.
    Raises ``ZeroDivisionError`` when ``total_time`` is zero.
    """
    out = [format_header()]
    prev_time = start_time
    for event in events:
        duration = event.time - prev_time
        cumulative = event.time - start_time
        percentage = (duration / total_time) * 100
        out.append(format_row(event.name, duration, cumulative, percentage))
        prev_time = event.time
    return "".join(out)


__all__ = ["HEADER_FORMAT", "ROW_FORMAT", "format_header", "format_row", "format_summary"]
