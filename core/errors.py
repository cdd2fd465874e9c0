"""Exceptions raised by the stopwatch."""

from __future__ import annotations


class StopwatchError(RuntimeError):
    """Base class for stopwatch misuse."""


class PreconditionError(StopwatchError):
    """Raised when a reading needs ``start()`` and ``stop()`` to have run first."""

    def __init__(self, missing: str):
        super().__init__(f"stopwatch has no {missing} time; call {missing}() first")
        self.missing = missing


__all__ = ["StopwatchError", "PreconditionError"]
