"""Angle drivers: the single source of the sweep angle.

Both drivers expose ``angle`` and ``advance(ticks)``; the engine does not care
whether the angle comes from elapsed time or from a host control.
"""
from __future__ import annotations

SWEEP_DEGREES = 720.0


class TimedAngleDriver:
    """Sweeps 0 -> 720 degrees linearly over ``duration`` ms, then restarts at 0.

    Time is counted in whole ticks of ``1000 / tps`` ms and the angle is
    derived from integers, so it never drifts however many ticks pass.
    The default ``tps`` of 1000 makes one tick one millisecond.
    """

    def __init__(self, duration: int, tps: int = 1000) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._duration = duration
        self._tps = tps
        self._ticks = 0

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def elapsed(self) -> float:
        """Milliseconds into the current sweep."""
        return self._ticks * 1000 / self._tps

    @property
    def angle(self) -> float:
        return SWEEP_DEGREES * self._ticks * 1000 / (self._duration * self._tps)

    def advance(self, ticks: int = 1) -> float:
        if ticks < 0:
            raise ValueError("ticks must not be negative")
        self._ticks += ticks
        # Overshoot is dropped, so a tick that does not divide the duration
        # stretches the sweep by less than one tick.
        if self._ticks * 1000 >= self._duration * self._tps:
            self._ticks = 0
        return self.angle


class ManualAngleDriver:
    """Maps an externally supplied progress in [0, 1] onto [0, 720] degrees."""

    def __init__(self, progress: float = 0.0) -> None:
        self._progress = 0.0
        self.set_progress(progress)

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def angle(self) -> float:
        return SWEEP_DEGREES * self._progress

    def set_progress(self, progress: float) -> None:
        self._progress = min(max(progress, 0.0), 1.0)

    def advance(self, ticks: int = 1) -> float:
        return self.angle


AngleDriver = TimedAngleDriver | ManualAngleDriver
