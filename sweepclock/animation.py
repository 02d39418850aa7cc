"""Restartable one-shot pop-in animation for a single dot."""
from __future__ import annotations

from dataclasses import dataclass

from sweepclock.easing import Easing, ease_out


@dataclass
class DotAnimation:
    """Eased 0 -> 1 scalar over ``duration`` ms. Idle at 0 until first started."""

    duration: float
    easing: Easing = ease_out
    value: float = 0.0
    elapsed: float = 0.0
    running: bool = False

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")

    def restart(self) -> None:
        self.value = 0.0
        self.elapsed = 0.0
        self.running = True

    def advance(self, dt: float) -> None:
        if not self.running:
            return
        self.elapsed += dt
        if self.elapsed >= self.duration:
            self.value = 1.0
            self.running = False
            return
        self.value = self.easing(self.elapsed / self.duration)
