"""Shared type aliases and the per-tick context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Point = tuple[float, float]
Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


if TYPE_CHECKING:
    from sweepclock.state import ClockState

System = Callable[["ClockState", TickContext], None]
