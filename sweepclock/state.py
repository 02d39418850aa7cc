"""Mutable clock state owned by the engine, and the frozen per-frame snapshot."""
from __future__ import annotations

from dataclasses import dataclass, field

from sweepclock.animation import DotAnimation
from sweepclock.easing import Easing
from sweepclock.geometry import (
    DEGREES_PER_HOUR,
    HOURS,
    assemble_distance,
    assemble_fraction,
    current_hour,
    dot_position,
    hand_length,
    step_height,
)
from sweepclock.types import Point


@dataclass
class ClockState:
    """Everything that changes between ticks. Only systems write to it."""

    pop_ins: list[DotAnimation]
    angle: float = 0.0
    hour: int | None = None
    visible: tuple[bool, ...] = field(default_factory=lambda: (False,) * HOURS)
    width: int = 0
    height: int = 0
    stroke_width: float = 0.0

    @classmethod
    def create(cls, pop_in_duration: float, pop_in_easing: Easing) -> ClockState:
        return cls(
            pop_ins=[
                DotAnimation(duration=pop_in_duration, easing=pop_in_easing)
                for _ in range(HOURS)
            ]
        )


@dataclass(frozen=True, slots=True)
class DotFrame:
    index: int
    visible: bool
    position: float
    pop_in: float
    start_radius: float


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    angle: float
    hour: int
    width: int
    height: int
    center: Point
    max_radius: float
    stroke_width: float
    hand_length: float
    assemble_fraction: float
    assemble_distance: float
    dots: tuple[DotFrame, ...]


def build_snapshot(
    state: ClockState, degree_limit: float, dot_easing: Easing
) -> FrameSnapshot:
    """Derive every drawable value from ``state`` without modifying it."""
    hour = current_hour(state.angle)
    max_radius = state.height / 2
    step = step_height(max_radius)
    dots = tuple(
        DotFrame(
            index=i,
            visible=state.visible[i],
            position=dot_position(
                state.angle, i * DEGREES_PER_HOUR, degree_limit, dot_easing
            ),
            pop_in=state.pop_ins[i].value,
            start_radius=hand_length(max_radius, i),
        )
        for i in range(HOURS)
    )
    return FrameSnapshot(
        angle=state.angle,
        hour=hour,
        width=state.width,
        height=state.height,
        center=(state.width / 2, state.height / 2),
        max_radius=max_radius,
        stroke_width=state.stroke_width,
        hand_length=hand_length(max_radius, hour),
        assemble_fraction=assemble_fraction(state.angle),
        assemble_distance=assemble_distance(step, hour),
        dots=dots,
    )
