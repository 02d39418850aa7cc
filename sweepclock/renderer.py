"""Turn a FrameSnapshot into backend-neutral draw commands."""
from __future__ import annotations

import math
from dataclasses import dataclass

from sweepclock.config import ClockStyle
from sweepclock.geometry import DEGREES_PER_HOUR, INACTIVE
from sweepclock.state import FrameSnapshot
from sweepclock.types import Color, Point


@dataclass(frozen=True, slots=True)
class LineCommand:
    start: Point
    end: Point
    color: Color
    width: float
    round_cap: bool = False


@dataclass(frozen=True, slots=True)
class GradientOverlay:
    """Vertical two-color gradient over the whole viewport."""

    size: tuple[int, int]
    top: Color
    bottom: Color
    blend_mode: str


DrawCommand = LineCommand | GradientOverlay


def rotate_point(point: Point, degrees: float, pivot: Point) -> Point:
    """Rotate ``point`` clockwise on screen (y grows downwards) about ``pivot``."""
    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    dx = point[0] - pivot[0]
    dy = point[1] - pivot[1]
    return (
        pivot[0] + dx * cos_a - dy * sin_a,
        pivot[1] + dx * sin_a + dy * cos_a,
    )


def _radial_segment(
    center: Point, outer: float, inner: float, degrees: float
) -> tuple[Point, Point]:
    cx, cy = center
    return (
        rotate_point((cx, cy - outer), degrees, center),
        rotate_point((cx, cy - inner), degrees, center),
    )


def build_frame(snapshot: FrameSnapshot, style: ClockStyle) -> list[DrawCommand]:
    """Draw commands for one frame: hand, assemble marker, visible dots, overlay."""
    if snapshot.width <= 0 or snapshot.height <= 0:
        return []

    center = snapshot.center
    stroke = snapshot.stroke_width
    commands: list[DrawCommand] = []

    hand_end, hand_start = _radial_segment(center, snapshot.hand_length, 0.0, snapshot.angle)
    commands.append(
        LineCommand(hand_start, hand_end, style.hand_color, stroke, style.round_caps)
    )

    if snapshot.assemble_fraction != INACTIVE:
        outer = snapshot.max_radius - snapshot.assemble_distance * snapshot.assemble_fraction
        start, end = _radial_segment(center, outer, outer - stroke, snapshot.angle)
        commands.append(LineCommand(start, end, style.hand_color, stroke, style.round_caps))

    for dot in snapshot.dots:
        if not dot.visible:
            continue
        outer = dot.start_radius + (snapshot.max_radius - dot.start_radius) * dot.position
        start, end = _radial_segment(
            center, outer, outer - stroke * dot.pop_in, dot.index * DEGREES_PER_HOUR
        )
        commands.append(LineCommand(start, end, style.dot_color, stroke, style.round_caps))

    if style.blend_mode is not None:
        commands.append(
            GradientOverlay(
                size=(snapshot.width, snapshot.height),
                top=style.overlay_top,
                bottom=style.overlay_bottom,
                blend_mode=style.blend_mode,
            )
        )
    return commands
