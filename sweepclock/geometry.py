"""Pure clock-face geometry derived from the sweep angle and hour."""
from __future__ import annotations

from sweepclock.easing import Easing

HOURS = 12
DEGREES_PER_HOUR = 30
ASSEMBLE_START = 360.0
INACTIVE = -1.0


def current_hour(angle: float) -> int:
    """Hour for ``angle``, not wrapped: 0-11 on the first turn, 12-23 on the second."""
    return int(angle) // DEGREES_PER_HOUR


def step_height(max_radius: float) -> float:
    return max_radius / HOURS


def hand_length(max_radius: float, hour: int) -> float:
    """Shrink from full length to 0 over hours 0-11, then regrow over 12-23."""
    step = step_height(max_radius)
    if hour < HOURS:
        return step * (HOURS - 1 - hour)
    return step * (hour - HOURS)


def assemble_fraction(angle: float) -> float:
    """Sawtooth in [0, 1) repeating every 30 degrees, or ``INACTIVE`` before 360."""
    if angle < ASSEMBLE_START:
        return INACTIVE
    return (angle % DEGREES_PER_HOUR) / DEGREES_PER_HOUR


def assemble_distance(step: float, hour: int) -> float:
    return step * (2 * HOURS - 1 - hour)


def dot_position(
    angle: float, start_angle: float, degree_limit: float, easing: Easing
) -> float:
    """Eased progress of a dot towards its slot once the hand passes ``start_angle``."""
    travelled = min(max(angle - start_angle, 0.0), degree_limit)
    return easing(travelled / degree_limit)


def stroke_width_for(width: int) -> float:
    return float(width // 24)
