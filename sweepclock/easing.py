"""Easing functions for eased progress values."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Return a CSS-style cubic-bezier easing through (0,0), (x1,y1), (x2,y2), (1,1).

    The curve is solved for ``x`` by bisection, which is exact enough for
    on-screen positions and never leaves [0, 1].
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("cubic_bezier x control points must be in [0, 1]")

    def sample(a: float, b: float, s: float) -> float:
        return 3 * a * s * (1 - s) ** 2 + 3 * b * s * s * (1 - s) + s ** 3

    def easing(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        lo, hi = 0.0, 1.0
        s = t
        for _ in range(32):
            s = (lo + hi) / 2
            if sample(x1, x2, s) < t:
                lo = s
            else:
                hi = s
        return sample(y1, y2, s)

    return easing


fast_out_slow_in = cubic_bezier(0.4, 0.0, 0.2, 1.0)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_out_cubic": ease_out_cubic,
    "fast_out_slow_in": fast_out_slow_in,
}


def get_easing(name: str) -> Easing:
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing {name!r}, expected one of {sorted(EASINGS)}"
        ) from None
