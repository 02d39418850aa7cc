"""Clock configuration and the renderer style derived from it."""
from __future__ import annotations

from dataclasses import dataclass

from sweepclock.easing import EASINGS
from sweepclock.types import Color

CONTROLS = ("auto", "manual")
BLEND_MODES = ("add", "subtract", "multiply", "lighten", "darken")

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class ClockStyle:
    """Colors and stroke options consumed by the renderer."""

    hand_color: Color = WHITE
    dot_color: Color = WHITE
    round_caps: bool = False
    blend_mode: str | None = None
    overlay_top: Color = (255, 64, 128)
    overlay_bottom: Color = (64, 128, 255)


@dataclass(frozen=True)
class ClockConfig:
    """Immutable configuration for one clock face.

    Attributes:
        duration_ms: Time for one full 0-720 degree sweep. Pop-ins last a sixth of it.
        degree_limit: Degrees of sweep over which a passed dot eases into its slot.
        control: ``"auto"`` for the timed driver, ``"manual"`` for an external progress.
        blend_mode: Blend mode of the gradient overlay, or None for no overlay.
        round_caps: Draw strokes with rounded ends.
        tps: Engine ticks per second.
        dot_easing: Easing name for dot positions.
        pop_in_easing: Easing name for dot pop-ins.
        size: Square viewport edge in pixels, padding included.
        padding: Inset of the clock face inside the viewport.
    """

    duration_ms: int = 6000
    degree_limit: float = 45.0
    control: str = "auto"
    blend_mode: str | None = None
    round_caps: bool = False
    tps: int = 60
    dot_easing: str = "ease_out"
    pop_in_easing: str = "ease_out"
    size: int = 300
    padding: int = 16
    background: Color = BLACK
    hand_color: Color = WHITE
    dot_color: Color = WHITE

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.degree_limit <= 0:
            raise ValueError("degree_limit must be positive")
        if self.control not in CONTROLS:
            raise ValueError(f"control must be one of {CONTROLS}, got {self.control!r}")
        if self.blend_mode is not None and self.blend_mode not in BLEND_MODES:
            raise ValueError(
                f"blend_mode must be one of {BLEND_MODES}, got {self.blend_mode!r}"
            )
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        for field_name in ("dot_easing", "pop_in_easing"):
            name = getattr(self, field_name)
            if name not in EASINGS:
                raise ValueError(f"{field_name} {name!r} is not a known easing")
        if self.size <= 0:
            raise ValueError("size must be positive")
        if self.padding < 0 or 2 * self.padding >= self.size:
            raise ValueError("padding must leave a non-empty clock face")

    @property
    def pop_in_duration(self) -> float:
        return self.duration_ms / 6

    @property
    def face_size(self) -> int:
        return self.size - 2 * self.padding

    def style(self) -> ClockStyle:
        return ClockStyle(
            hand_color=self.hand_color,
            dot_color=self.dot_color,
            round_caps=self.round_caps,
            blend_mode=self.blend_mode,
        )
