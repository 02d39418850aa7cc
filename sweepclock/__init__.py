"""sweepclock - An animated sweeping clock face driven by a fixed-step tick loop."""

from sweepclock.clock import Clock
from sweepclock.config import ClockConfig, ClockStyle
from sweepclock.driver import ManualAngleDriver, TimedAngleDriver
from sweepclock.engine import ClockEngine
from sweepclock.renderer import GradientOverlay, LineCommand, build_frame
from sweepclock.state import ClockState, DotFrame, FrameSnapshot
from sweepclock.types import TickContext
from sweepclock.visibility import HourChannel, dot_visibility

__all__ = [
    "ClockEngine",
    "ClockConfig",
    "ClockStyle",
    "Clock",
    "TickContext",
    "TimedAngleDriver",
    "ManualAngleDriver",
    "ClockState",
    "DotFrame",
    "FrameSnapshot",
    "HourChannel",
    "dot_visibility",
    "LineCommand",
    "GradientOverlay",
    "build_frame",
]
