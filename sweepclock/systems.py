"""System factories run by the engine once per tick."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from sweepclock.driver import AngleDriver
from sweepclock.geometry import HOURS, current_hour
from sweepclock.visibility import HourChannel, dot_visibility

if TYPE_CHECKING:
    from sweepclock.state import ClockState
    from sweepclock.types import TickContext

_logger = logging.getLogger(__name__)


def make_driver_system(driver: AngleDriver) -> Callable[[ClockState, TickContext], None]:
    """Return a system that advances the driver and publishes its angle."""

    def driver_system(state: ClockState, ctx: TickContext) -> None:
        state.angle = driver.advance()

    return driver_system


def make_hour_system(channel: HourChannel) -> Callable[[ClockState, TickContext], None]:
    """Return a system that recomputes dot visibility when the hour changes.

    First-turn hours (0-11) are also published to ``channel`` so the
    matching dot pops in.
    """

    def hour_system(state: ClockState, ctx: TickContext) -> None:
        hour = current_hour(state.angle)
        if hour == state.hour:
            return
        _logger.debug("hour %s -> %d at tick %d", state.hour, hour, ctx.tick_number)
        state.hour = hour
        state.visible = dot_visibility(hour)
        if hour < HOURS:
            channel.publish(hour)

    return hour_system


def make_pop_in_system() -> Callable[[ClockState, TickContext], None]:
    """Return a system that advances every running dot pop-in."""

    def pop_in_system(state: ClockState, ctx: TickContext) -> None:
        for animation in state.pop_ins:
            animation.advance(ctx.dt)

    return pop_in_system


def make_trigger_system(channel: HourChannel) -> Callable[[ClockState, TickContext], None]:
    """Return a system that restarts the pop-in of the latest pending hour only."""

    def trigger_system(state: ClockState, ctx: TickContext) -> None:
        hour = channel.take_latest()
        if hour is None:
            return
        _logger.debug("pop-in restart for dot %d", hour)
        state.pop_ins[hour].restart()

    return trigger_system
