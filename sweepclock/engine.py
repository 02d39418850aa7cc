"""ClockEngine - tick loop, lifecycle hooks and frame snapshots."""

import logging
from typing import Callable

from sweepclock.clock import Clock
from sweepclock.config import ClockConfig
from sweepclock.driver import AngleDriver, ManualAngleDriver, TimedAngleDriver
from sweepclock.easing import get_easing
from sweepclock.geometry import stroke_width_for
from sweepclock.state import ClockState, FrameSnapshot, build_snapshot
from sweepclock.systems import (
    make_driver_system,
    make_hour_system,
    make_pop_in_system,
    make_trigger_system,
)
from sweepclock.types import System, TickContext
from sweepclock.visibility import HourChannel

_logger = logging.getLogger(__name__)

Hook = Callable[[ClockState, TickContext], None]


class ClockEngine:
    def __init__(self, config: ClockConfig | None = None) -> None:
        self._config = config if config is not None else ClockConfig()
        self._clock = Clock(self._config.tps)
        self._driver: AngleDriver
        if self._config.control == "manual":
            self._driver = ManualAngleDriver()
        else:
            self._driver = TimedAngleDriver(self._config.duration_ms, self._config.tps)
        self._dot_easing = get_easing(self._config.dot_easing)
        self._state = ClockState.create(
            self._config.pop_in_duration, get_easing(self._config.pop_in_easing)
        )
        self._channel = HourChannel()
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

        self.add_system(make_driver_system(self._driver))
        self.add_system(make_hour_system(self._channel))
        self.add_system(make_pop_in_system())
        self.add_system(make_trigger_system(self._channel))

    @property
    def config(self) -> ClockConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def driver(self) -> AngleDriver:
        return self._driver

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def channel(self) -> HourChannel:
        return self._channel

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def layout(self, width: int, height: int) -> None:
        """Record the viewport size once it is known and derive the stroke width."""
        self._state.width = width
        self._state.height = height
        self._state.stroke_width = stroke_width_for(width)
        _logger.debug(
            "layout %dx%d, stroke width %.1f", width, height, self._state.stroke_width
        )

    def set_progress(self, progress: float) -> None:
        if not isinstance(self._driver, ManualAngleDriver):
            raise RuntimeError("set_progress requires control='manual'")
        self._driver.set_progress(progress)

    def frame(self) -> FrameSnapshot:
        return build_snapshot(self._state, self._config.degree_limit, self._dot_easing)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._state, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(self._state, ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(self._state, ctx)
