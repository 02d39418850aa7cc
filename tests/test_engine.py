"""Tests for ClockEngine ticking, hour tracking and pop-in triggering."""

import pytest
from sweepclock.config import ClockConfig
from sweepclock.driver import ManualAngleDriver, TimedAngleDriver
from sweepclock.engine import ClockEngine
from sweepclock.state import ClockState, FrameSnapshot


def make_engine(**kwargs) -> ClockEngine:
    # 100 tps gives an exact 10 ms tick.
    kwargs.setdefault("duration_ms", 12000)
    kwargs.setdefault("tps", 100)
    return ClockEngine(ClockConfig(**kwargs))


# --- Initialization ---

def test_engine_init_defaults():
    engine = ClockEngine()
    assert engine.clock.tps == 60
    assert engine.clock.tick_number == 0
    assert isinstance(engine.driver, TimedAngleDriver)
    assert isinstance(engine.state, ClockState)
    assert engine.state.hour is None
    assert len(engine.state.pop_ins) == 12


def test_manual_control_uses_manual_driver():
    engine = make_engine(control="manual")
    assert isinstance(engine.driver, ManualAngleDriver)


# --- Sweep scenarios ---

def test_one_second_into_twelve_second_sweep():
    engine = make_engine()
    engine.run(100)
    assert engine.state.angle == 60.0
    assert engine.state.hour == 2
    assert engine.state.visible == (True,) * 3 + (False,) * 9


def test_assemble_starts_on_second_turn():
    engine = make_engine()
    engine.run(600)
    frame = engine.frame()
    assert frame.angle == 360.0
    assert frame.hour == 12
    assert frame.assemble_fraction == 0.0

    engine.run(25)
    frame = engine.frame()
    assert frame.angle == 375.0
    assert frame.assemble_fraction == 0.5


def test_sweep_wraps_to_zero():
    engine = make_engine()
    engine.run(1200)
    assert engine.state.angle == 0.0
    assert engine.state.hour == 0
    assert engine.state.visible == (True,) + (False,) * 11


# --- Pop-in triggering ---

def test_first_tick_pops_in_dot_zero():
    engine = make_engine()
    engine.step()
    dot = engine.state.pop_ins[0]
    assert dot.running is True
    assert dot.value == 0.0


def test_pop_in_runs_for_a_sixth_of_duration():
    engine = make_engine()
    engine.run(101)
    assert engine.state.pop_ins[0].value == 0.75
    engine.run(100)
    assert engine.state.pop_ins[0].value == 1.0
    assert engine.state.pop_ins[0].running is False


def test_each_first_turn_hour_triggers_its_dot():
    engine = make_engine()
    engine.run(50)
    assert engine.state.pop_ins[1].running is True
    assert engine.state.pop_ins[2].running is False
    engine.run(50)
    assert engine.state.pop_ins[2].running is True


def test_second_turn_hours_do_not_trigger():
    engine = make_engine()
    engine.run(600)
    for animation in engine.state.pop_ins:
        animation.running = False
        animation.value = 1.0
    engine.run(599)
    restarted = []
    for i, animation in enumerate(engine.state.pop_ins):
        if animation.value != 1.0:
            restarted.append(i)
    assert restarted == []
    assert len(engine.channel) == 0


def test_rapid_hours_collapse_to_latest():
    """Hours 3, 4, 5 queued before consumption only pop in dot 5."""
    engine = make_engine()
    engine.step()
    for hour in (3, 4, 5):
        engine.channel.publish(hour)
    engine.step()
    assert engine.state.pop_ins[5].running is True
    assert engine.state.pop_ins[3].running is False
    assert engine.state.pop_ins[4].running is False
    assert len(engine.channel) == 0


# --- Manual control ---

def test_set_progress_drives_angle():
    engine = make_engine(control="manual")
    engine.set_progress(0.5)
    engine.step()
    assert engine.state.angle == 360.0
    assert engine.state.hour == 12
    assert engine.state.visible[0] is False


def test_manual_jump_triggers_target_hour():
    engine = make_engine(control="manual")
    engine.step()
    engine.set_progress(0.25)
    engine.step()
    assert engine.state.hour == 6
    assert engine.state.pop_ins[6].running is True


def test_set_progress_requires_manual_control():
    engine = make_engine()
    with pytest.raises(RuntimeError):
        engine.set_progress(0.5)


# --- Layout and frames ---

def test_stroke_width_is_zero_until_layout():
    engine = make_engine()
    engine.step()
    frame = engine.frame()
    assert frame.stroke_width == 0.0
    assert frame.width == 0


def test_layout_derives_stroke_width_and_center():
    engine = make_engine()
    engine.layout(268, 268)
    frame = engine.frame()
    assert isinstance(frame, FrameSnapshot)
    assert frame.stroke_width == 11.0
    assert frame.center == (134.0, 134.0)
    assert frame.max_radius == 134.0


def test_frame_is_frozen_and_repeatable():
    engine = make_engine()
    engine.layout(240, 240)
    engine.run(137)
    first = engine.frame()
    assert engine.frame() == first
    with pytest.raises(AttributeError):
        first.angle = 0.0  # type: ignore[misc]


def test_dot_positions_follow_degree_limit():
    engine = make_engine(degree_limit=60.0, dot_easing="linear")
    engine.layout(240, 240)
    engine.run(75)
    dots = engine.frame().dots
    assert dots[0].position == 0.75
    assert dots[1].position == 0.25
    assert dots[2].position == 0.0


# --- Lifecycle ---

def test_systems_run_after_defaults():
    engine = make_engine()
    seen = []
    engine.add_system(lambda state, ctx: seen.append(state.angle))
    engine.step()
    assert seen == [0.6]


def test_run_calls_hooks():
    engine = make_engine()
    calls = []
    engine.on_start(lambda state, ctx: calls.append(("start", ctx.tick_number)))
    engine.on_stop(lambda state, ctx: calls.append(("stop", ctx.tick_number)))
    engine.run(5)
    assert calls == [("start", 0), ("stop", 5)]


def test_request_stop_ends_run():
    engine = make_engine()

    def stopper(state, ctx):
        if ctx.tick_number == 3:
            ctx.request_stop()

    engine.add_system(stopper)
    engine.run(10)
    assert engine.clock.tick_number == 3


# --- Ticks that are not a whole number of milliseconds ---

@pytest.mark.parametrize("tps", [60, 7, 144])
def test_one_second_scenario_at_any_tick_rate(tps):
    engine = make_engine(tps=tps)
    engine.run(tps)
    assert engine.state.angle == 60.0
    assert engine.state.hour == 2
    assert engine.state.visible == (True,) * 3 + (False,) * 9


@pytest.mark.parametrize("tps", [60, 7, 144])
def test_wrap_after_exact_duration_at_any_tick_rate(tps):
    engine = make_engine(tps=tps)
    engine.run(12 * tps - 1)
    assert engine.state.hour == 23
    engine.step()
    assert engine.state.angle == 0.0
    assert engine.state.hour == 0


def test_assemble_scenario_at_default_tick_rate():
    engine = ClockEngine(ClockConfig(duration_ms=12000))
    assert engine.clock.tps == 60
    engine.run(360)
    frame = engine.frame()
    assert frame.angle == 360.0
    assert frame.assemble_fraction == 0.0

    engine.run(15)
    assert engine.frame().assemble_fraction == 0.5
