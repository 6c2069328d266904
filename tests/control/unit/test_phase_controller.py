import random
import pytest
from unittest.mock import MagicMock
from smart_traffic.control.application.phase_controller import PhaseController
from smart_traffic.control.application.timing_policy import compute_durations
from smart_traffic.control.domain import Axis, Direction, LightState, Phase, TimingConfig

def axis_states(controller, axis):
    lights = controller.lights()
    return {lights[d].state for d in axis.members}

def assert_lights(controller, ns, ew):
    assert axis_states(controller, Axis.NS) == {ns}
    assert axis_states(controller, Axis.EW) == {ew}

def assert_invariant(controller, emergency_active):
    ns = axis_states(controller, Axis.NS)
    ew = axis_states(controller, Axis.EW)
    # Axis members always agree
    assert len(ns) == 1 and len(ew) == 1
    if emergency_active:
        assert ns == {LightState.GREEN} and ew == {LightState.RED}
    elif controller.phase is not Phase.ALL_RED:
        non_red = [s for s in (ns, ew) if s != {LightState.RED}]
        assert len(non_red) == 1

@pytest.fixture
def quiet(readings):
    return readings()

def test_initial_state_all_red(controller):
    assert controller.phase is Phase.ALL_RED
    for light in controller.lights().values():
        assert light.state is LightState.RED
        assert light.duration == 0

def test_first_tick_starts_ns_green(controller, quiet):
    assert controller.evaluate(100.0, quiet, False)
    assert controller.phase is Phase.NS_GREEN
    assert controller.last_phase_change == 100.0
    assert_lights(controller, LightState.GREEN, LightState.RED)
    assert controller.duration(Axis.NS) == 30
    assert controller.duration(Axis.EW) == 30

def test_green_holds_until_duration(controller, quiet):
    controller.evaluate(100.0, quiet, False)
    assert not controller.evaluate(129.9, quiet, False)
    assert controller.phase is Phase.NS_GREEN
    assert controller.last_phase_change == 100.0

    assert controller.evaluate(130.0, quiet, False)
    assert controller.phase is Phase.NS_YELLOW
    assert controller.last_phase_change == 130.0
    assert_lights(controller, LightState.YELLOW, LightState.RED)

def test_yellow_ends_on_next_tick_by_default(controller, quiet):
    controller.evaluate(100.0, quiet, False)
    controller.evaluate(130.0, quiet, False)
    assert controller.evaluate(131.0, quiet, False)
    assert controller.phase is Phase.EW_GREEN
    assert_lights(controller, LightState.RED, LightState.GREEN)

def test_same_instant_is_idempotent(controller, quiet):
    controller.evaluate(100.0, quiet, False)
    controller.evaluate(130.0, quiet, False)
    lights = controller.lights()
    assert not controller.evaluate(130.0, quiet, False)
    assert controller.phase is Phase.NS_YELLOW
    assert controller.lights() == lights

def test_full_cycle(controller, quiet):
    controller.evaluate(0.0, quiet, False)
    controller.evaluate(30.0, quiet, False)
    controller.evaluate(31.0, quiet, False)
    assert controller.phase is Phase.EW_GREEN
    assert not controller.evaluate(60.0, quiet, False)
    assert controller.evaluate(61.0, quiet, False)
    assert controller.phase is Phase.EW_YELLOW
    assert_lights(controller, LightState.RED, LightState.YELLOW)
    assert controller.evaluate(62.0, quiet, False)
    assert controller.phase is Phase.NS_GREEN
    assert_lights(controller, LightState.GREEN, LightState.RED)

def test_enforced_yellow_hold(quiet):
    config = TimingConfig(
        base_green_seconds=30, yellow_seconds=5,
        min_green_seconds=10, max_green_seconds=60,
        enforce_yellow_hold=True
    )
    controller = PhaseController(config)
    controller.evaluate(100.0, quiet, False)
    controller.evaluate(130.0, quiet, False)
    assert not controller.evaluate(131.0, quiet, False)
    assert not controller.evaluate(134.9, quiet, False)
    assert controller.phase is Phase.NS_YELLOW
    assert controller.evaluate(135.0, quiet, False)
    assert controller.phase is Phase.EW_GREEN

def test_zero_yellow_still_needs_a_later_tick(quiet):
    config = TimingConfig(
        base_green_seconds=30, yellow_seconds=0,
        min_green_seconds=10, max_green_seconds=60,
        enforce_yellow_hold=True
    )
    controller = PhaseController(config)
    controller.evaluate(0.0, quiet, False)
    controller.evaluate(30.0, quiet, False)
    assert not controller.evaluate(30.0, quiet, False)
    assert controller.evaluate(30.5, quiet, False)
    assert controller.phase is Phase.EW_GREEN

def test_policy_runs_once_per_green(timing_config, quiet):
    policy = MagicMock(side_effect=compute_durations)
    controller = PhaseController(timing_config, policy=policy)

    controller.evaluate(0.0, quiet, False)
    assert policy.call_count == 1
    for t in (5.0, 10.0, 29.0):
        controller.evaluate(t, quiet, False)
    assert policy.call_count == 1
    controller.evaluate(30.0, quiet, False)  # -> yellow
    assert policy.call_count == 1
    controller.evaluate(31.0, quiet, False)  # -> EW green
    assert policy.call_count == 2
    policy.assert_called_with(quiet, timing_config)

def test_density_sets_green_length(controller, readings):
    busy_ns = readings(True, True, False, False)
    controller.evaluate(0.0, busy_ns, False)
    assert controller.duration(Axis.NS) == 45
    assert controller.duration(Axis.EW) == 20
    assert not controller.evaluate(44.0, busy_ns, False)
    assert controller.evaluate(45.0, busy_ns, False)
    assert controller.phase is Phase.NS_YELLOW

def test_sensor_changes_do_not_alter_running_green(controller, readings):
    controller.evaluate(0.0, readings(), False)
    busy_ew = readings(False, False, True, True)
    controller.evaluate(10.0, busy_ew, False)
    assert controller.duration(Axis.NS) == 30
    assert controller.duration(Axis.EW) == 30
    # New durations only once the next green starts
    controller.evaluate(30.0, busy_ew, False)
    controller.evaluate(31.0, busy_ew, False)
    assert controller.phase is Phase.EW_GREEN
    assert controller.duration(Axis.EW) == 45
    assert controller.duration(Axis.NS) == 20

def test_emergency_preempts_ew_green(controller, readings, quiet):
    controller.evaluate(0.0, quiet, False)
    controller.evaluate(30.0, quiet, False)
    controller.evaluate(31.0, quiet, False)
    assert controller.phase is Phase.EW_GREEN

    assert controller.evaluate(32.0, quiet, True)
    assert controller.phase is Phase.EMERGENCY
    assert controller.last_phase_change == 32.0
    assert_lights(controller, LightState.GREEN, LightState.RED)

    # Held regardless of elapsed time
    assert not controller.evaluate(500.0, quiet, True)
    assert controller.phase is Phase.EMERGENCY

    busy_ew = readings(False, False, True, True)
    assert controller.evaluate(501.0, busy_ew, False)
    assert controller.phase is Phase.NS_GREEN
    assert controller.last_phase_change == 501.0
    assert_lights(controller, LightState.GREEN, LightState.RED)
    assert controller.duration(Axis.NS) == 20
    assert controller.duration(Axis.EW) == 45

def test_emergency_preempts_mid_green(controller, quiet):
    controller.evaluate(100.0, quiet, False)
    assert controller.evaluate(100.5, quiet, True)
    assert controller.phase is Phase.EMERGENCY

def test_emergency_preempts_yellow(controller, quiet):
    controller.evaluate(0.0, quiet, False)
    controller.evaluate(30.0, quiet, False)
    assert controller.phase is Phase.NS_YELLOW
    controller.evaluate(30.0, quiet, True)
    assert controller.phase is Phase.EMERGENCY
    assert_lights(controller, LightState.GREEN, LightState.RED)

def test_emergency_before_first_tick(controller, quiet):
    assert controller.evaluate(5.0, quiet, True)
    assert controller.phase is Phase.EMERGENCY
    assert_lights(controller, LightState.GREEN, LightState.RED)

def test_emergency_keeps_current_durations(controller, readings):
    controller.evaluate(0.0, readings(True, True, False, False), False)
    controller.evaluate(1.0, readings(), True)
    assert controller.duration(Axis.NS) == 45
    assert controller.duration(Axis.EW) == 20

def test_invariants_hold_over_random_run(controller, readings):
    rng = random.Random(7)
    now = 0.0
    emergency = False
    controller.evaluate(now, readings(), emergency)
    for _ in range(2000):
        now += rng.choice([0.0, 0.5, 1.0, 3.0])
        if rng.random() < 0.02:
            emergency = not emergency
        sensors = readings(*(rng.random() < 0.3 for _ in range(4)))
        controller.evaluate(now, sensors, emergency)
        assert_invariant(controller, emergency)
        for d in Direction:
            assert 10 <= controller.lights()[d].duration <= 60
